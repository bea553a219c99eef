"""
Configuration management for csv2jsonl

Uses Pydantic for validation and environment variable loading.
"""

import os
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class LoggingConfig(BaseModel):
    """Logging configuration"""
    level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    file_path: Optional[str] = Field(default_factory=lambda: os.getenv("LOG_FILE"), description="Log file path")


class ConverterConfig(BaseModel):
    """CSV to JSON Lines conversion settings"""
    normalize_newlines: bool = Field(
        default_factory=lambda: _env_flag("CSV2JSONL_NORMALIZE_NEWLINES", "true"),
        description="Rewrite \\r\\n and lone \\r to \\n before splitting rows",
    )
    preview_lines: int = Field(
        default_factory=lambda: int(os.getenv("CSV2JSONL_PREVIEW_LINES", "5")),
        description="Number of output lines shown after a conversion",
        validate_default=True,
    )
    input_extension: str = Field(default=".csv", description="Accepted source file extension")
    output_extension: str = Field(default=".jsonl", description="Extension of the converted artifact")

    @field_validator("preview_lines")
    @classmethod
    def check_preview_lines(cls, value: int) -> int:
        if value < 0:
            raise ValueError("preview_lines must be >= 0")
        return value


class ProjectConfig(BaseModel):
    """Project-wide configuration"""
    data_output_dir: Optional[str] = Field(default_factory=lambda: os.getenv("DATA_OUTPUT_DIR"))


class Config(BaseModel):
    """Main configuration class"""
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    converter: ConverterConfig = Field(default_factory=ConverterConfig)
    project: ProjectConfig = Field(default_factory=ProjectConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables"""
        return cls()


# Global config instance
config = Config.from_env()


def get_config() -> Config:
    """Get the global configuration instance"""
    return config


def reload_config() -> Config:
    """Rebuild the global configuration from the current environment"""
    global config
    config = Config.from_env()
    return config
