"""
Conversion result models using Pydantic for validation and type safety.
"""

import json
from enum import Enum
from typing import List, Optional, Dict
from pydantic import BaseModel, Field


class RowStatus(str, Enum):
    """What happened to a single data line"""
    CONVERTED = "converted"
    BLANK = "blank"
    NO_CONTENT = "no_content"
    MALFORMED = "malformed"


class RowOutcome(BaseModel):
    """Per-row result of a conversion pass"""
    line_number: int = Field(..., description="1-based physical line number in the source text")
    status: RowStatus = Field(..., description="Outcome for this line")
    content: str = Field(default="", description="Raw line as read from the source")
    record: Optional[Dict[str, str]] = Field(None, description="Mapped record, only when converted")
    reason: Optional[str] = Field(None, description="Failure description, only when malformed")

    @property
    def included(self) -> bool:
        return self.status == RowStatus.CONVERTED


class SkippedRow(BaseModel):
    """Diagnostics entry for a malformed line"""
    line_number: int = Field(..., description="1-based physical line number")
    content: str = Field(..., description="Raw line content")
    reason: str = Field(..., description="Why the line could not be converted")


class ConversionResult(BaseModel):
    """JSON Lines output of one conversion call"""
    lines: str = Field(default="", description="Concatenated JSON lines, each terminated by \\n")
    count: int = Field(default=0, description="Number of rows emitted")
    skipped: List[SkippedRow] = Field(default_factory=list, description="Malformed rows left out")

    def __str__(self) -> str:
        return f"ConversionResult(count={self.count}, skipped={len(self.skipped)}, size={self.size_bytes}B)"

    @property
    def is_empty(self) -> bool:
        return self.lines == ""

    @property
    def size_bytes(self) -> int:
        return len(self.lines.encode("utf-8"))

    @property
    def size_mb(self) -> float:
        return self.size_bytes / 1024 / 1024

    def preview(self, max_lines: int = 5) -> str:
        """First ``max_lines`` output lines joined by newlines"""
        if max_lines <= 0:
            return ""
        return "\n".join(self.lines.split("\n")[:max_lines])

    def records(self) -> List[Dict[str, str]]:
        """Parse the emitted lines back into dictionaries"""
        return [json.loads(line) for line in self.lines.split("\n") if line]
