"""
csv2jsonl: convert CSV files into JSON Lines.
"""

from csv2jsonl.converter import convert_csv_text
from csv2jsonl.errors import Csv2JsonlError, EmptyInputError, InvalidInputFileError, NoValidDataError
from csv2jsonl.schemas.conversion import ConversionResult

__version__ = "0.1.0"

__all__ = [
    "convert_csv_text",
    "ConversionResult",
    "Csv2JsonlError",
    "EmptyInputError",
    "InvalidInputFileError",
    "NoValidDataError",
]
