"""
Exceptions raised by csv2jsonl.
"""


class Csv2JsonlError(Exception):
    """Base exception for conversion errors"""
    pass


class EmptyInputError(Csv2JsonlError):
    """The input text contains no lines at all"""
    pass


class NoValidDataError(Csv2JsonlError):
    """Conversion succeeded but no row qualified for output"""
    pass


class InvalidInputFileError(Csv2JsonlError):
    """The source file is missing, not a CSV file, or not UTF-8 text"""
    pass
