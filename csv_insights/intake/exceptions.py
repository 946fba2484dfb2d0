class IntakeError(Exception):
    """Base exception for reading and parsing uploaded CSV files."""


class MissingFileError(IntakeError):
    """Raised when a slot has no file or the path does not exist."""


class EmptyFileError(IntakeError):
    """Raised when the file is zero-length."""


class FileReadError(IntakeError):
    """Raised when the file cannot be read or yields no text."""


class HeaderParseError(IntakeError):
    """Raised when no header line can be found."""
