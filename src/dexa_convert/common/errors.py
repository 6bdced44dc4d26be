class DexaConvertError(Exception):
    """Base class for every fatal conversion failure."""


class DecodeError(DexaConvertError):
    """Raised when the export bytes are not valid BOM-prefixed UTF-16."""


class EmptyFileError(DexaConvertError):
    """Raised when an export contains no non-blank line."""


class UnknownModalityError(DexaConvertError):
    """Raised when the header matches none of the known scan layouts."""


class RowParseError(DexaConvertError):
    """Raised when a data row cannot be parsed under the file's modality."""

    def __init__(self, message: str, line_number: int | None = None):
        self.message = message
        self.line_number = line_number
        if line_number is None:
            super().__init__(message)
        else:
            super().__init__(f"line {line_number}: {message}")
