"""Exceptions raised while converting a dump."""


class ConversionError(Exception):
    """Base exception for conversion failures; every one of them aborts the run."""


class InputFileError(ConversionError):
    """Raised when an input file cannot be opened or read."""

    def __init__(self, path, cause):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Cannot read input file {self.path}: {cause}")


class OutputFileError(ConversionError):
    """Raised when the output file cannot be created."""

    def __init__(self, path, cause):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Cannot create output file {self.path}: {cause}")


class ParseError(ConversionError):
    """Raised on malformed markup or attribute text that is not valid UTF-8."""

    def __init__(self, message: str, path=None, position=None):
        self.path = str(path) if path is not None else None
        self.position = position
        where = f"Error in {self.path}" if self.path else "Error"
        if position:
            where += f" at line {position[0]}, column {position[1]}"
        super().__init__(f"{where}: {message}")


class MissingAttributeError(ConversionError):
    """Raised when a record lacks an attribute its kind requires."""

    def __init__(self, kind: str, attribute: str, key=None):
        self.kind = kind
        self.attribute = attribute
        self.key = key
        where = f" (record {key})" if key is not None else ""
        super().__init__(f"`{attribute}` not found in attributes of {kind}{where}")


class SerializationError(ConversionError):
    """Raised when a statement cannot be written to the output stream."""
