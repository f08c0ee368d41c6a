"""
Exception hierarchy for the jsonfile package.

Decode failures are not wrapped here: pydantic.ValidationError is raised
straight from the decoder.
"""


class JsonFileError(Exception):
    """Base exception for jsonfile errors"""

    pass


class InvalidConfigurationError(JsonFileError, ValueError):
    """Raised when the loader is constructed with an empty or blank base path"""

    pass


class MissingFileNameError(JsonFileError, ValueError):
    """Raised when no file name can be derived for a read"""

    pass


class JsonFileNotFoundError(JsonFileError, FileNotFoundError):
    """Raised when no file exists at the resolved path"""

    def __init__(self, path):
        self.path = path
        super().__init__(f"File at location: {path} doesn't exist")


class JsonFileReadError(JsonFileError, OSError):
    """Raised when an existing file cannot be read (permissions, I/O fault, encoding)"""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read file at: {path} with exception: {reason}")
