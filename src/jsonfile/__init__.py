"""jsonfile package: locate JSON files by type name or path and decode them into typed values."""

from src.jsonfile.errors import (
    InvalidConfigurationError,
    JsonFileError,
    JsonFileNotFoundError,
    JsonFileReadError,
    MissingFileNameError,
)
from src.jsonfile.file_name_resolver import FileNameResolver
from src.jsonfile.file_reader import FileReader
from src.jsonfile.json_file_loader import JsonFileLoader
from src.jsonfile.logger import Logger

__all__ = [
    "FileNameResolver",
    "FileReader",
    "InvalidConfigurationError",
    "JsonFileError",
    "JsonFileLoader",
    "JsonFileNotFoundError",
    "JsonFileReadError",
    "Logger",
    "MissingFileNameError",
]
