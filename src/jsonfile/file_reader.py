"""
FileReader primitive for reading JSON file contents as text.

Classifies failures into not-found and read errors; decoding is left to the caller.
"""

from pathlib import Path
from typing import Optional, Union

from src.jsonfile.errors import JsonFileNotFoundError, JsonFileReadError, MissingFileNameError


class FileReader:
    """Reads whole files as text."""

    # utf-8-sig drops a leading byte order mark if present
    ENCODING = "utf-8-sig"

    def _to_path(self, file_path: Union[str, Path]) -> Path:
        """
        Convert string path to Path object.

        Args:
            file_path: String or Path to convert

        Returns:
            Path: Path object
        """
        return Path(file_path)

    def read_text(self, file_path: Optional[Union[str, Path]]) -> str:
        """
        Read the full contents of a file.

        Args:
            file_path: Path to the file

        Returns:
            str: File contents

        Raises:
            MissingFileNameError: If file_path is None
            JsonFileNotFoundError: If no file exists at file_path
            JsonFileReadError: If the file exists but cannot be read or decoded as UTF-8
        """
        if file_path is None:
            raise MissingFileNameError("file_path must not be None")

        path = self._to_path(file_path)

        if not self.exists(path):
            raise JsonFileNotFoundError(path)

        try:
            with open(path, "r", encoding=self.ENCODING) as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise JsonFileReadError(path, str(e)) from e

    def exists(self, file_path: Union[str, Path]) -> bool:
        """
        Check if a regular file exists.

        Args:
            file_path: Path to check

        Returns:
            bool: True if a file exists, False otherwise (directories count as missing)
        """
        return self._to_path(file_path).is_file()
