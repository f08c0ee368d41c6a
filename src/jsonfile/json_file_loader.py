"""
JsonFileLoader Component

Locate a JSON file under a base directory and decode it into typed values.

Composes:
- FileNameResolver (primitive) - identifier/type name to path
- FileReader (primitive) - existence check and scoped read
- Logger (primitive) - logs resolution, loads and failures

Decoding is delegated to pydantic's TypeAdapter. Validation errors from the
decoder propagate unchanged.
"""

import os
from pathlib import Path
from typing import Any, Optional, Type, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from src.jsonfile.errors import InvalidConfigurationError, JsonFileError, MissingFileNameError
from src.jsonfile.file_name_resolver import FileNameResolver
from src.jsonfile.file_reader import FileReader
from src.jsonfile.logger import Logger

T = TypeVar("T")

BASE_PATH_ENV_VAR = "JSONFILE_BASE_PATH"


class JsonFileLoader:
    """Loads single values or lists of values of a given type from JSON files"""

    def __init__(self, base_path: Optional[Union[str, Path]] = None, logger: Optional[Logger] = None):
        """
        Initialize the loader.

        Args:
            base_path: Directory holding the JSON files, absolute or relative to
                the current working directory. Defaults to the working directory.
            logger: Logger to use. A stdout Logger is created if None.

        Raises:
            InvalidConfigurationError: If base_path is empty or whitespace
        """
        self._base_path = self._root_base_path(base_path)
        self.resolver = FileNameResolver()
        self.reader = FileReader()
        self.logger = logger if logger is not None else Logger()

    @classmethod
    def from_env(cls, logger: Optional[Logger] = None) -> "JsonFileLoader":
        """
        Build a loader whose base path comes from JSONFILE_BASE_PATH.

        Falls back to the current working directory when the variable is unset.

        Raises:
            InvalidConfigurationError: If the variable is set but blank
        """
        return cls(os.environ.get(BASE_PATH_ENV_VAR), logger=logger)

    @staticmethod
    def _root_base_path(base_path: Optional[Union[str, Path]]) -> Path:
        """Return base_path as an absolute Path, rooted at the working directory if relative"""
        cwd = Path(os.getcwd())
        if base_path is None:
            return cwd

        raw = str(base_path)
        if not raw.strip():
            raise InvalidConfigurationError("'base_path' cannot be empty or whitespace.")

        if Path(raw).is_absolute():
            return Path(raw)

        # "\\data" is relative on POSIX; keep it under the working directory
        return cwd / raw.replace("\\", "/").lstrip("/")

    @property
    def base_path(self) -> Path:
        """Absolute directory the loader resolves file names against"""
        return self._base_path

    def resolve_path(self, target_type: Any, file_name: Optional[str] = None) -> Path:
        """
        Resolve the path a load of target_type/file_name would read.

        Does not touch the filesystem.
        """
        return self.resolver.resolve(self._base_path, file_name, target_type)

    def exists(self, target_type: Any, file_name: Optional[str] = None) -> bool:
        """Check whether the resolved file for target_type/file_name exists"""
        return self.reader.exists(self.resolve_path(target_type, file_name))

    def load(self, target_type: Type[T], file_name: Optional[str] = None) -> T:
        """
        Load a single value of target_type.

        Args:
            target_type: Type to decode into (pydantic model, dataclass, dict, ...)
            file_name: Optional file name or path. If blank, the type's name is used.

        Returns:
            Decoded value

        Raises:
            JsonFileNotFoundError: If the resolved file doesn't exist
            JsonFileReadError: If the file can't be read
            pydantic.ValidationError: If the content is not valid JSON for target_type
        """
        path, text = self._read(target_type, file_name)
        value = self._decode(TypeAdapter(target_type), text, path)
        self.logger.info("Loaded JSON file", context={"path": str(path), "type": self._type_label(target_type)})
        return value

    def load_many(self, target_type: Type[T], file_name: Optional[str] = None) -> list[T]:
        """
        Load a JSON array of target_type values.

        The whole file is read and decoded before anything is returned.

        Args:
            target_type: Element type to decode into
            file_name: Optional file name or path. If blank, the type's name is used.

        Returns:
            list: Decoded values (empty for "[]")

        Raises:
            JsonFileNotFoundError: If the resolved file doesn't exist
            JsonFileReadError: If the file can't be read
            pydantic.ValidationError: If the content is not a JSON array of target_type
        """
        path, text = self._read(target_type, file_name)
        values = self._decode(TypeAdapter(list[target_type]), text, path)
        self.logger.info(
            "Loaded JSON file",
            context={"path": str(path), "type": self._type_label(target_type), "count": len(values)},
        )
        return values

    def _type_label(self, target_type: Any) -> str:
        try:
            return self.resolver.type_name(target_type)
        except MissingFileNameError:
            return repr(target_type)

    def _read(self, target_type: Any, file_name: Optional[str]) -> tuple[Path, str]:
        """Resolve the path and read its text, logging failures"""
        path = self.resolve_path(target_type, file_name)
        self.logger.debug("Resolved JSON file path", context={"file_name": file_name, "path": str(path)})

        try:
            return path, self.reader.read_text(path)
        except JsonFileError as e:
            self.logger.error(str(e), context={"path": str(path), "error_type": type(e).__name__})
            raise

    def _decode(self, adapter: TypeAdapter, text: str, path: Path) -> Any:
        """Decode text with adapter, logging and re-raising decoder errors"""
        try:
            return adapter.validate_json(text)
        except ValidationError as e:
            self.logger.error(
                "Failed to decode JSON file",
                context={"path": str(path), "error_count": e.error_count()},
            )
            raise

    def close(self) -> None:
        """No-op: the loader holds no resources between calls."""

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False
