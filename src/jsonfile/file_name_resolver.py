"""
FileNameResolver Primitive

Turn an optional file identifier (or a target type's name) into a concrete
path under a base directory.
"""

from pathlib import Path
from typing import Any, Optional

from src.jsonfile.errors import MissingFileNameError

DEFAULT_EXTENSION = ".json"


class FileNameResolver:
    """Normalize file names and compose them onto a base directory"""

    SEPARATORS = "/\\"

    def type_name(self, target_type: Any) -> str:
        """Return the simple (unqualified) name of target_type

        Args:
            target_type: Class or type alias being loaded

        Returns:
            str: e.g. "TestClass" for mypkg.models.TestClass

        Raises:
            MissingFileNameError: If the type has no usable name
        """
        name = getattr(target_type, "__name__", None) or getattr(target_type, "_name", None)
        if not name:
            raise MissingFileNameError(f"Cannot derive a file name from {target_type!r}")
        return name

    def normalize(self, file_name: Optional[str], target_type: Any) -> str:
        """Normalize a file identifier into a name carrying an extension

        Blank identifiers fall back to the target type's name. Leading and
        trailing separators ('/' or '\\') are stripped, except that a path
        which is absolute on this host keeps its root.

        Args:
            file_name: Identifier supplied by the caller, may be None
            target_type: Type whose name is used when file_name is blank

        Returns:
            str: Normalized name, e.g. "data/testclass.json"

        Raises:
            MissingFileNameError: If nothing is left after stripping separators
        """
        if file_name is None or not file_name.strip():
            file_name = self.type_name(target_type)

        if Path(file_name).is_absolute():
            name = file_name.rstrip(self.SEPARATORS).replace("\\", "/")
        else:
            name = file_name.strip(self.SEPARATORS).replace("\\", "/")

        if not name:
            raise MissingFileNameError(f"File name {file_name!r} is empty once separators are stripped")

        return self.with_extension(name)

    def with_extension(self, name: str) -> str:
        """Append .json unless the final path component already has an extension

        Dot-files such as ".env" count as having one.
        """
        last = Path(name)
        if last.suffix or last.name.startswith("."):
            return name
        return f"{name}{DEFAULT_EXTENSION}"

    def resolve(self, base_path: Path, file_name: Optional[str], target_type: Any) -> Path:
        """Compose the normalized name onto base_path

        An absolute file_name overrides base_path entirely.

        Args:
            base_path: Absolute directory the loader was configured with
            file_name: Identifier supplied by the caller, may be None
            target_type: Type whose name is used when file_name is blank

        Returns:
            Path: Resolved file path
        """
        return base_path / self.normalize(file_name, target_type)
