"""
Tests for FileNameResolver Primitive

Test coverage: default naming, separator stripping, extension handling,
absolute override and missing-name guards
"""

from pathlib import Path

import pytest

from src.jsonfile.errors import MissingFileNameError
from src.jsonfile.file_name_resolver import FileNameResolver


class TestClass:
    __test__ = False


class TestFileNameResolverNormalize:
    """Name normalization: identifier or type name to a name with an extension"""

    @pytest.mark.parametrize("file_name", [None, "", "   ", "\t"])
    def test_blank_identifier_uses_type_name(self, file_name):
        """Blank identifiers fall back to the simple name of the target type"""
        resolver = FileNameResolver()

        assert resolver.normalize(file_name, TestClass) == "TestClass.json"

    def test_type_name_has_no_module_qualifier(self):
        """Only __name__ is used, never the module path"""
        resolver = FileNameResolver()

        assert resolver.type_name(TestClass) == "TestClass"
        assert "." not in resolver.type_name(TestClass)

    def test_type_name_for_builtin_generic(self):
        """Builtin generics resolve to their origin's name"""
        resolver = FileNameResolver()

        assert resolver.type_name(dict) == "dict"
        assert resolver.type_name(list[int]) == "list"

    def test_type_without_name_raises(self):
        """Objects with no name cannot supply a default file name"""
        resolver = FileNameResolver()

        with pytest.raises(MissingFileNameError):
            resolver.normalize(None, object())

    @pytest.mark.parametrize(
        "file_name,expected",
        [
            ("testclass", "testclass.json"),
            ("testclass.json", "testclass.json"),
            ("config.txt", "config.txt"),
            ("archive.tar.gz", "archive.tar.gz"),
            ("data/testclass", "data/testclass.json"),
            ("v1.2/settings", "v1.2/settings.json"),
            (".env", ".env"),
            ("config/.env", "config/.env"),
            ("\\.settings\\", ".settings"),
        ],
    )
    def test_extension_added_only_when_missing(self, file_name, expected):
        """.json is appended exactly once, existing extensions are kept verbatim"""
        resolver = FileNameResolver()

        assert resolver.normalize(file_name, TestClass) == expected

    @pytest.mark.parametrize(
        "file_name",
        ["data", "\\data", "data\\", "\\data\\", "data/", "\\\\data//"],
    )
    def test_separators_are_stripped(self, file_name):
        """Leading and trailing separators of either style are removed"""
        resolver = FileNameResolver()

        assert resolver.normalize(file_name, TestClass) == "data.json"

    def test_interior_backslashes_become_forward_slashes(self):
        """Windows-style relative paths work on any host"""
        resolver = FileNameResolver()

        assert resolver.normalize("data\\testclass.json", TestClass) == "data/testclass.json"

    def test_separator_only_identifier_raises(self):
        """An identifier made only of backslashes leaves nothing to load"""
        resolver = FileNameResolver()

        with pytest.raises(MissingFileNameError):
            resolver.normalize("\\\\", TestClass)


class TestFileNameResolverResolve:
    """Composition of normalized names onto the base directory"""

    def test_resolve_joins_onto_base(self, tmp_path):
        resolver = FileNameResolver()

        assert resolver.resolve(tmp_path, None, TestClass) == tmp_path / "TestClass.json"

    def test_stripped_and_plain_identifiers_resolve_identically(self, tmp_path):
        """'\\data\\' and 'data' under the same base give the same path"""
        resolver = FileNameResolver()

        assert resolver.resolve(tmp_path, "\\data\\", TestClass) == resolver.resolve(tmp_path, "data", TestClass)

    def test_absolute_identifier_overrides_base(self, tmp_path):
        """A fully qualified identifier ignores the base directory"""
        resolver = FileNameResolver()
        base = tmp_path / "base"
        target = tmp_path / "elsewhere" / "fixture.json"

        resolved = resolver.resolve(base, str(target), TestClass)

        assert resolved == target
        assert base not in resolved.parents

    def test_absolute_identifier_keeps_root_and_gains_extension(self, tmp_path):
        """Absolute identifiers only lose trailing separators"""
        resolver = FileNameResolver()
        target = tmp_path / "fixture"

        resolved = resolver.resolve(Path("/unused"), f"{target}/", TestClass)

        assert resolved == tmp_path / "fixture.json"

    def test_resolve_is_idempotent(self, tmp_path):
        resolver = FileNameResolver()

        first = resolver.resolve(tmp_path, "data\\testclass", TestClass)
        second = resolver.resolve(tmp_path, "data\\testclass", TestClass)

        assert first == second == tmp_path / "data" / "testclass.json"
