"""
Unit Tests for CompilationUnit and Manifest models.
"""

import pytest

from genclass.core.models.units import CompilationUnit, Manifest


class TestCompilationUnit:
    """Tests for CompilationUnit dataclass."""

    def test_package_path_when_package_then_slash_separated(self):
        unit = CompilationUnit("com.example.gen", ("Foo",))
        assert unit.package_path == "com/example/gen/"

    def test_package_path_when_default_package_then_empty(self):
        assert CompilationUnit(None, ("Foo",)).package_path == ""

    def test_empty_package_normalized_to_none(self):
        unit = CompilationUnit("", ("Foo",))
        assert unit.pkg is None
        assert unit.package_path == ""

    def test_top_level_list_converted_to_tuple(self):
        unit = CompilationUnit("a", ["X", "Y"])  # type: ignore[arg-type]
        assert unit.top_level == ("X", "Y")

    def test_top_level_with_slash_rejected(self):
        with pytest.raises(ValueError, match="must not contain"):
            CompilationUnit("a", ("b/C",))

    def test_is_frozen(self):
        unit = CompilationUnit("a", ("B",))
        with pytest.raises(AttributeError):
            unit.pkg = "c"  # type: ignore[misc]

    def test_from_dict_defaults(self):
        unit = CompilationUnit.from_dict({"pkg": "p"})
        assert unit.top_level == ()
        assert unit.generated_by_annotation_processor is False
        assert unit.path is None

    def test_from_dict_reads_all_fields(self):
        unit = CompilationUnit.from_dict({
            "pkg": "a.b",
            "top_level": ["Foo", "Bar"],
            "generated_by_annotation_processor": True,
            "path": "a/b/Foo.java",
        })
        assert unit == CompilationUnit("a.b", ("Foo", "Bar"), True, path="a/b/Foo.java")


class TestManifest:
    """Tests for Manifest dataclass."""

    def test_list_of_units_converted_to_tuple(self):
        gen = CompilationUnit("a", ("G",), True)
        user = CompilationUnit("a", ("U",), False)
        manifest = Manifest([gen, user])  # type: ignore[arg-type]

        assert manifest.units == (gen, user)
        assert len(manifest) == 2

    def test_empty_manifest(self):
        manifest = Manifest.from_dict({"schema_version": 1, "compilation_units": []})
        assert len(manifest) == 0
        assert manifest.units == ()

    def test_units_keep_manifest_order(self):
        manifest = Manifest.from_dict({
            "compilation_units": [
                {"pkg": "z", "top_level": ["Z"]},
                {"pkg": "a", "top_level": ["A"]},
            ]
        })
        assert [u.pkg for u in manifest.units] == ["z", "a"]
