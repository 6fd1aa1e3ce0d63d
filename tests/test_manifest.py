"""Tests for package.json discovery and parsing."""

from __future__ import annotations

import pytest

from ts_typie.exceptions import ManifestError
from ts_typie.manifest import find_manifest, load_manifest


class TestFindManifest:
    def test_found(self, project):
        root = project({"name": "app"})
        assert find_manifest(root) == root / "package.json"

    def test_absent(self, tmp_path):
        assert find_manifest(tmp_path) is None

    def test_directory_named_package_json_ignored(self, tmp_path):
        (tmp_path / "package.json").mkdir()
        assert find_manifest(tmp_path) is None


class TestLoadManifest:
    def test_both_fields_in_declaration_order(self, project):
        root = project(
            {
                "dependencies": {"react": "^18.0.0", "lodash": "1.0.0"},
                "devDependencies": {"jest": "^29.0.0", "@types/react": "^18.0.0"},
            }
        )
        manifest = load_manifest(root / "package.json")
        assert manifest.dependencies == ["react", "lodash"]
        assert manifest.dev_dependencies == ["jest", "@types/react"]
        assert manifest.names == ["react", "lodash", "jest", "@types/react"]

    def test_fields_optional(self, project):
        root = project({"name": "app", "version": "1.0.0"})
        manifest = load_manifest(root / "package.json")
        assert manifest.names == []

    def test_empty_dev_dependencies(self, project):
        root = project({"dependencies": {"lodash": "1.0.0"}, "devDependencies": {}})
        assert load_manifest(root / "package.json").names == ["lodash"]

    def test_version_values_not_interpreted(self, project):
        root = project({"dependencies": {"a": None, "b": {"weird": True}}})
        assert load_manifest(root / "package.json").dependencies == ["a", "b"]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text("{ not json")
        with pytest.raises(ManifestError, match="cannot read"):
            load_manifest(path)

    def test_non_object_document(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(ManifestError, match="JSON object"):
            load_manifest(path)

    def test_non_object_dependencies(self, project):
        root = project({"dependencies": ["lodash"]})
        with pytest.raises(ManifestError, match="'dependencies'"):
            load_manifest(root / "package.json")
