"""
Tests for extractor.staging
"""

import shutil

import pytest

from genclass.extractor import staging
from genclass.extractor.staging import remove_tree, staging_directory


class TestStagingDirectory:
    """Tests for staging_directory context manager."""

    def test_created_under_parent_and_removed(self, tmp_path):
        with staging_directory(tmp_path / "tmp") as directory:
            assert directory.is_dir()
            assert directory.parent == tmp_path / "tmp"
            (directory / "a" / "b").mkdir(parents=True)
            (directory / "a" / "b" / "C.class").write_bytes(b"x")

        assert not directory.exists()

    def test_removed_when_body_raises(self, tmp_path):
        with pytest.raises(RuntimeError):
            with staging_directory(tmp_path) as directory:
                (directory / "X.class").write_bytes(b"x")
                raise RuntimeError("boom")

        assert not directory.exists()

    def test_fresh_directory_per_use(self, tmp_path):
        with staging_directory(tmp_path) as first:
            with staging_directory(tmp_path) as second:
                assert first != second

    def test_cleanup_failure_logged_not_raised(self, tmp_path, monkeypatch, caplog):
        def failing_rmtree(path):
            raise PermissionError("denied")

        monkeypatch.setattr(staging.shutil, "rmtree", failing_rmtree)

        with staging_directory(tmp_path) as directory:
            pass

        assert directory.exists()
        assert "Failed to remove staging directory" in caplog.text
        monkeypatch.undo()
        shutil.rmtree(directory)


class TestRemoveTree:
    """Tests for remove_tree."""

    def test_missing_directory_is_fine(self, tmp_path):
        assert remove_tree(tmp_path / "missing")

    def test_removes_nested_tree(self, tmp_path):
        root = tmp_path / "root"
        (root / "x" / "y").mkdir(parents=True)
        (root / "x" / "y" / "f").write_text("data")

        assert remove_tree(root)
        assert not root.exists()
