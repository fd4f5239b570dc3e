"""Unit tests for delete_files."""

import os
import stat
from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest
from treeops.engine.deleter import delete_files
from treeops.engine.models import ActionEvent, ActionType
from treeops.engine.observers import ignore_action


class TestDeleteWholeTree:
    """Tests for delete_files without a filter."""

    def test_removes_directory_itself(self, nested_tree: Path) -> None:
        """The root and everything below it is removed; the root is returned."""
        result = delete_files(nested_tree, observer=ignore_action)

        assert result == [str(nested_tree)]
        assert not nested_tree.exists()

    def test_missing_directory_is_not_an_error(self, tmp_path: Path) -> None:
        """Forced removal ignores a root that does not exist."""
        missing = tmp_path / "missing"

        assert delete_files(missing, observer=ignore_action) == [str(missing)]

    def test_read_only_file_in_writable_directory_is_removed(self, sample_tree: Path) -> None:
        """A read-only file does not block removal when its directory is writable."""
        (sample_tree / "a.js").chmod(stat.S_IRUSR)

        delete_files(sample_tree, observer=ignore_action)

        assert not sample_tree.exists()

    def test_vanished_entry_is_ignored(self, sample_tree: Path) -> None:
        """An entry removed concurrently does not abort the removal."""

        def rmtree(path: str, onexc: Callable[..., None]) -> None:
            onexc(os.unlink, os.path.join(path, "a.js"), FileNotFoundError(2, "gone"))

        with patch("treeops.engine.deleter.shutil.rmtree", side_effect=rmtree):
            assert delete_files(sample_tree, observer=ignore_action) == [str(sample_tree)]

    def test_permission_error_propagates_without_chmod(self, sample_tree: Path) -> None:
        """A denied removal is raised as-is and no permissions are changed."""
        parent_mode = stat.S_IMODE(sample_tree.parent.stat().st_mode)

        def rmtree(path: str, onexc: Callable[..., None]) -> None:
            onexc(os.rmdir, path, PermissionError(13, "Permission denied"))

        with (
            patch("treeops.engine.deleter.shutil.rmtree", side_effect=rmtree),
            patch("os.chmod") as chmod,
            pytest.raises(PermissionError),
        ):
            delete_files(sample_tree, observer=ignore_action)

        chmod.assert_not_called()
        assert stat.S_IMODE(sample_tree.parent.stat().st_mode) == parent_mode

    @pytest.mark.skipif(os.geteuid() == 0, reason="root bypasses directory permissions")
    def test_read_only_parent_keeps_its_mode(self, tmp_path: Path) -> None:
        """Removing a tree inside a read-only directory fails and leaves it read-only."""
        protected = tmp_path / "protected"
        target = protected / "target"
        (target / "sub").mkdir(parents=True)
        (target / "sub" / "f.txt").write_text("f")
        protected.chmod(stat.S_IRUSR | stat.S_IXUSR)

        try:
            with pytest.raises(PermissionError):
                delete_files(target, observer=ignore_action)
            assert stat.S_IMODE(protected.stat().st_mode) == stat.S_IRUSR | stat.S_IXUSR
            assert target.is_dir()
        finally:
            protected.chmod(stat.S_IRWXU)

    def test_emits_tree_event(self, sample_tree: Path, events: list[ActionEvent]) -> None:
        """Bulk removal reports one DELETE_TREE event."""
        delete_files(sample_tree, observer=events.append)

        assert events == [ActionEvent(ActionType.DELETE_TREE, str(sample_tree))]


class TestDeleteFiltered:
    """Tests for delete_files with a filter."""

    def test_extension_scenario(self, sample_tree: Path) -> None:
        """Matches are removed, the emptied subdirectory pruned, the rest kept."""
        result = delete_files(sample_tree, ".js", observer=ignore_action)

        assert sorted(result) == sorted(
            [
                os.path.join(str(sample_tree), "a.js"),
                os.path.join(str(sample_tree), "sub", "c.js"),
            ]
        )
        assert not (sample_tree / "sub").exists()
        assert (sample_tree / "b.txt").exists()
        assert sample_tree.is_dir()

    def test_directories_with_remaining_files_persist(self, nested_tree: Path) -> None:
        """Only directories left with zero entries are pruned."""
        delete_files(nested_tree, ".md", observer=ignore_action)

        assert not (nested_tree / "docs").exists()
        assert not (nested_tree / "README.md").exists()
        assert (nested_tree / "lib" / "deep" / "index.js").exists()
        assert (nested_tree / "index.ts").exists()

    def test_transitively_emptied_directories_pruned(self, nested_tree: Path) -> None:
        """A parent emptied by pruning its children is pruned too."""
        delete_files(nested_tree, ".js", observer=ignore_action)

        assert not (nested_tree / "lib").exists()
        assert (nested_tree / "docs" / "guide.md").exists()
        assert (nested_tree / "index.ts").exists()

    def test_already_empty_directory_pruned(self, nested_tree: Path) -> None:
        """A directory with no entries at all is removed as well."""
        delete_files(nested_tree, ".md", observer=ignore_action)

        assert not (nested_tree / "empty").exists()

    def test_root_is_never_pruned(self, sample_tree: Path) -> None:
        """The root stays even if every file in it matched."""
        (sample_tree / "b.txt").unlink()

        delete_files(sample_tree, ".js", observer=ignore_action)

        assert sample_tree.is_dir()
        assert list(sample_tree.iterdir()) == []

    def test_pruned_directories_not_in_result(self, sample_tree: Path) -> None:
        """Only files appear in the result."""
        result = delete_files(sample_tree, ".js", observer=ignore_action)

        assert os.path.join(str(sample_tree), "sub") not in result

    def test_base_name_and_extension(self, nested_tree: Path) -> None:
        """Both conditions must hold for a file to be removed."""
        result = delete_files(nested_tree, ".js", "index", observer=ignore_action)

        assert len(result) == 3
        assert (nested_tree / "index.ts").exists()
        assert (nested_tree / "lib" / "util.js").exists()
        assert not (nested_tree / "lib" / "deep").exists()

    def test_second_run_is_noop(self, sample_tree: Path) -> None:
        """Repeating the same filtered delete finds nothing and raises nothing."""
        delete_files(sample_tree, ".js", observer=ignore_action)

        assert delete_files(sample_tree, ".js", observer=ignore_action) == []
        assert (sample_tree / "b.txt").exists()

    def test_events(self, sample_tree: Path, events: list[ActionEvent]) -> None:
        """File removals and prunes are reported; prune follows the directory's files."""
        delete_files(sample_tree, ".js", observer=events.append)

        sub = os.path.join(str(sample_tree), "sub")
        c_js = os.path.join(sub, "c.js")
        assert ActionEvent(ActionType.DELETE, c_js) in events
        assert ActionEvent(ActionType.PRUNE, sub) in events
        assert events.index(ActionEvent(ActionType.DELETE, c_js)) < events.index(
            ActionEvent(ActionType.PRUNE, sub)
        )
        assert len(events) == 3

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        """Filtered mode propagates FileNotFoundError for a missing root."""
        with pytest.raises(FileNotFoundError):
            delete_files(tmp_path / "missing", ".js", observer=ignore_action)

    def test_removal_failure_aborts(self, sample_tree: Path) -> None:
        """A failing removal propagates; nothing after it is processed."""
        with (
            patch("treeops.engine.deleter.os.remove", side_effect=PermissionError("denied")),
            pytest.raises(PermissionError),
        ):
            delete_files(sample_tree, ".js", observer=ignore_action)

        assert (sample_tree / "a.js").exists()
        assert (sample_tree / "sub" / "c.js").exists()
