"""Tests for the TaskPath value object (materialized path codec)."""

import pytest

from app.domain.value_objects.core import (
    ROOT_PATH,
    TaskPath,
    encode_path,
    is_descendant_path,
)


class TestEncode:
    def test_root_task_path(self) -> None:
        assert encode_path(None, None) == "/"
        assert TaskPath.for_child_of(None, None).is_root()

    def test_child_of_root(self) -> None:
        assert encode_path("/", 1) == "/1/"

    def test_child_appends_parent_id(self) -> None:
        assert encode_path("/1/4/", 9) == "/1/4/9/"

    def test_parent_id_without_parent_path_rejected(self) -> None:
        with pytest.raises(ValueError, match="parent_path"):
            TaskPath.for_child_of(None, 3)

    def test_from_ancestors_round_trip(self) -> None:
        path = TaskPath.from_ancestors([1, 4, 9])
        assert path.value == "/1/4/9/"
        assert path.ancestor_ids == (1, 4, 9)
        assert TaskPath.from_ancestors([]).value == ROOT_PATH


class TestDecode:
    def test_ancestor_ids_in_root_first_order(self) -> None:
        path = TaskPath("/3/12/120/")
        assert path.ancestor_ids == (3, 12, 120)
        assert path.parent_id == 120
        assert path.depth == 3

    def test_root_has_no_ancestors(self) -> None:
        root = TaskPath.root()
        assert root.ancestor_ids == ()
        assert root.parent_id is None
        assert root.depth == 0

    @pytest.mark.parametrize("bad", ["", "1/", "/1", "//", "/a/", "/1//2/", "/-1/"])
    def test_malformed_paths_rejected(self, bad: str) -> None:
        with pytest.raises(ValueError, match="Invalid task path"):
            TaskPath(bad)


class TestDescendants:
    def test_subtree_prefix(self) -> None:
        assert TaskPath("/1/").subtree_prefix(4) == "/1/4/"
        assert TaskPath.root().subtree_prefix(7) == "/7/"

    def test_descendant_paths_match(self) -> None:
        assert is_descendant_path("/1/4/", "/", 1)
        assert is_descendant_path("/1/", "/", 1)
        assert not is_descendant_path("/", "/", 1)

    def test_numeric_prefixes_do_not_collide(self) -> None:
        """Task 12 must not claim rows under task 120 or 1."""
        assert not is_descendant_path("/120/", "/", 12)
        assert not is_descendant_path("/1/", "/", 12)
        assert not is_descendant_path("/5/120/", "/5/", 12)
        assert is_descendant_path("/5/12/130/", "/5/", 12)

    def test_has_ancestor(self) -> None:
        path = TaskPath("/1/12/")
        assert path.has_ancestor(12)
        assert not path.has_ancestor(2)

    def test_rebase_moves_prefix(self) -> None:
        assert TaskPath("/1/4/9/").rebase("/1/4/", "/2/4/").value == "/2/4/9/"
        with pytest.raises(ValueError, match="not under"):
            TaskPath("/3/").rebase("/1/", "/2/")
