"""Domain value objects for the task hierarchy.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

ROOT_PATH = "/"

# "/" for roots, otherwise "/<id>/<id>/.../" from the root down to the parent.
_PATH_RE = re.compile(r"^/(?:[0-9]+/)*$")


@dataclass(frozen=True)
class TaskPath:
    """Value object for a task's materialized path.

    Lists every strict ancestor id from the root to the immediate parent,
    each followed by a slash, e.g. ``/1/4/`` for a task whose parent is 4
    and grandparent is 1. Root tasks have path ``/``.

    Every segment is closed by a slash, so the subtree of task N is
    exactly the set of paths starting with ``<path of N>N/``; a prefix
    test never confuses id 12 with id 120.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate the path format.

        Raises:
            ValueError: If value is not a slash-delimited list of integer ids.
        """
        if not isinstance(self.value, str) or not _PATH_RE.match(self.value):
            raise ValueError(f"Invalid task path: {self.value!r}")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def root(cls) -> "TaskPath":
        """Return the path shared by all root tasks."""
        return cls(ROOT_PATH)

    @classmethod
    def from_ancestors(cls, ancestor_ids: Iterable[int]) -> "TaskPath":
        """Build a path from ancestor ids ordered root first."""
        ids = [int(i) for i in ancestor_ids]
        if not ids:
            return cls.root()
        return cls(ROOT_PATH + "/".join(str(i) for i in ids) + "/")

    @classmethod
    def for_child_of(cls, parent_path: "str | TaskPath | None", parent_id: int | None) -> "TaskPath":
        """Compute the path of a task whose parent has the given path and id.

        Args:
            parent_path: Stored path of the parent (ignored for roots).
            parent_id: Parent id, or None for a root task.

        Returns:
            ``/`` when parent_id is None, else ``parent_path + parent_id + "/"``.

        Raises:
            ValueError: If parent_id is set but parent_path is missing.
        """
        if parent_id is None:
            return cls.root()
        if parent_path is None:
            raise ValueError("parent_path is required for a non-root task")
        return cls(f"{parent_path}{int(parent_id)}/")

    @property
    def ancestor_ids(self) -> tuple[int, ...]:
        """Ancestor ids ordered from the root to the immediate parent."""
        return tuple(int(part) for part in self.value[1:].split("/") if part)

    @property
    def parent_id(self) -> int | None:
        """Immediate parent id, or None for a root path."""
        ids = self.ancestor_ids
        return ids[-1] if ids else None

    @property
    def depth(self) -> int:
        return len(self.ancestor_ids)

    def is_root(self) -> bool:
        return self.value == ROOT_PATH

    def subtree_prefix(self, task_id: int) -> str:
        """Return the prefix carried by every strict descendant of the task at this path.

        Args:
            task_id: Id of the task whose own path is self.
        """
        return f"{self.value}{int(task_id)}/"

    def has_ancestor(self, task_id: int) -> bool:
        """Return whether task_id appears among this path's ancestors."""
        return int(task_id) in self.ancestor_ids

    def rebase(self, old_prefix: str, new_prefix: str) -> "TaskPath":
        """Replace a leading subtree prefix (used when a subtree moves).

        Raises:
            ValueError: If the path does not start with old_prefix.
        """
        if not self.value.startswith(old_prefix):
            raise ValueError(f"Path {self.value!r} is not under {old_prefix!r}")
        return TaskPath(new_prefix + self.value[len(old_prefix):])


def encode_path(parent_path: str | None, parent_id: int | None) -> str:
    """Return the materialized path string for a child of (parent_path, parent_id)."""
    return TaskPath.for_child_of(parent_path, parent_id).value


def is_descendant_path(path: str, ancestor_path: str, ancestor_id: int) -> bool:
    """Return whether a task stored at path lies strictly under the given ancestor."""
    return path.startswith(TaskPath(ancestor_path).subtree_prefix(ancestor_id))
