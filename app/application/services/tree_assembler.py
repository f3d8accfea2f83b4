"""Tree assembler: turns a flat scan of task rows into parent -> subtasks trees.

Trees are built bottom-up from a children-by-parent index into frozen
TaskResult values, so no node is shared or mutated after construction.
Children keep the order of the input scan.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Sequence
from dataclasses import replace

from app.application.dtos.task import TaskResult

logger = logging.getLogger(__name__)


def _index(rows: Sequence[TaskResult]) -> tuple[dict[int, TaskResult], dict[int, list[int]]]:
    """Return (rows by id, child ids by parent id) preserving scan order."""
    by_id: dict[int, TaskResult] = {}
    children: dict[int, list[int]] = defaultdict(list)
    for row in rows:
        by_id[row.id] = row
    for row in rows:
        if row.parent_id is not None and row.parent_id in by_id:
            children[row.parent_id].append(row.id)
    return by_id, children


def _assemble(root_id: int, by_id: dict[int, TaskResult], children: dict[int, list[int]]) -> TaskResult:
    """Build the subtree under root_id iteratively (post-order), so depth is unbounded."""
    built: dict[int, TaskResult] = {}
    stack: list[tuple[int, bool]] = [(root_id, False)]
    while stack:
        node_id, expanded = stack.pop()
        child_ids = children.get(node_id, [])
        if expanded:
            built[node_id] = replace(
                by_id[node_id],
                subtasks=tuple(built.pop(c) for c in child_ids),
            )
            continue
        stack.append((node_id, True))
        stack.extend((c, False) for c in reversed(child_ids))
    return built[root_id]


def build_forest(rows: Sequence[TaskResult]) -> list[TaskResult]:
    """Return every root task with its descendants attached.

    A row whose parent is missing from rows is treated as a root and
    logged, so every input row appears exactly once in the forest.
    """
    by_id, children = _index(rows)
    roots: list[TaskResult] = []
    for row in rows:
        if row.parent_id is None:
            roots.append(row)
        elif row.parent_id not in by_id:
            logger.warning(
                "Task %s references missing parent %s; returning it as a root",
                row.id,
                row.parent_id,
            )
            roots.append(row)
    return [_assemble(r.id, by_id, children) for r in roots]


def build_subtree(root: TaskResult, descendants: Sequence[TaskResult]) -> TaskResult:
    """Return root with its descendants attached.

    Args:
        root: The subtree root.
        descendants: Every strict descendant of root, in scan order.
    """
    by_id, children = _index([root, *descendants])
    unreachable = [d.id for d in descendants if d.parent_id not in by_id]
    if unreachable:
        logger.warning(
            "Subtree of task %s has rows with parents outside it: %s", root.id, unreachable
        )
    return _assemble(root.id, by_id, children)


def count_nodes(forest: Sequence[TaskResult]) -> int:
    """Return the number of tasks in a forest (roots and all descendants)."""
    return sum(1 for tree in forest for _ in tree.iter_tree())
