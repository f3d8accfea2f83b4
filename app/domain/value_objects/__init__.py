"""Domain value objects and shared value types."""

from app.domain.value_objects.core import (
    ROOT_PATH,
    TaskPath,
    encode_path,
    is_descendant_path,
)

__all__ = [
    "ROOT_PATH",
    "TaskPath",
    "encode_path",
    "is_descendant_path",
]
