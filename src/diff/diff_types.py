"""Shared types for line diff operations."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class DiffKind(Enum):
    """Classification of one step of a line diff."""

    SAME = auto()
    ADDED = auto()
    REMOVED = auto()
    MODIFIED = auto()


@dataclass(frozen=True)
class DiffEntry:
    """One step of a line diff, consuming a line from either or both sequences."""

    kind: DiffKind
    previous_index: int | None  # Index into the previous sequence, None for ADDED
    current_index: int | None  # Index into the current sequence, None for REMOVED


class LinePatchOp(Enum):
    """Operation applied to the presentation layer's line list."""

    KEEP = auto()
    INSERT = auto()
    REMOVE = auto()
    REPLACE = auto()


@dataclass(frozen=True)
class LinePatch:
    """A single operation to apply to a displayed line list."""

    index: int  # Position in the list as it stands when this operation is applied
    op: LinePatchOp
    line: Any = None  # The new line for INSERT and REPLACE, the kept line for KEEP
