"""
Greedy line diff used to reconcile a displayed line list with a new one.

This is a single forward pass with two cursors and no backtracking.  It is not
a minimal edit script, but editing is nearly always local (one line inserted,
removed or changed) and for those cases it finds the obvious answer quickly.
"""

import bisect
from collections import defaultdict
from typing import Dict, Hashable, List, Sequence, TypeVar

from diff.diff_types import DiffEntry, DiffKind, LinePatch, LinePatchOp


T = TypeVar("T")


class _PositionIndex:
    """Finds the next position of a value in a sequence at or after a given index."""

    def __init__(self, values: Sequence[Hashable]) -> None:
        self._positions: Dict[Hashable, List[int]] = defaultdict(list)
        for i, value in enumerate(values):
            self._positions[value].append(i)

    def next_position(self, value: Hashable, start: int) -> int | None:
        """
        Find the first position of a value at or after start.

        Args:
            value: The value to look for
            start: The first index to consider

        Returns:
            The position, or None if the value does not occur there
        """
        positions = self._positions.get(value)
        if not positions:
            return None

        i = bisect.bisect_left(positions, start)
        if i == len(positions):
            return None

        return positions[i]


def diff_lines(previous: Sequence[Hashable], current: Sequence[Hashable]) -> List[DiffEntry]:
    """
    Classify the steps needed to walk from the previous line sequence to the current one.

    At each step, with cursors into both sequences:

    - if the previous sequence is used up the current line was ADDED
    - if the current sequence is used up the previous line was REMOVED
    - if both lines are equal they are the SAME
    - if the previous line appears later in the current sequence, the current
      lines up to it were ADDED
    - if the current line appears later in the previous sequence, the previous
      lines up to it were REMOVED
    - otherwise the line was MODIFIED in place

    When a value occurs more than once the nearest later occurrence is used, and
    the insertion test is made before the removal test.

    Args:
        previous: The old lines (or line identities)
        current: The new lines (or line identities)

    Returns:
        The ordered diff entries
    """
    previous_index = _PositionIndex(previous)
    current_index = _PositionIndex(current)
    previous_len = len(previous)
    current_len = len(current)

    entries: List[DiffEntry] = []
    i = 0
    j = 0

    while i < previous_len or j < current_len:
        if i >= previous_len:
            entries.append(DiffEntry(DiffKind.ADDED, None, j))
            j += 1
            continue

        if j >= current_len:
            entries.append(DiffEntry(DiffKind.REMOVED, i, None))
            i += 1
            continue

        if previous[i] == current[j]:
            entries.append(DiffEntry(DiffKind.SAME, i, j))
            i += 1
            j += 1
            continue

        # Has the previous line moved further down?  If so, lines were inserted.
        match = current_index.next_position(previous[i], j + 1)
        if match is not None:
            while j < match:
                entries.append(DiffEntry(DiffKind.ADDED, None, j))
                j += 1

            continue

        # Does the current line appear further down the old lines?  If so, lines were deleted.
        match = previous_index.next_position(current[j], i + 1)
        if match is not None:
            while i < match:
                entries.append(DiffEntry(DiffKind.REMOVED, i, None))
                i += 1

            continue

        entries.append(DiffEntry(DiffKind.MODIFIED, i, j))
        i += 1
        j += 1

    return entries


def build_patch(entries: Sequence[DiffEntry], current_lines: Sequence[T]) -> List[LinePatch]:
    """
    Convert diff entries into operations on the displayed line list.

    Each operation's index is the position in the displayed list at the time
    the operation is applied, so applying them in order turns the previous list
    into the current one.

    Args:
        entries: Output of `diff_lines`
        current_lines: The new line objects, indexed by the entries' current indices

    Returns:
        The patch operations, one per entry
    """
    patches: List[LinePatch] = []
    position = 0

    for entry in entries:
        if entry.kind == DiffKind.REMOVED:
            patches.append(LinePatch(position, LinePatchOp.REMOVE))
            continue

        assert entry.current_index is not None
        line = current_lines[entry.current_index]
        if entry.kind == DiffKind.SAME:
            patches.append(LinePatch(position, LinePatchOp.KEEP, line))

        elif entry.kind == DiffKind.ADDED:
            patches.append(LinePatch(position, LinePatchOp.INSERT, line))

        else:
            patches.append(LinePatch(position, LinePatchOp.REPLACE, line))

        position += 1

    return patches


def apply_patch(lines: List[T], patches: Sequence[LinePatch]) -> List[T]:
    """
    Apply patch operations to a list in place.

    Args:
        lines: The list to update
        patches: Operations from `build_patch`

    Returns:
        The same list, for convenience
    """
    for patch in patches:
        if patch.op == LinePatchOp.INSERT:
            lines.insert(patch.index, patch.line)

        elif patch.op == LinePatchOp.REMOVE:
            del lines[patch.index]

        elif patch.op == LinePatchOp.REPLACE:
            lines[patch.index] = patch.line

    return lines
