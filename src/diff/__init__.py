"""
Line-level diffing and patching.

This package computes which lines were kept, added, removed or modified between
two line lists, and turns that into operations a display can apply.
"""

from diff.diff_types import (
    DiffEntry,
    DiffKind,
    LinePatch,
    LinePatchOp,
)
from diff.line_diff import apply_patch, build_patch, diff_lines

__all__ = [
    # Types
    'DiffEntry',
    'DiffKind',
    'LinePatch',
    'LinePatchOp',
    # Operations
    'apply_patch',
    'build_patch',
    'diff_lines',
]
