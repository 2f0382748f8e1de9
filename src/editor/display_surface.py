from abc import ABC, abstractmethod
from typing import Sequence

from diff.diff_types import LinePatch
from editor.selection import Selection


class DisplaySurface(ABC):
    """
    The view an editor controller drives.

    A surface holds the raw text and selection, knows which part of the text is
    scrolled into view, and shows lexed lines.  It is told about changes to the
    lines as patch operations, so it only has to redraw what changed.
    """

    @abstractmethod
    def get_text(self) -> str:
        """Get the current document text."""

    @abstractmethod
    def set_text(self, text: str) -> None:
        """
        Replace the document text.

        Args:
            text: The new text
        """

    @abstractmethod
    def get_selection(self) -> Selection:
        """Get the current selection as character offsets."""

    @abstractmethod
    def set_selection(self, selection: Selection) -> None:
        """
        Set the current selection.

        Args:
            selection: The selection to apply
        """

    @abstractmethod
    def get_visible_character_range(self) -> Selection | None:
        """
        Get the range of characters currently scrolled into view.

        Returns:
            The visible range, or None if the surface has not been laid out yet
        """

    @abstractmethod
    def patch_lines(self, patches: Sequence[LinePatch]) -> None:
        """
        Update the displayed lines.

        Args:
            patches: Operations to apply in order; each `line` is an `editor.line.Line`
        """
