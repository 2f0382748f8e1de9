from dataclasses import dataclass


@dataclass
class PositionVector:
    """
    A zero-based (line, column) position in a document.

    The first line has index 0 but is line 1, and likewise for columns.  `line`
    and `column` are only for showing positions to people.

    Conversions to and from flat character offsets always take the text they
    apply to, as the same offset means different things in different snapshots.
    """
    line_index: int = 0
    column_index: int = 0

    @property
    def line(self) -> int:
        """One-based line number."""
        return self.line_index + 1

    @property
    def column(self) -> int:
        """One-based column number."""
        return self.column_index + 1

    @classmethod
    def from_index(cls, text: str, index: int) -> "PositionVector":
        """
        Convert a character offset into a position.

        Args:
            text: The document text
            index: Character offset, from 0 to len(text) inclusive

        Returns:
            The position of that offset
        """
        index = max(0, min(index, len(text)))
        line_start = text.rfind("\n", 0, index) + 1
        return cls(text.count("\n", 0, index), index - line_start)

    def to_index(self, text: str) -> int:
        """
        Convert this position into a character offset.

        Columns past the end of their line are clamped to the line end.  A line
        index past the last line gives the length of the text.

        Args:
            text: The document text

        Returns:
            The character offset
        """
        line_start = 0
        for _ in range(self.line_index):
            newline = text.find("\n", line_start)
            if newline == -1:
                return len(text)

            line_start = newline + 1

        line_end = text.find("\n", line_start)
        if line_end == -1:
            line_end = len(text)

        return line_start + max(0, min(self.column_index, line_end - line_start))

    def clone(self) -> "PositionVector":
        """Create an independent copy of this position."""
        return PositionVector(self.line_index, self.column_index)
