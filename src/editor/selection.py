from dataclasses import dataclass


@dataclass(frozen=True)
class Selection:
    """
    A range of character offsets into a document.

    Attributes:
        start: Offset of the first selected character
        end: Offset just past the last selected character
    """
    start: int
    end: int

    def __post_init__(self) -> None:
        assert self.start <= self.end, f"Selection start {self.start} is after end {self.end}"

    @classmethod
    def normalized(cls, anchor: int, position: int) -> "Selection":
        """
        Create a selection from two offsets given in either order.

        Args:
            anchor: One end of the selection
            position: The other end of the selection

        Returns:
            A selection with start <= end
        """
        return cls(min(anchor, position), max(anchor, position))

    def is_empty(self) -> bool:
        """Check if the selection is just a cursor position."""
        return self.start == self.end
