import itertools
from dataclasses import dataclass, field
from typing import Iterator, List

from syntax.lexer import LexerState, Token


_line_ids: Iterator[int] = itertools.count(1)


def next_line_id() -> int:
    """Get a line identity that has never been used before."""
    return next(_line_ids)


@dataclass
class Line:
    """
    A lexed line of a document.

    Attributes:
        text: The line's text, without its newline
        inbound_fingerprint: Fingerprint of the lexer state the line was lexed from
        tokens: The line's tokens
        outbound_state: The lexer state the next line starts from, or None for
            a placeholder that was never properly lexed
        dirty: Indicates the tokens are a placeholder or stale and must be redone
        line_id: Identity used when reconciling with the display
    """
    text: str
    inbound_fingerprint: str
    tokens: List[Token]
    outbound_state: LexerState | None
    dirty: bool = False
    line_id: int = field(default_factory=next_line_id)

    def copy(self) -> "Line":
        """
        Create a copy of this line with a new identity.

        Returns:
            A line with the same content, its own token list and its own state
        """
        return Line(
            text=self.text,
            inbound_fingerprint=self.inbound_fingerprint,
            tokens=list(self.tokens),
            outbound_state=self.outbound_state.clone() if self.outbound_state is not None else None,
            dirty=self.dirty
        )

    def outbound_fingerprint(self) -> str:
        """
        Get the fingerprint of the state this line hands to the next one.

        Returns:
            The fingerprint, or an empty string for a placeholder
        """
        return fingerprint_of(self.outbound_state)


def fingerprint_of(state: LexerState | None) -> str:
    """
    Get the fingerprint of an optional lexer state.

    Args:
        state: The state, or None at the start of a document

    Returns:
        The state's fingerprint, or an empty string for None
    """
    return state.fingerprint() if state is not None else ""
