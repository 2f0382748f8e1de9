from enum import IntEnum


class RenderMode(IntEnum):
    """
    How much of the line list a render pass may reuse.

    The values are ordered by strength, so when several passes are requested
    at once the largest one covers the others.
    """
    PARTIAL = 0  # Reuse any line whose text and inbound state are unchanged
    FORCE_VISIBLE = 1  # Lex every line in the lazy render window again
    FORCE_VISIBLE_AND_DIRTY = 2  # Lex the window again, and any dirty line that now falls inside it
    FULL = 3  # Lex every line, ignoring the viewport
