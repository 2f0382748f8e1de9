import logging
from collections import OrderedDict
from typing import Tuple

from editor.line import Line, fingerprint_of
from syntax.lexer import LexerState


CacheKey = Tuple[str, str]


class LineCache:
    """
    Memoizes lexed lines by their text and inbound lexer state.

    Lexing is a pure function of (text, inbound state), so a hit can stand in for
    lexing the line again.  The cache is only an optimization: entries may be
    evicted at any time and a miss is always handled by lexing.
    """

    def __init__(self, capacity: int = 4096) -> None:
        """
        Initialize the cache.

        Args:
            capacity: Maximum number of entries; 0 disables caching
        """
        self._capacity = max(0, capacity)
        self._entries: OrderedDict[CacheKey, Line] = OrderedDict()
        self._logger = logging.getLogger("LineCache")
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def capacity(self) -> int:
        """Maximum number of entries held."""
        return self._capacity

    @staticmethod
    def make_key(text: str, inbound_state: LexerState | None) -> CacheKey:
        """
        Build the cache key for a line.

        Args:
            text: The line text
            inbound_state: The state the line is lexed from

        Returns:
            The key
        """
        return (text, fingerprint_of(inbound_state))

    def lookup(self, text: str, inbound_state: LexerState | None) -> Line | None:
        """
        Look up a previously lexed line.

        Args:
            text: The line text
            inbound_state: The state the line is lexed from

        Returns:
            A copy of the cached line with a new identity, or None on a miss
        """
        key = self.make_key(text, inbound_state)
        line = self._entries.get(key)
        if line is None:
            self.misses += 1
            return None

        assert line.text == text and line.inbound_fingerprint == key[1], \
            f"Cache entry for {key!r} holds a different line"

        self._entries.move_to_end(key)
        self.hits += 1
        return line.copy()

    def store(self, text: str, inbound_state: LexerState | None, line: Line) -> None:
        """
        Remember a lexed line.

        Args:
            text: The line text
            inbound_state: The state the line was lexed from
            line: The lexed line
        """
        if self._capacity == 0:
            return

        key = self.make_key(text, inbound_state)
        self._entries[key] = line.copy()
        self._entries.move_to_end(key)

        while len(self._entries) > self._capacity:
            self._entries.popitem(last=False)

    def clear(self) -> None:
        """Drop every entry."""
        self._logger.debug("clearing %d entries", len(self._entries))
        self._entries.clear()
        self.hits = 0
        self.misses = 0
