"""
Lazy, incremental lexing of a document into lines.

A render pass lexes only the lines near the viewport.  Lines further down get
cheap plain text placeholders that are marked dirty and lexed properly once
they scroll into range.  Lines that have not changed since the last pass are
reused, and the result is reconciled with the previous pass so the display only
has to apply the difference.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from diff.diff_types import DiffKind, LinePatch, LinePatchOp
from diff.line_diff import build_patch, diff_lines
from editor.line import Line, fingerprint_of
from editor.line_cache import LineCache
from editor.position_vector import PositionVector
from editor.render_mode import RenderMode
from editor.selection import Selection
from syntax.lexer import Lexer, LexerState
from syntax.lexer_registry import LexerFactory
from syntax.text.text_lexer import TextLexer


@dataclass
class RenderStats:
    """Counts of what a render pass did."""
    render_dirty: int = 0
    get_from_cache: int = 0
    create_unrendered: int = 0
    create_rendered: int = 0
    patch_counts: Dict[LinePatchOp, int] = field(default_factory=lambda: {op: 0 for op in LinePatchOp})


@dataclass
class RenderResult:
    """
    The outcome of a render pass.

    Attributes:
        lines: The document's lines after the pass
        patches: Operations turning the previous line list into `lines`
        stats: What the pass did
    """
    lines: List[Line]
    patches: List[LinePatch]
    stats: RenderStats


class RenderScheduler:
    """
    Decides which lines to lex on each render pass and keeps the resulting lines.
    """

    def __init__(self, lexer_factory: LexerFactory, cache: LineCache, lazy_render_padding: int = 10) -> None:
        """
        Initialize the scheduler.

        Args:
            lexer_factory: Creates the lexer for the document's language
            cache: Cache of lexed lines, shared with the owner so it can be cleared
            lazy_render_padding: Lines either side of the viewport that are lexed eagerly
        """
        self._lexer: Lexer = lexer_factory()
        self._placeholder_lexer = TextLexer()
        self._cache = cache
        self._padding = max(0, lazy_render_padding)
        self._lines: List[Line] = []
        self._previous_lines: List[Line] = []
        self._logger = logging.getLogger("RenderScheduler")

    @property
    def lines(self) -> List[Line]:
        """The lines produced by the most recent pass."""
        return self._lines

    @property
    def previous_lines(self) -> List[Line]:
        """The lines the most recent pass started from."""
        return self._previous_lines

    @property
    def lazy_render_padding(self) -> int:
        """Lines either side of the viewport that are lexed eagerly."""
        return self._padding

    def set_lexer_factory(self, lexer_factory: LexerFactory) -> None:
        """
        Switch to a different lexer.

        Existing lines keep their tokens until a pass that is not allowed to reuse them.

        Args:
            lexer_factory: Creates the new lexer
        """
        self._lexer = lexer_factory()

    def reset(self) -> None:
        """
        Forget every line, so the next pass inserts the whole document.

        The display must be cleared at the same time, as no removals are sent for
        the forgotten lines.
        """
        self._lines = []
        self._previous_lines = []

    def dirty_lines(self) -> List[int]:
        """
        Get the lines that still hold placeholder or stale tokens.

        Returns:
            Indices of the dirty lines, in order
        """
        return [i for i, line in enumerate(self._lines) if line.dirty]

    def lazy_render_window(self, text: str, visible_range: Selection | None) -> Tuple[int, int]:
        """
        Work out which lines must be lexed eagerly.

        Args:
            text: The document text
            visible_range: Characters scrolled into view, or None if unknown

        Returns:
            (first line, last line) of the window, inclusive; the first line may be negative
        """
        if visible_range is None:
            visible_range = Selection(0, 0)

        first = PositionVector.from_index(text, visible_range.start).line_index
        last = PositionVector.from_index(text, visible_range.end).line_index
        return first - self._padding, last + self._padding

    @staticmethod
    def visible_range_from_scroll(
        text: str,
        scroll_top: float,
        viewport_height: float,
        line_height: float | None
    ) -> Selection:
        """
        Estimate the visible characters from scroll geometry.

        Args:
            text: The document text
            scroll_top: Pixels scrolled from the top of the document
            viewport_height: Height of the viewport in pixels
            line_height: Height of one line in pixels; None or 0 if not known yet

        Returns:
            Range from the start of the first visible line to the start of the last one
        """
        if not line_height or line_height <= 0:
            return Selection(0, PositionVector(0, 0).to_index(text))

        first_line = max(0, int(scroll_top // line_height))
        last_line = max(first_line, int((scroll_top + viewport_height) // line_height))
        return Selection(PositionVector(first_line, 0).to_index(text), PositionVector(last_line, 0).to_index(text))

    @staticmethod
    def _may_reuse(mode: RenderMode, in_window: bool, dirty: bool) -> bool:
        if mode == RenderMode.PARTIAL:
            return True

        if mode == RenderMode.FORCE_VISIBLE:
            return not in_window

        if mode == RenderMode.FORCE_VISIBLE_AND_DIRTY:
            return not in_window or dirty

        return False

    def _create_line(self, text: str, inbound_state: LexerState | None, use_cache: bool) -> Tuple[Line, bool]:
        """
        Lex a line, going through the cache where allowed.

        Returns:
            The line, and True if it came from the cache
        """
        if use_cache:
            cached = self._cache.lookup(text, inbound_state)
            if cached is not None:
                return cached, True

        tokens, outbound_state = self._lexer.tokenize(text, inbound_state)
        line = Line(text, fingerprint_of(inbound_state), tokens, outbound_state)
        self._cache.store(text, inbound_state, line)
        return line, False

    def _create_placeholder(self, text: str, inbound_state: LexerState | None) -> Line:
        tokens, _ = self._placeholder_lexer.tokenize(text, None)
        return Line(text, fingerprint_of(inbound_state), tokens, None, dirty=True)

    @staticmethod
    def _pair_unchanged_lines(old_lines: List[Line], new_texts: List[str]) -> Dict[int, Line]:
        """
        Match new lines to old lines with the same text.

        Lines are paired wherever the text diff reports them unchanged, so an
        insertion or deletion does not stop the lines after it being reused.

        Returns:
            Map from new line index to the old line it continues
        """
        entries = diff_lines([line.text for line in old_lines], new_texts)
        return {
            entry.current_index: old_lines[entry.previous_index]
            for entry in entries
            if entry.kind == DiffKind.SAME
        }

    def render(self, text: str, visible_range: Selection | None, mode: RenderMode) -> RenderResult:
        """
        Bring the lines up to date with the text.

        Args:
            text: The document text
            visible_range: Characters scrolled into view, or None if unknown
            mode: How much existing work may be reused

        Returns:
            The new lines, the patch from the previous lines and the pass statistics
        """
        min_line, max_line = self.lazy_render_window(text, visible_range)
        old_lines = self._lines
        new_texts = text.split("\n")
        paired = self._pair_unchanged_lines(old_lines, new_texts)
        new_lines: List[Line] = []
        stats = RenderStats()
        # Forced passes lex the window from scratch; FULL also runs after a lexer change
        use_cache = mode in (RenderMode.PARTIAL, RenderMode.FORCE_VISIBLE_AND_DIRTY)
        inbound_state: LexerState | None = self._lexer.initial_state()

        for i, line_text in enumerate(new_texts):
            in_window = min_line <= i <= max_line
            old_line = paired.get(i)

            if old_line is not None and self._may_reuse(mode, in_window, old_line.dirty):
                stale = old_line.dirty or old_line.inbound_fingerprint != fingerprint_of(inbound_state)
                if not stale:
                    line = old_line
                    stats.get_from_cache += 1

                elif i <= max_line:
                    line, _ = self._create_line(line_text, inbound_state, use_cache)
                    stats.render_dirty += 1

                elif old_line.dirty:
                    # Already a placeholder; keeping it avoids a needless display update
                    line = old_line
                    stats.create_unrendered += 1

                else:
                    line = self._create_placeholder(line_text, inbound_state)
                    stats.create_unrendered += 1

            elif i > max_line and mode != RenderMode.FULL:
                line = self._create_placeholder(line_text, inbound_state)
                stats.create_unrendered += 1

            else:
                line, cached = self._create_line(line_text, inbound_state, use_cache)
                if cached:
                    stats.get_from_cache += 1

                else:
                    stats.create_rendered += 1

            new_lines.append(line)
            inbound_state = line.outbound_state

        entries = diff_lines([line.line_id for line in old_lines], [line.line_id for line in new_lines])
        patches = build_patch(entries, new_lines)
        for patch in patches:
            stats.patch_counts[patch.op] += 1

        self._previous_lines = old_lines
        self._lines = new_lines

        self._logger.debug(
            "%s pass over %d lines (window %d-%d): dirty=%d reused=%d unrendered=%d rendered=%d "
            "keep=%d insert=%d remove=%d replace=%d",
            mode.name, len(new_lines), min_line, max_line,
            stats.render_dirty, stats.get_from_cache, stats.create_unrendered, stats.create_rendered,
            stats.patch_counts[LinePatchOp.KEEP], stats.patch_counts[LinePatchOp.INSERT],
            stats.patch_counts[LinePatchOp.REMOVE], stats.patch_counts[LinePatchOp.REPLACE]
        )

        return RenderResult(new_lines, patches, stats)
