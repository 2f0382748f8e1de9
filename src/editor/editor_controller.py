import logging
import time
from typing import Callable, List

from editor.display_surface import DisplaySurface
from editor.editor_exceptions import EditorClosedError
from editor.editor_settings import EditorSettings
from editor.idle_task import IdleTask
from editor.line import Line
from editor.line_cache import LineCache
from editor.position_vector import PositionVector
from editor.render_mode import RenderMode
from editor.render_scheduler import RenderResult, RenderScheduler
from editor.selection import Selection
from syntax.lexer_registry import LexerRegistry
from syntax.programming_language import ProgrammingLanguage


class EditorController:
    """
    Keeps a display surface's lexed lines in step with its text.

    The controller is driven by events from the surface: text edits and scrolls
    trigger a cheap incremental pass, and once things have been quiet for a
    while `poll_idle` runs a sweep that finishes any lines left dirty.  Render
    passes never overlap; a request made while one is running is folded into a
    single pending pass that runs as soon as the current one finishes.
    """

    def __init__(
        self,
        surface: DisplaySurface,
        settings: EditorSettings | None = None,
        registry: LexerRegistry | None = None,
        clock: Callable[[], float] = time.monotonic
    ) -> None:
        """
        Initialize the controller.

        Args:
            surface: The surface to drive
            settings: Editor settings; defaults are used if None
            registry: Lexer registry for this editor; the built-in languages if None
            clock: Monotonic clock in seconds, used for idle detection
        """
        self._logger = logging.getLogger("EditorController")
        self._surface = surface
        self._settings = settings if settings is not None else EditorSettings.create_default()
        self._registry = registry if registry is not None else LexerRegistry.create_default()
        self._language = self._settings.language
        self._language_id = self._registry.language_id(self._language)
        self._cache = LineCache(self._settings.cache_capacity)
        self._scheduler = RenderScheduler(
            self._registry.get_factory(self._language),
            self._cache,
            self._settings.lazy_render_padding
        )
        self._idle_task = IdleTask(self._settings.idle_timeout_ms, clock)
        self._rendering = False
        self._pending_mode: RenderMode | None = None
        self._last_result: RenderResult | None = None
        self._closed = False

    @property
    def language(self) -> ProgrammingLanguage:
        """The built-in language in use; TEXT when the lexer is one added to the registry."""
        return self._language

    @property
    def language_id(self) -> str:
        """The registry id of the lexer in use; differs from `language` for added languages."""
        return self._language_id

    @property
    def registry(self) -> LexerRegistry:
        """This editor's lexer registry."""
        return self._registry

    @property
    def idle_task(self) -> IdleTask:
        """The task that sweeps up dirty lines when the editor goes quiet."""
        return self._idle_task

    @property
    def cache(self) -> LineCache:
        """This editor's line cache."""
        return self._cache

    @property
    def lines(self) -> List[Line]:
        """The current lexed lines."""
        return self._scheduler.lines

    @property
    def last_result(self) -> RenderResult | None:
        """The result of the most recent render pass."""
        return self._last_result

    @property
    def closed(self) -> bool:
        """True once the editor has been closed."""
        return self._closed

    def line_count(self) -> int:
        """Get the number of lexed lines."""
        return len(self._scheduler.lines)

    def dirty_lines(self) -> List[int]:
        """Get the indices of lines still waiting to be lexed properly."""
        return self._scheduler.dirty_lines()

    def _check_open(self) -> None:
        if self._closed:
            raise EditorClosedError("Editor has been closed")

    def set_code(self, text: str) -> None:
        """
        Replace the document text and lex it.

        Args:
            text: The new text
        """
        self._check_open()
        self._surface.set_text(text)
        self.on_text_changed()

    def get_code(self) -> str:
        """Get the document text."""
        self._check_open()
        return self._surface.get_text()

    def get_selection(self) -> Selection:
        """Get the current selection."""
        self._check_open()
        return self._surface.get_selection()

    def set_selection(self, anchor: int, position: int | None = None) -> None:
        """
        Set the selection.

        Args:
            anchor: One end of the selection
            position: The other end; a cursor at `anchor` if None
        """
        self._check_open()
        if position is None:
            position = anchor

        text_len = len(self._surface.get_text())
        anchor = max(0, min(anchor, text_len))
        position = max(0, min(position, text_len))
        self._surface.set_selection(Selection.normalized(anchor, position))

    def get_position_vector(self, index: int | None = None) -> PositionVector:
        """
        Get the line and column of a character offset.

        Args:
            index: The offset; the start of the selection if None

        Returns:
            The position of the offset in the current text
        """
        self._check_open()
        if index is None:
            index = self._surface.get_selection().start

        return PositionVector.from_index(self._surface.get_text(), index)

    def set_language(self, language: ProgrammingLanguage | str) -> None:
        """
        Change the language the document is lexed as.

        Args:
            language: The new language, as an enum value or a name such as "js";
                names added to the registry are accepted too
        """
        self._check_open()
        self._language = self._registry.resolve(language)
        self._language_id = self._registry.language_id(language)
        factory = self._registry.get_factory(language)
        self._logger.debug("switching language to '%s'", self._language_id)
        self._scheduler.set_lexer_factory(factory)
        self._cache.clear()
        self.request_render(RenderMode.FULL)

    def rehighlight(self) -> None:
        """Lex every line in the lazy render window again."""
        self._check_open()
        self.request_render(RenderMode.FORCE_VISIBLE)

    def on_text_changed(self) -> None:
        """Handle an edit to the document text."""
        self._check_open()
        self.request_render(RenderMode.PARTIAL)
        self._idle_task.touch()

    def on_scrolled(self) -> None:
        """Handle the viewport moving."""
        self._check_open()
        self.request_render(RenderMode.PARTIAL)
        self._idle_task.touch()

    def poll_idle(self) -> bool:
        """
        Run the idle sweep if the editor has been quiet for long enough.

        Returns:
            True if a sweep ran
        """
        if self._closed or not self._idle_task.is_due():
            return False

        self._idle_task.fire()
        self.request_render(RenderMode.FORCE_VISIBLE_AND_DIRTY)
        return True

    def request_render(self, mode: RenderMode) -> None:
        """
        Run a render pass, or queue one if a pass is already running.

        Queued requests share one slot and the strongest mode wins.

        Args:
            mode: The kind of pass wanted
        """
        self._check_open()
        if self._pending_mode is None or mode > self._pending_mode:
            self._pending_mode = mode

        if self._rendering:
            self._logger.debug("render already running, queued %s", self._pending_mode.name)
            return

        self._rendering = True
        try:
            while self._pending_mode is not None and not self._closed:
                next_mode = self._pending_mode
                self._pending_mode = None
                result = self._scheduler.render(
                    self._surface.get_text(),
                    self._surface.get_visible_character_range(),
                    next_mode
                )
                self._last_result = result
                self._surface.patch_lines(result.patches)

        finally:
            self._rendering = False
            self._pending_mode = None

    def close(self) -> None:
        """Stop the editor; any later use raises EditorClosedError."""
        if self._closed:
            return

        self._idle_task.stop()
        self._pending_mode = None
        self._closed = True
