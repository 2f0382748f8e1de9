"""Shared fixtures and utilities for editor tests."""

from typing import Callable, List

import pytest

from diff.line_diff import apply_patch
from editor.display_surface import DisplaySurface
from editor.line_cache import LineCache
from editor.render_scheduler import RenderScheduler
from editor.selection import Selection
from syntax.lexer_registry import LexerRegistry


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        """Move the clock forward."""
        self.now += seconds


class FakeSurface(DisplaySurface):
    """In-memory display surface that applies the patches it is sent."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.selection = Selection(0, 0)
        self.visible: Selection | None = Selection(0, 0)
        self.displayed: List = []
        self.patch_batches: List[List] = []
        self.on_patch: Callable[[], None] | None = None

    def get_text(self) -> str:
        return self.text

    def set_text(self, text: str) -> None:
        self.text = text

    def get_selection(self) -> Selection:
        return self.selection

    def set_selection(self, selection: Selection) -> None:
        self.selection = selection

    def get_visible_character_range(self) -> Selection | None:
        return self.visible

    def patch_lines(self, patches) -> None:
        self.patch_batches.append(list(patches))
        apply_patch(self.displayed, patches)
        if self.on_patch is not None:
            callback = self.on_patch
            self.on_patch = None
            callback()

    def show_line(self, line_index: int) -> None:
        """Scroll so a single line is visible."""
        lines = self.text.split("\n")
        start = sum(len(line) + 1 for line in lines[:line_index])
        self.visible = Selection(start, start)


@pytest.fixture
def clock():
    """Create a fake clock."""
    return FakeClock()


@pytest.fixture
def surface():
    """Create an empty fake surface."""
    return FakeSurface()


@pytest.fixture
def registry():
    """Create a registry with the built-in languages."""
    return LexerRegistry.create_default()


@pytest.fixture
def js_scheduler(registry):
    """Create a JavaScript render scheduler with a small lazy render padding."""
    return RenderScheduler(registry.get_factory("javascript"), LineCache(), lazy_render_padding=1)
