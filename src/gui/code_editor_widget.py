"""Plain text editor widget whose highlighting is driven by an editor controller."""

import logging
from typing import Any, Dict, Sequence

from PySide6.QtCore import QPoint, Qt
from PySide6.QtGui import QTextCursor
from PySide6.QtWidgets import QPlainTextEdit, QWidget

from diff.diff_types import LinePatch
from editor.display_surface import DisplaySurface
from editor.editor_controller import EditorController
from editor.editor_settings import EditorSettings
from editor.selection import Selection
from gui.code_editor_highlighter import CodeEditorHighlighter
from gui.idle_driver import IdleDriver
from gui.token_formats import TokenFormats
from syntax.lexer_registry import LexerRegistry
from syntax.programming_language import ProgrammingLanguage
from syntax.programming_language_utils import ProgrammingLanguageUtils


class CodeEditorSurface(DisplaySurface):
    """
    Display surface backed by a CodeEditorWidget.

    Qt widgets can't also derive from an ABC, so the widget hands its
    controller this adapter.
    """

    def __init__(self, widget: "CodeEditorWidget") -> None:
        self._widget = widget

    def get_text(self) -> str:
        return self._widget.toPlainText()

    def set_text(self, text: str) -> None:
        self._widget.set_plain_text_silently(text)

    def get_selection(self) -> Selection:
        cursor = self._widget.textCursor()
        return Selection(cursor.selectionStart(), cursor.selectionEnd())

    def set_selection(self, selection: Selection) -> None:
        cursor = self._widget.textCursor()
        cursor.setPosition(selection.start)
        cursor.setPosition(selection.end, QTextCursor.MoveMode.KeepAnchor)
        self._widget.setTextCursor(cursor)

    def get_visible_character_range(self) -> Selection | None:
        viewport = self._widget.viewport()
        if viewport.height() <= 0:
            return None

        first_block = self._widget.firstVisibleBlock()
        if not first_block.isValid():
            return None

        last_cursor = self._widget.cursorForPosition(QPoint(0, viewport.height() - 1))
        start = first_block.position()
        end = max(start, last_cursor.block().position())
        return Selection(start, end)

    def patch_lines(self, patches: Sequence[LinePatch]) -> None:
        self._widget.highlighter.apply_patches(patches)


class CodeEditorWidget(QPlainTextEdit):
    """Code editor widget with lazy, incremental syntax highlighting."""

    def __init__(
        self,
        settings: EditorSettings | None = None,
        registry: LexerRegistry | None = None,
        formats: TokenFormats | None = None,
        parent: QWidget | None = None
    ) -> None:
        """
        Initialize the editor.

        Args:
            settings: Editor settings; defaults are used if None
            registry: Lexer registry; the built-in languages if None
            formats: Token formats; the dark scheme if None
            parent: Optional parent widget
        """
        super().__init__(parent)
        self._logger = logging.getLogger("CodeEditorWidget")

        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)  # No word wrap for code
        self.setTabStopDistance(32)  # 4 spaces worth of tab stops

        self._setting_text = False
        self._path: str | None = None
        self._highlighter = CodeEditorHighlighter(self.document(), formats)
        self._controller = EditorController(CodeEditorSurface(self), settings, registry)
        self._idle_driver = IdleDriver(self._controller, self)

        self.textChanged.connect(self._on_text_changed)
        self.verticalScrollBar().valueChanged.connect(self._on_scrolled)
        self._idle_driver.start()

    @property
    def controller(self) -> EditorController:
        """The controller driving this editor's highlighting."""
        return self._controller

    @property
    def highlighter(self) -> CodeEditorHighlighter:
        """The highlighter painting this editor's tokens."""
        return self._highlighter

    @property
    def idle_driver(self) -> IdleDriver:
        """The driver running the idle sweep."""
        return self._idle_driver

    def set_plain_text_silently(self, text: str) -> None:
        """
        Replace the text without triggering a render pass of our own.

        Args:
            text: The new text
        """
        self._setting_text = True
        try:
            self.setPlainText(text)

        finally:
            self._setting_text = False

    def set_code(self, text: str) -> None:
        """
        Replace the editor's text.

        Args:
            text: The new text
        """
        self._controller.set_code(text)

    def set_language(self, language: ProgrammingLanguage | str) -> None:
        """
        Set the programming language for syntax highlighting.

        Args:
            language: The programming language to use
        """
        self._controller.set_language(language)

    def set_path(self, path: str | None) -> None:
        """
        Set the path of the file being edited, picking the language from its extension.

        Args:
            path: The file's path, or None for an unsaved document
        """
        self._path = path
        self.set_language(ProgrammingLanguageUtils.from_file_extension(path))

    def path(self) -> str | None:
        """Get the path of the file being edited."""
        return self._path

    def get_editor_info(self) -> Dict[str, Any]:
        """
        Get cursor position and file type for display in a status bar.

        Returns:
            Dictionary with the 1-based line and column and the language's display name
        """
        cursor = self.textCursor()
        return {
            'line': cursor.blockNumber() + 1,
            'column': cursor.columnNumber() + 1,
            'type': ProgrammingLanguageUtils.get_display_name(self._controller.language)
        }

    def close_editor(self) -> None:
        """Stop highlighting; the widget keeps its text."""
        self._idle_driver.stop()
        self._controller.close()

    def _on_text_changed(self) -> None:
        if self._setting_text or self._controller.closed:
            return

        try:
            self._controller.on_text_changed()

        except Exception:
            self._logger.exception("render exception on text change")

    def _on_scrolled(self, _value: int) -> None:
        if self._controller.closed:
            return

        try:
            self._controller.on_scrolled()

        except Exception:
            self._logger.exception("render exception on scroll")

    def resizeEvent(self, event):
        """Handle resize events, lexing any lines that came into view."""
        super().resizeEvent(event)
        self._on_scrolled(0)
