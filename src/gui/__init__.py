"""PySide6 widgets for the incremental highlighting editor."""

from gui.code_editor_highlighter import CodeEditorHighlighter
from gui.code_editor_widget import CodeEditorSurface, CodeEditorWidget
from gui.idle_driver import IdleDriver
from gui.token_formats import ColorMode, TokenFormats

__all__ = [
    'CodeEditorHighlighter',
    'CodeEditorSurface',
    'CodeEditorWidget',
    'ColorMode',
    'IdleDriver',
    'TokenFormats',
]
