"""Text formats used to paint each kind of token."""

from enum import Enum, auto
from typing import Dict, Tuple

from PySide6.QtGui import QColor, QFont, QTextCharFormat

from syntax.lexer import TokenType


class ColorMode(Enum):
    """Colour scheme for token formats."""
    LIGHT = auto()
    DARK = auto()


class TokenFormats:
    """
    Maps token types to QTextCharFormats for the current colour mode.
    """

    # (dark, light) foreground colours
    _COLOURS: Dict[TokenType, Tuple[str, str]] = {
        TokenType.ASSIGNMENT: ("#c0c0c0", "#404040"),
        TokenType.BRACKET: ("#c0c0c0", "#404040"),
        TokenType.CALL_IDENTIFIER: ("#e0e080", "#806000"),
        TokenType.COMMENT: ("#68b068", "#407040"),
        TokenType.ESCAPE: ("#ffa0eb", "#c000a0"),
        TokenType.IDENTIFIER: ("#80b0f0", "#0060c0"),
        TokenType.KEYWORD: ("#ffc0eb", "#c080a0"),
        TokenType.NUMBER: ("#88d048", "#508020"),
        TokenType.OPERATOR: ("#c0c0c0", "#404040"),
        TokenType.SEPARATOR: ("#c0c0c0", "#404040"),
        TokenType.STRING: ("#c05040", "#803828"),
        TokenType.SYNTAX_SYMBOL: ("#d070d0", "#a000a0"),
        TokenType.TEXT: ("#c0c0c0", "#404040"),
        TokenType.VALUE_KEYWORD: ("#30c090", "#24906c"),
        TokenType.WHITESPACE: ("#c0c0c0", "#404040")
    }

    _CODE_FONT_FAMILIES = ["Menlo", "Consolas", "Monaco", "monospace"]

    def __init__(self, color_mode: ColorMode = ColorMode.DARK) -> None:
        self._color_mode = color_mode
        self._formats: Dict[TokenType, QTextCharFormat] = {}
        self._initialize_formats()

    @property
    def color_mode(self) -> ColorMode:
        """The colour mode formats are built for."""
        return self._color_mode

    def set_color_mode(self, color_mode: ColorMode) -> None:
        """
        Switch colour mode, rebuilding every format.

        Args:
            color_mode: The new colour mode
        """
        if color_mode == self._color_mode:
            return

        self._color_mode = color_mode
        self._initialize_formats()

    def _initialize_formats(self) -> None:
        index = 0 if self._color_mode == ColorMode.DARK else 1
        self._formats = {
            token_type: self._create_format(colours[index], token_type == TokenType.KEYWORD)
            for token_type, colours in self._COLOURS.items()
        }

    def _create_format(self, colour: str, bold: bool) -> QTextCharFormat:
        text_format = QTextCharFormat()
        text_format.setFontFamilies(self._CODE_FONT_FAMILIES)
        text_format.setFontFixedPitch(True)
        text_format.setForeground(QColor(colour))
        if bold:
            text_format.setFontWeight(QFont.Weight.Bold)

        return text_format

    def get_format(self, token_type: TokenType) -> QTextCharFormat:
        """
        Get the format for a token type.

        Args:
            token_type: The kind of token

        Returns:
            The format to paint it with
        """
        return self._formats.get(token_type, self._formats[TokenType.TEXT])
