from dataclasses import dataclass

from syntax.lexer import Lexer, LexerState, TokenType


@dataclass
class TextLexerState(LexerState):
    """
    State information for the text lexer.
    """


class TextLexer(Lexer):
    """
    Lexer for plain text.

    The whole line becomes a single TEXT token.  This is the fallback for
    languages with no registered lexer, and it is also cheap enough to use as a
    placeholder for lines that have not been properly lexed yet.
    """

    def initial_state(self) -> TextLexerState:
        return TextLexerState()

    def _lex_next(self) -> None:
        self._current_token = self._input[self._position:]
        self._current_start = self._position
        self._position = self._input_len
        self._add_token(TokenType.TEXT)
