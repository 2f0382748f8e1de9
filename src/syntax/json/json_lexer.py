from dataclasses import dataclass, field
from typing import ClassVar, Dict, List

from syntax.lexer import Lexer, LexerState, TokenType


@dataclass
class JSONLexerState(LexerState):
    """
    State information for the JSON lexer.

    Attributes:
        string_opener: The quote character of the open string, if any
        bracket_stack: Kinds of the unclosed brackets ("object", "array" or "expression")
        in_string_newline_escape: Indicates if the line ended with a backslash inside a string
        in_block_comment: Indicates if we're currently parsing a block comment
        in_object_key: Indicates if the next string is an object key
    """
    string_opener: str | None = None
    bracket_stack: List[str] = field(default_factory=list)
    in_string_newline_escape: bool = False
    in_block_comment: bool = False
    in_object_key: bool = False


class JSONLexer(Lexer):
    """
    Lexer for JSON.

    Strings in key position are reported as identifiers and all other strings
    as strings.  Comments, single-quoted strings and the wider JavaScript
    number syntax are accepted as extensions.
    """

    _state: JSONLexerState

    _BRACKETS: ClassVar[Dict[str, str]] = {
        '(': 'expression',
        ')': 'expression',
        '{': 'object',
        '}': 'object',
        '[': 'array',
        ']': 'array'
    }

    _VALUE_KEYWORD_PATTERN = Lexer.build_word_pattern(['false', 'Infinity', 'NaN', 'null', 'true'])
    _NUMBER_PATTERN = (
        # Decimal first, so a leading zero followed by a fraction is one number
        r'(?:[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|'
        r'0[xX][0-9a-fA-F]+|0[bB][01]+|0[oO][0-7]+)n?(?![0-9a-zA-Z_$])'
    )

    def initial_state(self) -> JSONLexerState:
        return JSONLexerState()

    def _start_line(self) -> None:
        self._state.in_string_newline_escape = False

    def _finish_line(self) -> None:
        if not self._state.in_string_newline_escape:
            self._state.string_opener = None

    def _string_type(self) -> TokenType:
        return TokenType.IDENTIFIER if self._state.in_object_key else TokenType.STRING

    def _lex_next(self) -> None:
        state = self._state

        if state.in_block_comment:
            if self._match(r'\*/'):
                state.in_block_comment = False
                self._add_token(TokenType.COMMENT)
                return

            if self._match(r'(?:[^*]|\*(?!/))+'):
                self._add_token(TokenType.COMMENT)

            return

        if state.string_opener is not None:
            self._read_string_body(state.string_opener)
            return

        if self._match(r'["\']'):
            state.string_opener = self._current_token
            self._add_token(self._string_type())
            return

        if self._match(r'/\*'):
            state.in_block_comment = True
            self._add_token(TokenType.COMMENT)
            return

        if self._match(r'//.*'):
            self._add_token(TokenType.COMMENT)
            return

        if self._match(r'[()\[\]{}]'):
            self._read_bracket()
            return

        if self._current_token != '.' and self._match(self._VALUE_KEYWORD_PATTERN):
            self._add_token(TokenType.VALUE_KEYWORD)
            return

        if self._match(r'[a-zA-Z_$][a-zA-Z0-9_$]*'):
            self._add_token(TokenType.IDENTIFIER)
            return

        if self._match(self._NUMBER_PATTERN):
            self._add_token(TokenType.NUMBER)
            return

        if self._match(r':'):
            state.in_object_key = False
            self._add_token(TokenType.ASSIGNMENT)
            return

        if self._match(r','):
            state.in_object_key = self._top_bracket() == 'object'
            self._add_token(TokenType.SEPARATOR)
            return

        if self._match(r'\s+'):
            self._add_token(TokenType.WHITESPACE)

    def _top_bracket(self) -> str | None:
        stack = self._state.bracket_stack
        return stack[-1] if stack else None

    def _read_bracket(self) -> None:
        """
        Track the bracket we just matched and emit it.
        """
        state = self._state
        assert self._current_token is not None
        bracket = self._current_token
        self._add_token(TokenType.BRACKET)

        if bracket in '([{':
            state.bracket_stack.append(self._BRACKETS[bracket])

        elif state.bracket_stack:
            # Mismatched closing brackets still pop so one typo doesn't affect the rest of the file
            state.bracket_stack.pop()

        state.in_object_key = self._top_bracket() == 'object'

    def _read_string_body(self, opener: str) -> None:
        """
        Read the next piece of an open string.

        Args:
            opener: The quote character that opened the string
        """
        if (self._match(r'\\(?:[0-7]{2,3}|[1-7][0-7]{0,2})') or
                self._match(r'\\x[0-9a-fA-F]{2}') or
                self._match(r'\\u(?:[0-9a-fA-F]{4}|\{[0-9a-fA-F]+\})')):
            self._add_token(TokenType.ESCAPE)
            return

        if self._match(r'\\$'):
            self._state.in_string_newline_escape = True
            self._add_token(TokenType.ESCAPE)
            return

        if self._match(r'\\[bfnrtv0\'"`$\\/]'):
            self._add_token(TokenType.ESCAPE)
            return

        if self._match_string(opener):
            string_type = self._string_type()
            self._state.string_opener = None
            self._add_token(string_type)
            return

        if self._match(r'[^"\'\\]+') or self._match(r'.'):
            self._add_token(self._string_type())
