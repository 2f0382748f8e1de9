from dataclasses import dataclass

from syntax.lexer import Lexer, LexerState, TokenType


@dataclass
class CSSLexerState(LexerState):
    """
    State information for the CSS lexer.

    Attributes:
        in_block_comment: Indicates if we're currently parsing a comment
        in_at_rule: Indicates if the current line started an at-rule
        in_rule: Indicates if we're inside a rule body (`{...}`)
        in_attribute_selector: Indicates if we're inside an attribute selector (`[...]`)
        after_comparator: Indicates if the last token was an attribute comparator
        current_string_opener: The quote character of the open string, if any
        in_string_newline_escape: Indicates if the line ended with a backslash inside a string
    """
    in_block_comment: bool = False
    in_at_rule: bool = False
    in_rule: bool = False
    in_attribute_selector: bool = False
    after_comparator: bool = False
    current_string_opener: str | None = None
    in_string_newline_escape: bool = False


class CSSLexer(Lexer):
    """
    Lexer for CSS code.

    This lexer handles CSS-specific syntax including selectors, property names,
    at-rules, hex colors, numbers with units and attribute selectors.
    """

    _state: CSSLexerState

    _COMPARATORS = ['~=', '|=', '^=', '$=', '*=', '=']
    _COMPARATORS_MAP = Lexer.build_operator_map(_COMPARATORS)

    _OPERATORS = ['+', '-', '*', '/', '>', '~', ',', ';', ':']
    _OPERATORS_MAP = Lexer.build_operator_map(_OPERATORS)

    _NAME_PATTERN = r'(?:--|-?[a-zA-Z_])[a-zA-Z0-9_\-]*'

    def initial_state(self) -> CSSLexerState:
        return CSSLexerState()

    def _start_line(self) -> None:
        self._state.in_string_newline_escape = False

    def _finish_line(self) -> None:
        state = self._state
        state.in_at_rule = False
        if not state.in_string_newline_escape:
            state.current_string_opener = None

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

        if state.current_string_opener is not None:
            self._read_string_body(state.current_string_opener)
            return

        if self._match(r'\{'):
            state.in_rule = True
            self._add_token(TokenType.BRACKET)
            return

        if self._match(r'\}'):
            state.in_rule = False
            self._add_token(TokenType.BRACKET)
            return

        if self._match(r'\['):
            state.in_attribute_selector = True
            self._add_token(TokenType.BRACKET)
            return

        if self._match(r'\]'):
            state.in_attribute_selector = False
            state.after_comparator = False
            self._add_token(TokenType.BRACKET)
            return

        if self._match(r'/\*'):
            state.in_block_comment = True
            self._add_token(TokenType.COMMENT)
            return

        if self._match(r'\\["\':]'):
            self._add_token(TokenType.ESCAPE)
            return

        if self._match(r'["\']'):
            state.current_string_opener = self._current_token
            state.after_comparator = False
            self._add_token(TokenType.STRING)
            return

        if state.after_comparator:
            # A bare word after a comparator is an implicit string value
            state.after_comparator = False
            if self._match(r'[a-zA-Z0-9]+'):
                self._add_token(TokenType.STRING)
                return

        if state.in_attribute_selector and self._match(r'[is]', r'\s*\]'):
            # Attribute case sensitivity flag
            self._add_token(TokenType.OPERATOR)
            return

        if state.in_rule and self._match(self._NAME_PATTERN, r'\s*:'):
            # Property name
            self._add_token(TokenType.CALL_IDENTIFIER)
            return

        if self._match(r'@' + self._NAME_PATTERN):
            state.in_at_rule = True
            self._add_token(TokenType.KEYWORD)
            return

        if state.in_rule and self._match(r'#[0-9a-fA-F]{3}(?:[0-9a-fA-F]{3})?(?![0-9a-zA-Z\-])'):
            # Hex colour literal
            self._add_token(TokenType.NUMBER)
            return

        if self._match(r'[#.]' + self._NAME_PATTERN):
            # Element ID or class selector name
            self._add_token(TokenType.IDENTIFIER)
            return

        if not state.in_rule and self._match(r'::?' + self._NAME_PATTERN):
            # Pseudo selector name
            self._add_token(TokenType.CALL_IDENTIFIER)
            return

        if self._match(self._NAME_PATTERN):
            # Element name, attribute name or generic value
            if state.in_rule or state.in_at_rule or state.in_attribute_selector:
                self._add_token(TokenType.IDENTIFIER)
                return

            self._add_token(TokenType.KEYWORD)
            return

        if self._match(r'[0-9]*\.[0-9]+|[0-9]+'):
            self._add_token(TokenType.NUMBER)

            if self._match(r'[a-zA-Z%]+'):
                # Numeric unit
                self._add_token(TokenType.IDENTIFIER)

            return

        if self._match_any(self._COMPARATORS_MAP):
            state.after_comparator = True
            self._add_token(TokenType.OPERATOR)
            return

        if self._match_any(self._OPERATORS_MAP):
            self._add_token(TokenType.OPERATOR)
            return

        if self._match(r'\s+'):
            self._add_token(TokenType.WHITESPACE)

    def _read_string_body(self, opener: str) -> None:
        """
        Read the next piece of an open string.

        Args:
            opener: The quote character that opened the string
        """
        if self._match(r'\\$'):
            self._state.in_string_newline_escape = True
            self._add_token(TokenType.ESCAPE)
            return

        if self._match(r'\\.'):
            self._add_token(TokenType.ESCAPE)
            return

        if self._match_string(opener):
            self._state.current_string_opener = None
            self._add_token(TokenType.STRING)
            return

        if self._match(r'[^"\'\\]+') or self._match(r'.'):
            self._add_token(TokenType.STRING)
