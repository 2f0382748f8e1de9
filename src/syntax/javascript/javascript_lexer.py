from dataclasses import dataclass, field
from typing import List

from syntax.lexer import Lexer, LexerState, TokenType


@dataclass
class StringContext:
    """
    One level of string nesting.

    A new level is pushed each time a template literal placeholder (`${`)
    opens, so strings inside the placeholder do not disturb the enclosing one.

    Attributes:
        string_opener: The quote character of the open string, if any
        in_template_string: Indicates if the open string is a template literal
        in_template_placeholder: Indicates if we're inside a `${...}` of the open string
        brace_depth: Count of unclosed `{` seen at this level
    """
    string_opener: str | None = None
    in_template_string: bool = False
    in_template_placeholder: bool = False
    brace_depth: int = 0


@dataclass
class JavaScriptLexerState(LexerState):
    """
    State information for the JavaScript lexer.

    Attributes:
        string_stack: String nesting levels, innermost last
        in_string_newline_escape: Indicates if the line ended with a backslash inside a string
        in_block_comment: Indicates if we're currently parsing a block comment
    """
    string_stack: List[StringContext] = field(default_factory=lambda: [StringContext()])
    in_string_newline_escape: bool = False
    in_block_comment: bool = False


class JavaScriptLexer(Lexer):
    """
    Lexer for JavaScript code.

    This lexer handles JavaScript-specific syntax including keywords, operators,
    strings, template literals with nested placeholders, comments, and numeric
    literals.
    """

    _state: JavaScriptLexerState

    _KEYWORDS = [
        'as', 'async', 'await', 'break', 'case', 'catch', 'class', 'const',
        'continue', 'debugger', 'default', 'delete', 'do', 'else', 'enum',
        'export', 'extends', 'finally', 'for', 'from', 'function', 'get', 'if',
        'implements', 'import', 'in', 'instanceof', 'interface', 'let', 'new',
        'of', 'package', 'private', 'protected', 'public', 'return', 'set',
        'static', 'switch', 'throw', 'try', 'typeof', 'var', 'void', 'while',
        'with', 'yield'
    ]

    _VALUE_KEYWORDS = [
        'constructor', 'false', 'Infinity', 'NaN', 'null', 'super', 'this',
        'true', 'undefined'
    ]

    _OPERATORS = [
        '>>>=', '>>=', '<<=', '&&=', '||=', '??=', '**=',
        '!==', '===', '>>>', '...', '!=', '==', '+=', '-=',
        '*=', '/=', '%=', '&=', '|=', '^=', '<=', '>=', '&&',
        '||', '??', '?.', '<<', '>>', '**', '++', '--', '=>', '+',
        '-', '*', '/', '%', '&', '~', '!', '|', '^', '=', '<',
        '>', ';', ':', '?', '.', ','
    ]

    _OPERATORS_MAP = Lexer.build_operator_map(_OPERATORS)

    _KEYWORD_PATTERN = Lexer.build_word_pattern(_KEYWORDS)
    _VALUE_KEYWORD_PATTERN = Lexer.build_word_pattern(_VALUE_KEYWORDS)
    _IDENTIFIER_PATTERN = r'[a-zA-Z_$][a-zA-Z0-9_$]*'
    _NUMBER_PATTERN = (
        r'(?:0[xX][0-9a-fA-F_]+|0[bB][01_]+|0[oO][0-7_]+|'
        r'(?:[0-9][0-9_]*(?:\.[0-9_]*)?|\.[0-9][0-9_]*)(?:[eE][+-]?[0-9]+)?)n?'
    )

    def initial_state(self) -> JavaScriptLexerState:
        return JavaScriptLexerState()

    def _start_line(self) -> None:
        self._state.in_string_newline_escape = False

    def _finish_line(self) -> None:
        # Quoted strings end with the line unless the newline was escaped
        top = self._state.string_stack[-1]
        if not top.in_template_string and not self._state.in_string_newline_escape:
            top.string_opener = None

    def _in_template_placeholder_below(self) -> bool:
        stack = self._state.string_stack
        if len(stack) < 2:
            return False

        return stack[-2].in_template_placeholder

    def _lex_next(self) -> None:
        state = self._state
        top = state.string_stack[-1]

        if state.in_block_comment:
            self._read_block_comment_body()
            return

        if top.string_opener is not None and not top.in_template_placeholder:
            self._read_string_body(top)
            return

        if self._match(r'\}'):
            if top.brace_depth == 0 and self._in_template_placeholder_below():
                # Template placeholder close
                state.string_stack.pop()
                state.string_stack[-1].in_template_placeholder = False
                self._add_token(TokenType.STRING)
                return

            top.brace_depth = max(0, top.brace_depth - 1)
            self._add_token(TokenType.BRACKET)
            return

        if self._match(r'`'):
            top.string_opener = self._current_token
            top.in_template_string = True
            self._add_token(TokenType.STRING)
            return

        if self._match(r'["\']'):
            top.string_opener = self._current_token
            self._add_token(TokenType.STRING)
            return

        if self._match(r'/\*'):
            state.in_block_comment = True
            self._add_token(TokenType.COMMENT)
            self._read_block_comment_body()
            return

        if self._match(r'//.*'):
            self._add_token(TokenType.COMMENT)
            return

        after_dot = self._current_token == '.'
        if not after_dot and self._match(self._KEYWORD_PATTERN):
            self._add_token(TokenType.KEYWORD)
            return

        if not after_dot and self._match(self._VALUE_KEYWORD_PATTERN):
            self._add_token(TokenType.VALUE_KEYWORD)
            return

        if self._match(self._NUMBER_PATTERN):
            self._add_token(TokenType.NUMBER)
            return

        if self._match(self._IDENTIFIER_PATTERN, r'\s*\('):
            self._add_token(TokenType.CALL_IDENTIFIER)
            return

        if self._match(self._IDENTIFIER_PATTERN):
            self._add_token(TokenType.IDENTIFIER)
            return

        if self._match(r'\{'):
            top.brace_depth += 1
            self._add_token(TokenType.BRACKET)
            return

        if self._match(r'[()\[\]]'):
            self._add_token(TokenType.BRACKET)
            return

        if self._match_any(self._OPERATORS_MAP):
            self._add_token(TokenType.OPERATOR)
            return

        if self._match(r'\s+'):
            self._add_token(TokenType.WHITESPACE)

    def _read_block_comment_body(self) -> None:
        """
        Read block comment text up to and including the closing `*/`, if present.
        """
        if self._match(r'\*/'):
            self._state.in_block_comment = False
            self._add_token(TokenType.COMMENT)
            return

        if self._match(r'(?:[^*]|\*(?!/))+'):
            self._add_token(TokenType.COMMENT)

    def _read_string_body(self, top: StringContext) -> None:
        """
        Read the next piece of an open string: an escape, a placeholder opener,
        the closing quote or a run of plain string text.

        Args:
            top: The innermost string context
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

        if self._match(r'\\[bfnrtv0\'"`$\\]'):
            self._add_token(TokenType.ESCAPE)
            return

        if top.in_template_string and self._match_string('${'):
            top.in_template_placeholder = True
            self._state.string_stack.append(StringContext())
            self._add_token(TokenType.STRING)
            return

        assert top.string_opener is not None
        if self._match_string(top.string_opener):
            top.string_opener = None
            top.in_template_string = False
            self._add_token(TokenType.STRING)
            return

        if self._match(r'[^"\'`\\$]+') or self._match(r'.'):
            self._add_token(TokenType.STRING)
