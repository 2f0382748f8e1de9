import dataclasses
import re
from dataclasses import dataclass
from typing import Callable, ClassVar, Dict

from syntax.css.css_lexer import CSSLexer
from syntax.javascript.javascript_lexer import JavaScriptLexer
from syntax.lexer import Lexer, LexerState, TokenType
from syntax.programming_language import ProgrammingLanguage


@dataclass
class HTMLLexerState(LexerState):
    """
    State information for the HTML lexer.

    Attributes:
        in_block_comment: Indicates if we're currently parsing a comment
        in_tag: Indicates if we're inside a tag, between its name and `>`
        in_closing_tag: Indicates if the current tag is a closing tag
        current_tag_name: Lower-case name of the most recent tag
        in_attribute_value: Indicates if we're inside an attribute value
        current_attribute_value_opener: Quote character of a quoted attribute value
        embedded_language: Language of the embedded content we're inside, if any
        embedded_state: The embedded lexer's own state, carried between lines
    """
    in_block_comment: bool = False
    in_tag: bool = False
    in_closing_tag: bool = False
    current_tag_name: str | None = None
    in_attribute_value: bool = False
    current_attribute_value_opener: str | None = None
    embedded_language: ProgrammingLanguage | None = None
    embedded_state: LexerState | None = None


class HTMLLexer(Lexer):
    """
    Lexer for HTML.

    Content inside `<script>` and `<style>` elements is handed to the
    JavaScript and CSS lexers.  Their state is kept inside the HTML state so
    multi-line scripts and style sheets lex correctly.
    """

    _state: HTMLLexerState

    _EMBEDDED_TAGS: ClassVar[Dict[str, ProgrammingLanguage]] = {
        'script': ProgrammingLanguage.JAVASCRIPT,
        'style': ProgrammingLanguage.CSS
    }

    _EMBEDDED_LEXERS: ClassVar[Dict[ProgrammingLanguage, Callable[[], Lexer]]] = {
        ProgrammingLanguage.JAVASCRIPT: JavaScriptLexer,
        ProgrammingLanguage.CSS: CSSLexer
    }

    def __init__(self) -> None:
        super().__init__()
        self._embedded_lexers: Dict[ProgrammingLanguage, Lexer] = {}

    def initial_state(self) -> HTMLLexerState:
        return HTMLLexerState()

    def _embedded_lexer(self, language: ProgrammingLanguage) -> Lexer:
        lexer = self._embedded_lexers.get(language)
        if lexer is None:
            lexer = self._EMBEDDED_LEXERS[language]()
            self._embedded_lexers[language] = lexer

        return lexer

    def _enter_embedded_content(self) -> None:
        """
        Switch to embedded content if the tag that just closed starts a script or style.
        """
        state = self._state
        if state.in_closing_tag or state.current_tag_name is None:
            return

        language = self._EMBEDDED_TAGS.get(state.current_tag_name)
        if language is None:
            return

        state.embedded_language = language
        state.embedded_state = None

    def _lex_next(self) -> None:
        state = self._state

        if state.embedded_language is not None:
            self._read_embedded_content()
            return

        if state.in_block_comment:
            if self._match(r'-->'):
                state.in_block_comment = False
                self._add_token(TokenType.COMMENT)
                return

            if self._match(r'(?:[^-]|-(?!->))+'):
                self._add_token(TokenType.COMMENT)

            return

        if self._match(r'&(?:[a-zA-Z0-9]+|#[0-9]+|#[xX][0-9a-fA-F]+);?'):
            # Character entity
            self._add_token(TokenType.ESCAPE)
            return

        if state.in_attribute_value:
            self._read_attribute_value()
            return

        if state.in_tag:
            self._read_tag_body()
            return

        if self._match(r'<!--'):
            state.in_block_comment = True
            self._add_token(TokenType.COMMENT)
            return

        if self._match(r'</?', r'[^<>"\'\s/]'):
            state.in_closing_tag = self._current_token == '</'
            self._add_token(TokenType.SYNTAX_SYMBOL)

            self._match(r'[^<>"\'\s/]+')
            state.in_tag = True
            state.current_tag_name = (self._current_token or '').lower()
            self._add_token(TokenType.KEYWORD)
            return

        if self._match(r'[^<>&]+'):
            self._add_token(TokenType.TEXT)

    def _read_tag_body(self) -> None:
        """
        Read attribute names and the end of a tag.
        """
        state = self._state

        if self._match(r'[^=>"\'\s/]+', r'\s*=\s*'):
            # Attribute name with a value
            self._add_token(TokenType.IDENTIFIER)

            self._match(r'\s*=\s*')
            self._add_token(TokenType.SYNTAX_SYMBOL)
            state.in_attribute_value = True
            return

        if self._match(r'[^=>"\'\s/]+'):
            self._add_token(TokenType.IDENTIFIER)
            return

        if self._match(r'/?>'):
            state.in_tag = False
            self._add_token(TokenType.SYNTAX_SYMBOL)
            if self._current_token == '>':
                self._enter_embedded_content()

            return

        if self._match(r'\s+'):
            self._add_token(TokenType.WHITESPACE)

    def _read_attribute_value(self) -> None:
        """
        Read a quoted or unquoted attribute value.
        """
        state = self._state
        opener = state.current_attribute_value_opener

        if opener is not None:
            if self._match_string(opener):
                state.in_attribute_value = False
                state.current_attribute_value_opener = None
                self._add_token(TokenType.STRING)
                return

            if self._match(r'[^"\'&]+') or self._match(r'.'):
                self._add_token(TokenType.STRING)

            return

        if self._match(r'>'):
            state.in_tag = False
            state.in_attribute_value = False
            self._add_token(TokenType.SYNTAX_SYMBOL)
            self._enter_embedded_content()
            return

        if self._match(r'\s+'):
            # Whitespace ends an unquoted value
            state.in_attribute_value = False
            self._add_token(TokenType.WHITESPACE)
            return

        if self._match(r'["\']'):
            state.current_attribute_value_opener = self._current_token
            self._add_token(TokenType.STRING)
            return

        if self._match(r'[^>"\'&\s]+'):
            self._add_token(TokenType.STRING)

    def _read_embedded_content(self) -> None:
        """
        Hand the text up to the element's closing tag to the embedded lexer.

        If there is no closing tag on this line the rest of the line is embedded
        content and the next line starts in the same mode.
        """
        state = self._state
        assert state.embedded_language is not None
        assert state.current_tag_name is not None

        closing_tag = self._compile(r'(?i)</' + re.escape(state.current_tag_name) + r'\s*>')
        match = closing_tag.search(self._input, self._position)
        end = match.start() if match else self._input_len

        start = self._position
        code = self._input[start:end]
        if code:
            lexer = self._embedded_lexer(state.embedded_language)
            tokens, embedded_state = lexer.tokenize(code, state.embedded_state)
            self._tokens.extend(dataclasses.replace(token, start=token.start + start) for token in tokens)
            state.embedded_state = embedded_state

        self._position = end
        if match is None:
            return

        state.embedded_language = None
        state.embedded_state = None

        # The closing tag starts right here, so lex it now
        if not code:
            self._lex_next()
