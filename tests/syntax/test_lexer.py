"""
Tests for the lexer framework shared by all languages.
"""
import pytest

from syntax.css.css_lexer import CSSLexer
from syntax.html.html_lexer import HTMLLexer
from syntax.javascript.javascript_lexer import JavaScriptLexer, JavaScriptLexerState
from syntax.json.json_lexer import JSONLexer, JSONLexerState
from syntax.lexer import Lexer, LexerState, Token, TokenType
from syntax.text.text_lexer import TextLexer


SAMPLE_DOCUMENTS = [
    (JavaScriptLexer, [
        "/* header",
        " * comment */ const x = `a${ {b: 'c'}['b'] }d`;",
        "function f(a, b) { return a >>>= b ?? 0x1F; }",
        "let s = 'unterminated",
        "let t = \"cont\\",
        "inued\"; // done",
        "@decorator #private é"
    ]),
    (CSSLexer, [
        "@media screen {",
        "  a:hover, .cls > #id[data-x~=\"y\" i] { color: #fff; margin: -5px 1.5em; }",
        "/* comment",
        "   continues */ div::before { content: 'x\\'y'; }",
        "}"
    ]),
    (HTMLLexer, [
        "<!DOCTYPE html>",
        "<div class=\"a\" id=b data-x='c'>Text &amp; more &#169;</div>",
        "<!-- comment",
        "continues --><script type=\"text/javascript\">",
        "var s = `tpl",
        "line`;</script><style>p { color: red; }</STYLE>"
    ]),
    (JSONLexer, [
        "{",
        "  \"key\": [1, -2.5e3, true, null, \"v\\u00e9\"],",
        "  // comment",
        "  'single': {\"nested\": NaN}",
        "}"
    ]),
    (TextLexer, [
        "Just some text",
        "",
        "   with <symbols> & things"
    ])
]


def _lex_document(lexer_class, lines):
    lexer = lexer_class()
    state = None
    results = []
    for line in lines:
        tokens, state = lexer.tokenize(line, state)
        results.append((tokens, state))

    return results


class TestLexerFramework:
    """Test behaviour every lexer gets from the framework."""

    @pytest.mark.parametrize("lexer_class,lines", SAMPLE_DOCUMENTS)
    def test_tokens_concatenate_to_line(self, lexer_class, lines):
        """Test that token values concatenate back to the original line."""
        for line, (tokens, _state) in zip(lines, _lex_document(lexer_class, lines)):
            assert "".join(token.value for token in tokens) == line

    @pytest.mark.parametrize("lexer_class,lines", SAMPLE_DOCUMENTS)
    def test_token_starts_are_contiguous(self, lexer_class, lines):
        """Test that each token starts where the previous one ended."""
        for tokens, _state in _lex_document(lexer_class, lines):
            position = 0
            for token in tokens:
                assert token.start == position
                assert token.value != ""
                position += len(token.value)

    @pytest.mark.parametrize("lexer_class,lines", SAMPLE_DOCUMENTS)
    def test_tokenize_is_referentially_transparent(self, lexer_class, lines):
        """Test that equal inputs always produce equal outputs."""
        first = _lex_document(lexer_class, lines)
        second = _lex_document(lexer_class, lines)
        assert first == second

        # A fresh lexer fed a cloned state gives the same result again
        state = None
        for line, (tokens, outbound) in zip(lines, first):
            again_tokens, again_state = lexer_class().tokenize(line, state.clone() if state else None)
            assert again_tokens == tokens
            assert again_state == outbound
            assert again_state.fingerprint() == outbound.fingerprint()
            state = outbound

    def test_inbound_state_is_not_mutated(self):
        """Test that lexing never changes the state passed in."""
        lexer = JavaScriptLexer()
        _tokens, state = lexer.tokenize("const s = `open ${", None)
        snapshot = state.fingerprint()

        lexer.tokenize("x } still open`;", state)
        assert state.fingerprint() == snapshot

    def test_unmatched_characters_become_text(self):
        """Test that characters no rule recognizes are emitted as single TEXT tokens."""
        tokens, _state = JavaScriptLexer().tokenize("@#", None)
        assert tokens == [
            Token(TokenType.TEXT, "@", 0),
            Token(TokenType.TEXT, "#", 1)
        ]

    def test_empty_line(self):
        """Test that an empty line gives no tokens and keeps the state."""
        tokens, state = JSONLexer().tokenize("", None)
        assert tokens == []
        assert state == JSONLexerState()

    def test_wrong_state_type_is_rejected(self):
        """Test that passing another language's state is a programming error."""
        with pytest.raises(AssertionError):
            JavaScriptLexer().tokenize("x", JSONLexerState())

    def test_get_next_token_and_peek(self):
        """Test iterating over the tokens of the last lexed line."""
        lexer = JavaScriptLexer()
        lexer.lex(None, "a = 1")

        assert lexer.peek_next_token().value == "a"
        assert lexer.peek_next_token(2).value == "="
        values = []
        while True:
            token = lexer.get_next_token()
            if token is None:
                break

            values.append(token.value)

        assert values == ["a", " ", "=", " ", "1"]
        assert lexer.peek_next_token() is None


class TestLexerState:
    """Test lexer state cloning and fingerprints."""

    def test_clone_is_independent(self):
        """Test that cloning copies nested mutable data."""
        state = JSONLexerState(bracket_stack=["object"])
        clone = state.clone()
        clone.bracket_stack.append("array")

        assert state.bracket_stack == ["object"]
        assert clone == JSONLexerState(bracket_stack=["object", "array"])

    def test_fingerprint_is_value_based(self):
        """Test that equal states have equal fingerprints."""
        assert JSONLexerState(bracket_stack=["array"]).fingerprint() == \
            JSONLexerState(bracket_stack=["array"]).fingerprint()
        assert JSONLexerState(bracket_stack=["array"]).fingerprint() != \
            JSONLexerState(bracket_stack=["object"]).fingerprint()

    def test_fingerprint_names_the_state_class(self):
        """Test that states of different languages never share a fingerprint."""
        assert JavaScriptLexerState().fingerprint() != JSONLexerState().fingerprint()
        assert "JavaScriptLexerState" in JavaScriptLexerState().fingerprint()

    def test_base_state(self):
        """Test the base state on its own."""
        state = LexerState()
        assert state.clone() == state
        assert state.fingerprint() == "LexerState()"


class TestLexerBuilders:
    """Test the static helpers used to build rule tables."""

    def test_build_operator_map_orders_longest_first(self):
        """Test that operators sharing a first character are tried longest first."""
        operator_map = Lexer.build_operator_map(["=", "===", "==", "!", "!=", ""])
        assert operator_map == {
            "=": ["===", "==", "="],
            "!": ["!=", "!"]
        }

    def test_build_word_pattern_matches_whole_words(self):
        """Test that keyword patterns only match complete words."""
        tokens, _state = JavaScriptLexer().tokenize("in int instanceof", None)
        assert [(t.type, t.value) for t in tokens if t.type != TokenType.WHITESPACE] == [
            (TokenType.KEYWORD, "in"),
            (TokenType.IDENTIFIER, "int"),
            (TokenType.KEYWORD, "instanceof")
        ]
