"""
Tests for JavaScript tokenization.
"""
from syntax.javascript.javascript_lexer import JavaScriptLexer, JavaScriptLexerState, StringContext
from syntax.lexer import TokenType


def _pairs(tokens):
    return [(token.type, token.value) for token in tokens]


def _significant(tokens):
    return [(token.type, token.value) for token in tokens if token.type != TokenType.WHITESPACE]


class TestJavaScriptTemplateStrings:
    """Test template literals and their placeholders."""

    def test_template_with_placeholder(self):
        """Test that a placeholder closes cleanly and leaves no open string."""
        tokens, state = JavaScriptLexer().tokenize("`a${b}c`", None)

        assert _pairs(tokens) == [
            (TokenType.STRING, "`"),
            (TokenType.STRING, "a"),
            (TokenType.STRING, "${"),
            (TokenType.IDENTIFIER, "b"),
            (TokenType.STRING, "}"),
            (TokenType.STRING, "c"),
            (TokenType.STRING, "`")
        ]
        assert state == JavaScriptLexerState()

    def test_braces_inside_placeholder(self):
        """Test that an object literal inside a placeholder does not close it early."""
        tokens, state = JavaScriptLexer().tokenize("`x${ {a: 1}.a }y`", None)

        assert (TokenType.BRACKET, "{") in _pairs(tokens)
        assert (TokenType.BRACKET, "}") in _pairs(tokens)
        assert tokens[-2].type == TokenType.STRING
        assert tokens[-2].value == "y"
        assert state == JavaScriptLexerState()

    def test_nested_template_in_placeholder(self):
        """Test a template literal nested inside another's placeholder."""
        tokens, state = JavaScriptLexer().tokenize("`a${`b${c}`}d`", None)

        assert [t for t in tokens if t.type == TokenType.IDENTIFIER][0].value == "c"
        assert tokens[-1].value == "`"
        assert state == JavaScriptLexerState()

    def test_template_spans_lines(self):
        """Test that a template literal stays open across lines."""
        lexer = JavaScriptLexer()
        _tokens, state1 = lexer.tokenize("const s = `first", None)
        assert state1.string_stack[-1].string_opener == "`"

        tokens, state2 = lexer.tokenize("second` + x;", state1)
        assert _pairs(tokens)[:2] == [(TokenType.STRING, "second"), (TokenType.STRING, "`")]
        assert (TokenType.IDENTIFIER, "x") in _pairs(tokens)
        assert state2 == JavaScriptLexerState()

    def test_placeholder_spans_lines(self):
        """Test that an open placeholder is carried to the next line."""
        lexer = JavaScriptLexer()
        _tokens, state1 = lexer.tokenize("`a${", None)
        assert len(state1.string_stack) == 2
        assert state1.string_stack[0].in_template_placeholder

        tokens, state2 = lexer.tokenize("value }b`", state1)
        assert _pairs(tokens)[0] == (TokenType.IDENTIFIER, "value")
        assert state2 == JavaScriptLexerState()


class TestJavaScriptStrings:
    """Test quoted strings."""

    def test_quoted_strings(self):
        """Test single and double quoted strings."""
        for s in ["'hello'", '"world"']:
            tokens, _state = JavaScriptLexer().tokenize(s, None)
            assert [t.type for t in tokens] == [TokenType.STRING] * 3
            assert tokens[1].value == s[1:-1]

    def test_escapes(self):
        """Test escape sequences inside strings."""
        tokens, _state = JavaScriptLexer().tokenize(r"'a\'b\n\x41B\u{1F600}\101'", None)

        escapes = [t.value for t in tokens if t.type == TokenType.ESCAPE]
        assert escapes == [r"\'", r"\n", r"\x41", r"\u{1F600}", r"\101"]

    def test_unterminated_string_closes_at_line_end(self):
        """Test that a quoted string does not leak onto the next line."""
        lexer = JavaScriptLexer()
        _tokens, state = lexer.tokenize("let s = 'open", None)
        assert state == JavaScriptLexerState()

        tokens, _state = lexer.tokenize("let t;", state)
        assert _significant(tokens)[0] == (TokenType.KEYWORD, "let")

    def test_escaped_newline_continues_string(self):
        """Test that a trailing backslash keeps a quoted string open."""
        lexer = JavaScriptLexer()
        tokens, state = lexer.tokenize("let s = 'open\\", None)
        assert tokens[-1].type == TokenType.ESCAPE
        assert state.string_stack[-1].string_opener == "'"
        assert state.in_string_newline_escape

        tokens, state = lexer.tokenize("closed';", state)
        assert _pairs(tokens)[:2] == [(TokenType.STRING, "closed"), (TokenType.STRING, "'")]
        assert state == JavaScriptLexerState()

    def test_other_quote_inside_string(self):
        """Test that the other quote character does not close a string."""
        tokens, state = JavaScriptLexer().tokenize("'say \"hi\"'", None)
        assert all(t.type == TokenType.STRING for t in tokens)
        assert state == JavaScriptLexerState()


class TestJavaScriptComments:
    """Test comments."""

    def test_line_comment(self):
        """Test a line comment."""
        tokens, _state = JavaScriptLexer().tokenize("x; // note", None)
        assert tokens[-1].type == TokenType.COMMENT
        assert tokens[-1].value == "// note"

    def test_block_comment_on_one_line(self):
        """Test a block comment that closes on the same line."""
        tokens, state = JavaScriptLexer().tokenize("/* a */ b", None)
        assert _significant(tokens) == [
            (TokenType.COMMENT, "/*"),
            (TokenType.COMMENT, " a "),
            (TokenType.COMMENT, "*/"),
            (TokenType.IDENTIFIER, "b")
        ]
        assert not state.in_block_comment

    def test_block_comment_spans_lines(self):
        """Test a block comment carried across lines."""
        lexer = JavaScriptLexer()
        _tokens, state = lexer.tokenize("/* start", None)
        assert state.in_block_comment

        tokens, state = lexer.tokenize("still * comment", state)
        assert all(t.type == TokenType.COMMENT for t in tokens)
        assert state.in_block_comment

        tokens, state = lexer.tokenize("end */ x", state)
        assert _significant(tokens)[-1] == (TokenType.IDENTIFIER, "x")
        assert not state.in_block_comment


class TestJavaScriptCode:
    """Test keywords, identifiers, numbers and operators."""

    def test_keywords_and_value_keywords(self):
        """Test keyword classification."""
        tokens, _state = JavaScriptLexer().tokenize("return this === null", None)
        assert _significant(tokens) == [
            (TokenType.KEYWORD, "return"),
            (TokenType.VALUE_KEYWORD, "this"),
            (TokenType.OPERATOR, "==="),
            (TokenType.VALUE_KEYWORD, "null")
        ]

    def test_keyword_after_dot_is_identifier(self):
        """Test that property names that look like keywords are identifiers."""
        tokens, _state = JavaScriptLexer().tokenize("promise.catch(e)", None)
        assert _pairs(tokens)[:3] == [
            (TokenType.IDENTIFIER, "promise"),
            (TokenType.OPERATOR, "."),
            (TokenType.CALL_IDENTIFIER, "catch")
        ]

    def test_call_identifier(self):
        """Test that an identifier followed by a parenthesis is a call."""
        tokens, _state = JavaScriptLexer().tokenize("foo (1); bar", None)
        assert _significant(tokens) == [
            (TokenType.CALL_IDENTIFIER, "foo"),
            (TokenType.BRACKET, "("),
            (TokenType.NUMBER, "1"),
            (TokenType.BRACKET, ")"),
            (TokenType.OPERATOR, ";"),
            (TokenType.IDENTIFIER, "bar")
        ]

    def test_numbers(self):
        """Test numeric literal forms."""
        for number in ["0", "42", "3.14", ".5", "1e10", "2.5E-3", "0xFF", "0b1010", "0o17", "1_000_000", "10n"]:
            tokens, _state = JavaScriptLexer().tokenize(number, None)
            assert _pairs(tokens) == [(TokenType.NUMBER, number)], number

    def test_longest_operator_wins(self):
        """Test that multi-character operators are matched whole."""
        tokens, _state = JavaScriptLexer().tokenize("a >>>= b => c?.d ?? e", None)
        operators = [t.value for t in tokens if t.type == TokenType.OPERATOR]
        assert operators == [">>>=", "=>", "?.", "??"]

    def test_state_after_closing_brace_outside_template(self):
        """Test that unbalanced closing braces never go negative."""
        _tokens, state = JavaScriptLexer().tokenize("}}", None)
        assert state.string_stack == [StringContext()]
