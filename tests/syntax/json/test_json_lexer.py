"""
Tests for JSON tokenization.
"""
from syntax.json.json_lexer import JSONLexer, JSONLexerState
from syntax.lexer import Token, TokenType


def _pairs(tokens):
    return [(token.type, token.value) for token in tokens]


def _significant(tokens):
    return [(token.type, token.value) for token in tokens if token.type != TokenType.WHITESPACE]


class TestJSONKeysAndValues:
    """Test the difference between object keys and values."""

    def test_key_and_number_value(self):
        """Test the simplest object."""
        tokens, state = JSONLexer().tokenize('{"a": 1}', None)

        assert _pairs(tokens) == [
            (TokenType.BRACKET, "{"),
            (TokenType.IDENTIFIER, '"'),
            (TokenType.IDENTIFIER, "a"),
            (TokenType.IDENTIFIER, '"'),
            (TokenType.ASSIGNMENT, ":"),
            (TokenType.WHITESPACE, " "),
            (TokenType.NUMBER, "1"),
            (TokenType.BRACKET, "}")
        ]
        assert state == JSONLexerState()

    def test_string_value(self):
        """Test that a string after a colon is a value."""
        tokens, _state = JSONLexer().tokenize('{"k": "v"}', None)

        assert _significant(tokens)[5:8] == [
            (TokenType.STRING, '"'),
            (TokenType.STRING, "v"),
            (TokenType.STRING, '"')
        ]

    def test_second_key_after_comma(self):
        """Test that a comma inside an object starts a new key."""
        tokens, _state = JSONLexer().tokenize('{"a": 1, "b": true}', None)

        assert _significant(tokens)[6:12] == [
            (TokenType.SEPARATOR, ","),
            (TokenType.IDENTIFIER, '"'),
            (TokenType.IDENTIFIER, "b"),
            (TokenType.IDENTIFIER, '"'),
            (TokenType.ASSIGNMENT, ":"),
            (TokenType.VALUE_KEYWORD, "true")
        ]

    def test_array_strings_are_values(self):
        """Test that strings inside arrays are values, including after commas."""
        tokens, state = JSONLexer().tokenize('["a", "b"]', None)

        assert [t.type for t in tokens if t.value == "a" or t.value == "b"] == [TokenType.STRING, TokenType.STRING]
        assert (TokenType.SEPARATOR, ",") in _pairs(tokens)
        assert state.bracket_stack == []

    def test_nesting_across_lines(self):
        """Test that bracket nesting is carried between lines."""
        lexer = JSONLexer()
        lines = ['{', '  "a": [', '    1,', '  ],', '  "b": null', '}']
        state = None
        results = []
        for line in lines:
            tokens, state = lexer.tokenize(line, state)
            results.append((_significant(tokens), state))

        assert results[0][1].bracket_stack == ["object"]
        assert results[0][1].in_object_key
        assert results[1][1].bracket_stack == ["object", "array"]
        assert not results[2][1].in_object_key
        assert results[3][1].in_object_key
        assert results[4][0][:3] == [
            (TokenType.IDENTIFIER, '"'),
            (TokenType.IDENTIFIER, "b"),
            (TokenType.IDENTIFIER, '"')
        ]
        assert results[4][0][-1] == (TokenType.VALUE_KEYWORD, "null")
        assert results[5][1] == JSONLexerState()


class TestJSONLiterals:
    """Test numbers, strings and extensions."""

    def test_numbers(self):
        """Test numeric literal forms."""
        for number in ["0", "-1", "1.5", "-2.5e3", "1E+2", "0x1F", ".5", "07.5", "017", "0o17", "0b101", "10n"]:
            tokens, _state = JSONLexer().tokenize(number, None)
            assert _pairs(tokens) == [(TokenType.NUMBER, number)], number

    def test_value_keywords(self):
        """Test literal names."""
        tokens, _state = JSONLexer().tokenize("[true, false, null, NaN, Infinity]", None)
        assert [t.value for t in tokens if t.type == TokenType.VALUE_KEYWORD] == \
            ["true", "false", "null", "NaN", "Infinity"]

    def test_escapes(self):
        """Test escape sequences inside strings."""
        tokens, _state = JSONLexer().tokenize(r'["a\nbé\/"]', None)
        assert [t.value for t in tokens if t.type == TokenType.ESCAPE] == [r"\n", r"\/"]

    def test_comments(self):
        """Test line and block comments."""
        lexer = JSONLexer()
        tokens, state = lexer.tokenize("1 // note", None)
        assert tokens[-1] == Token(TokenType.COMMENT, "// note", 2)

        _tokens, state = lexer.tokenize("/* open", state)
        assert state.in_block_comment

        tokens, state = lexer.tokenize("*/ 2", state)
        assert _significant(tokens) == [(TokenType.COMMENT, "*/"), (TokenType.NUMBER, "2")]
        assert not state.in_block_comment

    def test_unterminated_string_closes_at_line_end(self):
        """Test that an unterminated string does not leak onto the next line."""
        _tokens, state = JSONLexer().tokenize('["open', None)
        assert state.string_opener is None
        assert state.bracket_stack == ["array"]
