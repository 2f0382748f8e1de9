import copy
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import ClassVar, Dict, List, Pattern, Sequence, Tuple


class TokenType(IntEnum):
    """Type of lexical token."""
    ASSIGNMENT = auto()
    BRACKET = auto()
    CALL_IDENTIFIER = auto()
    COMMENT = auto()
    ESCAPE = auto()
    IDENTIFIER = auto()
    KEYWORD = auto()
    NUMBER = auto()
    OPERATOR = auto()
    SEPARATOR = auto()
    STRING = auto()
    SYNTAX_SYMBOL = auto()
    TEXT = auto()
    VALUE_KEYWORD = auto()
    WHITESPACE = auto()


@dataclass(frozen=True)
class Token:
    """
    Represents a token in the input stream.

    Attributes:
        type: The type of the token
        value: The string value of the token
        start: The starting position of the token in the input stream
    """
    type: TokenType
    value: str
    start: int


@dataclass
class LexerState:
    """
    State information for the Lexer.

    Concrete lexers subclass this with their own typed fields.  States are
    compared and fingerprinted by value, never by identity.
    """

    def clone(self) -> "LexerState":
        """
        Create an independent deep copy of this state.

        Returns:
            A copy sharing no mutable data with this state
        """
        return copy.deepcopy(self)

    def fingerprint(self) -> str:
        """
        Get a value-based key for this state.

        The dataclass repr names the state class and every nested field, so two
        states have the same fingerprint exactly when they compare equal.

        Returns:
            The fingerprint string
        """
        return repr(self)


class Lexer(ABC):
    """
    Base lexer class.

    A lexer scans one line at a time.  Each call to `lex` starts from the
    state the previous line finished with and returns the state for the next
    line.  Concrete lexers implement `_lex_next`, which tries their rules in
    precedence order against the unconsumed part of the line.
    """

    # Compiled regular expressions, shared across all lexers
    _PATTERN_CACHE: ClassVar[Dict[str, Pattern[str]]] = {}

    def __init__(self) -> None:
        self._input: str = ""
        self._input_len: int = 0
        self._position: int = 0
        self._tokens: List[Token] = []
        self._next_token: int = 0
        self._current_token: str | None = None
        self._current_start: int = 0
        self._state: LexerState = self.initial_state()

    @abstractmethod
    def initial_state(self) -> LexerState:
        """
        Get the state used for the first line of a document.

        Returns:
            A new default lexer state
        """

    @abstractmethod
    def _lex_next(self) -> None:
        """
        Apply the first matching rule at the current position.

        Implementations may consume nothing (for example when they only change
        state), in which case the scan loop guarantees progress itself.
        """

    def _start_line(self) -> None:
        """
        Reset any state that only applies within a single line.
        """

    def _finish_line(self) -> None:
        """
        Apply any end-of-line normalization to the state before it is returned.
        """

    def lex(self, prev_lexer_state: LexerState | None, input_str: str) -> LexerState:
        """
        Lex all the tokens in the input.

        Args:
            prev_lexer_state: The previous lexer state, if any
            input_str: The input string to lex

        Returns:
            The updated lexer state
        """
        self._input = input_str
        self._input_len = len(input_str)
        self._position = 0
        self._tokens = []
        self._next_token = 0
        self._current_token = None

        if prev_lexer_state is None:
            self._state = self.initial_state()

        else:
            self._check_state(prev_lexer_state)
            self._state = prev_lexer_state.clone()

        self._start_line()
        self._inner_lex()
        self._finish_line()
        return self._state

    def tokenize(self, input_str: str, prev_lexer_state: LexerState | None) -> Tuple[List[Token], LexerState]:
        """
        Tokenize one line.

        Calling this twice with equal arguments gives equal results: the inbound
        state is never modified.

        Args:
            input_str: The line to tokenize, without its newline
            prev_lexer_state: The outbound state of the previous line, if any

        Returns:
            The tokens for the line and the outbound state
        """
        lexer_state = self.lex(prev_lexer_state, input_str)
        return list(self._tokens), lexer_state

    def _check_state(self, prev_lexer_state: LexerState) -> None:
        expected = type(self._state)
        assert isinstance(prev_lexer_state, expected), \
            f"Expected {expected.__name__}, got {type(prev_lexer_state).__name__}"

    def _inner_lex(self) -> None:
        """
        Lex all the tokens in the input.
        """
        while self._position < self._input_len:
            position = self._position
            self._lex_next()

            # Nothing matched so consume one character as unclassified text
            if self._position == position:
                self._current_token = self._input[position]
                self._current_start = position
                self._position += 1
                self._add_token(TokenType.TEXT)

    def get_next_token(self) -> Token | None:
        """
        Gets the next token from the input.

        Returns:
            The next Token available or None if there are no tokens left.
        """
        if self._next_token >= len(self._tokens):
            return None

        token = self._tokens[self._next_token]
        self._next_token += 1
        return token

    def peek_next_token(self, offset: int = 0) -> Token | None:
        """
        Get the token that is 'offset' positions ahead.

        Args:
            offset: How many tokens to look ahead (default 0)

        Returns:
            The token at the specified offset, or None if none found
        """
        index = self._next_token + offset
        if index >= len(self._tokens):
            return None

        return self._tokens[index]

    @classmethod
    def _compile(cls, pattern: str) -> Pattern[str]:
        compiled = cls._PATTERN_CACHE.get(pattern)
        if compiled is None:
            compiled = re.compile(pattern, re.DOTALL)
            cls._PATTERN_CACHE[pattern] = compiled

        return compiled

    def _match(self, pattern: str, context_after: str | None = None) -> bool:
        """
        Try to match a pattern at the current position.

        Args:
            pattern: Regular expression to match
            context_after: Optional regular expression that must match directly
                after the matched text.  It is only checked, never consumed.

        Returns:
            True if the pattern matched, in which case the position has moved past it
        """
        match = self._compile(pattern).match(self._input, self._position)
        if not match:
            return False

        end = match.end()
        if context_after is not None and not self._compile(context_after).match(self._input, end):
            return False

        self._current_token = match.group(0)
        self._current_start = self._position
        self._position = end
        return True

    def _match_string(self, literal: str) -> bool:
        """
        Try to match an exact string at the current position.

        Args:
            literal: The text to match

        Returns:
            True if the text matched
        """
        if not literal or not self._input.startswith(literal, self._position):
            return False

        self._current_token = literal
        self._current_start = self._position
        self._position += len(literal)
        return True

    def _match_any(self, operator_map: Dict[str, List[str]]) -> bool:
        """
        Try to match the longest of a set of literal strings at the current position.

        Args:
            operator_map: Map built by `build_operator_map`

        Returns:
            True if one of the strings matched
        """
        if self._position >= self._input_len:
            return False

        for op in operator_map.get(self._input[self._position], []):
            if self._match_string(op):
                return True

        return False

    def _add_token(self, token_type: TokenType) -> None:
        """
        Emit the most recently matched text as a token.

        Args:
            token_type: The type to give the token
        """
        assert self._current_token is not None, "No text has been matched"
        if not self._current_token:
            return

        self._tokens.append(Token(type=token_type, value=self._current_token, start=self._current_start))

    @staticmethod
    def build_operator_map(operators: Sequence[str]) -> Dict[str, List[str]]:
        """
        Build an operator map from a list of operators.

        Args:
            operators: List of operator strings

        Returns:
            A dictionary mapping first characters to lists of operators
            starting with that character, sorted by length (longest first)
        """
        operator_map: Dict[str, List[str]] = {}
        for op in operators:
            if not op:
                continue

            first_char = op[0]
            if first_char not in operator_map:
                operator_map[first_char] = []

            operator_map[first_char].append(op)

        # Sort each list by length, longest first to ensure greedy matching
        for _first_char, operators_list in operator_map.items():
            operators_list.sort(key=len, reverse=True)

        return operator_map

    @staticmethod
    def build_word_pattern(words: Sequence[str]) -> str:
        """
        Build a pattern matching any of a set of whole words.

        Args:
            words: The words to match

        Returns:
            A regular expression string
        """
        ordered = sorted(words, key=len, reverse=True)
        return r"\b(?:" + "|".join(re.escape(word) for word in ordered) + r")\b"
