"""Syntax framework."""

from syntax.lexer import Token, TokenType, Lexer, LexerState
from syntax.lexer_registry import LexerFactory, LexerRegistry
from syntax.programming_language import ProgrammingLanguage
from syntax.programming_language_utils import ProgrammingLanguageUtils


__all__ = [
    "Lexer",
    "LexerFactory",
    "LexerRegistry",
    "LexerState",
    "ProgrammingLanguage",
    "ProgrammingLanguageUtils",
    "Token",
    "TokenType"
]
