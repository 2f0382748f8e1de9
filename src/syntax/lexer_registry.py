import logging
from typing import Callable, Dict, List

from syntax.lexer import Lexer
from syntax.programming_language import ProgrammingLanguage
from syntax.programming_language_utils import ProgrammingLanguageUtils
from syntax.text.text_lexer import TextLexer


LexerFactory = Callable[[], Lexer]


class LexerRegistry:
    """
    A registry of lexer factories, keyed by language id.

    Each editor owns its own registry, so registering a language in one editor
    never affects another.  Languages with no registered factory are lexed as
    plain text.
    """

    def __init__(self) -> None:
        self._factories: Dict[str, LexerFactory] = {}
        self._logger = logging.getLogger("LexerRegistry")

    @classmethod
    def create_default(cls) -> "LexerRegistry":
        """
        Create a registry with all the built-in languages registered.

        Returns:
            A new registry
        """
        # Imported here so the language modules can depend on this one
        # pylint: disable=import-outside-toplevel
        from syntax.css.css_lexer import CSSLexer
        from syntax.html.html_lexer import HTMLLexer
        from syntax.javascript.javascript_lexer import JavaScriptLexer
        from syntax.json.json_lexer import JSONLexer
        # pylint: enable=import-outside-toplevel

        registry = cls()
        registry.register(ProgrammingLanguage.CSS, CSSLexer)
        registry.register(ProgrammingLanguage.HTML, HTMLLexer)
        registry.register(ProgrammingLanguage.JAVASCRIPT, JavaScriptLexer)
        registry.register(ProgrammingLanguage.JSON, JSONLexer)
        registry.register(ProgrammingLanguage.TEXT, TextLexer)
        return registry

    @staticmethod
    def resolve(language: ProgrammingLanguage | str) -> ProgrammingLanguage:
        """
        Convert a language name to an enum value; enum values pass through.

        Args:
            language: The language, as an enum value or a name such as "js"

        Returns:
            The language; plain text if the name is not a built-in language
        """
        if isinstance(language, ProgrammingLanguage):
            return language

        return ProgrammingLanguageUtils.from_name(language)

    @staticmethod
    def language_id(language: ProgrammingLanguage | str) -> str:
        """
        Get the key a language is registered under.

        Built-in languages and their aliases map to the language's canonical
        name, so "js" and ProgrammingLanguage.JAVASCRIPT share a key.  Other
        names are only normalized, so registering a new language never
        replaces a built-in one.

        Args:
            language: The language, as an enum value or a name such as "js"

        Returns:
            The registry key
        """
        if isinstance(language, ProgrammingLanguage):
            return ProgrammingLanguageUtils.get_name(language)

        known = ProgrammingLanguageUtils.find_name(language)
        if known is not None:
            return ProgrammingLanguageUtils.get_name(known)

        return language.strip().lower()

    def register(self, language: ProgrammingLanguage | str, factory: LexerFactory) -> None:
        """
        Register a lexer factory for a language, replacing any existing one.

        Args:
            language: The language, as an enum value or a name such as "js"
            factory: Callable that creates a new lexer instance
        """
        key = self.language_id(language)
        if key in self._factories:
            self._logger.debug("replacing lexer for '%s'", key)

        self._factories[key] = factory

    def is_registered(self, language: ProgrammingLanguage | str) -> bool:
        """
        Check whether a language has a registered lexer.

        Args:
            language: The language to check

        Returns:
            True if a factory is registered for the language
        """
        return self.language_id(language) in self._factories

    def languages(self) -> List[str]:
        """
        Get the registered language ids.

        Returns:
            The registered ids in registration order
        """
        return list(self._factories.keys())

    def get_factory(self, language: ProgrammingLanguage | str) -> LexerFactory:
        """
        Get the factory for a language.

        Args:
            language: The language to look up

        Returns:
            The registered factory, or the plain text lexer if there is none
        """
        return self._factories.get(self.language_id(language), TextLexer)

    def create_lexer(self, language: ProgrammingLanguage | str) -> Lexer:
        """
        Create a lexer instance for a language.

        Args:
            language: The language to create a lexer for

        Returns:
            A new lexer; a plain text lexer if no language matches
        """
        return self.get_factory(language)()
