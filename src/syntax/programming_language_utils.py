"""
Utilities for converting between language names, file extensions and
ProgrammingLanguage enum values.
"""

import os
import logging
from typing import Dict

from syntax.programming_language import ProgrammingLanguage


class ProgrammingLanguageUtils:
    """
    Utility class for handling programming language conversions and metadata.
    """

    # Logger for the class
    _logger = logging.getLogger("LanguageUtils")

    # Mapping from lowercase language names to enum members
    _NAME_TO_LANGUAGE: Dict[str, ProgrammingLanguage] = {
        "css": ProgrammingLanguage.CSS,
        "htm": ProgrammingLanguage.HTML,
        "html": ProgrammingLanguage.HTML,
        "javascript": ProgrammingLanguage.JAVASCRIPT,
        "js": ProgrammingLanguage.JAVASCRIPT,
        "json": ProgrammingLanguage.JSON,
        "plaintext": ProgrammingLanguage.TEXT,
        "text": ProgrammingLanguage.TEXT,
        "txt": ProgrammingLanguage.TEXT,

        # Empty string defaults to text
        "": ProgrammingLanguage.TEXT
    }

    # Mapping from enum members to lowercase language names
    _LANGUAGE_TO_NAME: Dict[ProgrammingLanguage, str] = {
        ProgrammingLanguage.CSS: "css",
        ProgrammingLanguage.HTML: "html",
        ProgrammingLanguage.JAVASCRIPT: "javascript",
        ProgrammingLanguage.JSON: "json",
        ProgrammingLanguage.TEXT: "plaintext",
        ProgrammingLanguage.UNKNOWN: ""
    }

    # Mapping from file extensions to programming languages
    _EXTENSION_TO_LANGUAGE: Dict[str, ProgrammingLanguage] = {
        '.css': ProgrammingLanguage.CSS,
        '.htm': ProgrammingLanguage.HTML,
        '.html': ProgrammingLanguage.HTML,
        '.js': ProgrammingLanguage.JAVASCRIPT,
        '.json': ProgrammingLanguage.JSON,
        '.jsx': ProgrammingLanguage.JAVASCRIPT,
        '.mjs': ProgrammingLanguage.JAVASCRIPT,
        '.txt': ProgrammingLanguage.TEXT
    }

    # Mapping from programming languages to display names
    _LANGUAGE_TO_DISPLAY_NAME: Dict[ProgrammingLanguage, str] = {
        ProgrammingLanguage.CSS: "CSS",
        ProgrammingLanguage.HTML: "HTML",
        ProgrammingLanguage.JAVASCRIPT: "JavaScript",
        ProgrammingLanguage.JSON: "JSON",
        ProgrammingLanguage.TEXT: "None",
        ProgrammingLanguage.UNKNOWN: "Unknown"
    }

    @classmethod
    def find_name(cls, name: str) -> ProgrammingLanguage | None:
        """
        Look up a language name or alias.

        Args:
            name: The name of the programming language

        Returns:
            The matching ProgrammingLanguage, or None if the name is not known
        """
        return cls._NAME_TO_LANGUAGE.get(name.strip().lower())

    @classmethod
    def from_name(cls, name: str) -> ProgrammingLanguage:
        """
        Convert a language name string to a ProgrammingLanguage enum value.

        Args:
            name: The name of the programming language

        Returns:
            The corresponding ProgrammingLanguage enum value,
            or ProgrammingLanguage.TEXT if not found
        """
        if not name:
            return ProgrammingLanguage.TEXT

        language = cls.find_name(name)
        if language is None:
            cls._logger.debug("unknown language name '%s', using plain text", name)
            return ProgrammingLanguage.TEXT

        return language

    @classmethod
    def from_file_extension(cls, filename: str | None) -> ProgrammingLanguage:
        """
        Detect programming language from file extension.

        Args:
            filename: Path to file or None

        Returns:
            The detected programming language enum value,
            or ProgrammingLanguage.TEXT if not detected
        """
        if not filename:
            return ProgrammingLanguage.TEXT

        ext = os.path.splitext(filename)[1].lower()
        return cls._EXTENSION_TO_LANGUAGE.get(ext, ProgrammingLanguage.TEXT)

    @classmethod
    def get_name(cls, language: ProgrammingLanguage) -> str:
        """
        Get the lower-case name for a programming language.

        Args:
            language: The programming language enum value

        Returns:
            Language name
        """
        return cls._LANGUAGE_TO_NAME.get(language, "")

    @classmethod
    def get_display_name(cls, language: ProgrammingLanguage) -> str:
        """
        Get the human-readable display name for a programming language.

        Args:
            language: The programming language enum value

        Returns:
            Human-readable language name for display
        """
        return cls._LANGUAGE_TO_DISPLAY_NAME.get(language, "Code")
