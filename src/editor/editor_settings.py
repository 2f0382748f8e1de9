"""Editor settings module for storing per-editor configuration."""

from dataclasses import dataclass
import json
import os
from typing import Any, Dict

from editor.editor_exceptions import EditorSettingsError
from syntax.programming_language import ProgrammingLanguage
from syntax.programming_language_utils import ProgrammingLanguageUtils


@dataclass
class EditorSettings:
    """
    Settings for an editor instance.
    """
    language: ProgrammingLanguage = ProgrammingLanguage.TEXT
    lazy_render_padding: int = 10  # Lines either side of the viewport lexed eagerly
    idle_timeout_ms: int = 500  # Quiet period before dirty lines are swept up
    cache_capacity: int = 4096  # 0 disables the line cache

    @classmethod
    def create_default(cls) -> "EditorSettings":
        """Create a new EditorSettings object with default values."""
        return cls(
            language=ProgrammingLanguage.TEXT,
            lazy_render_padding=10,
            idle_timeout_ms=500,
            cache_capacity=4096
        )

    @staticmethod
    def _read_count(data: Dict[str, Any], key: str, default: int) -> int:
        value = data.get(key, default)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise EditorSettingsError(
                f"Setting '{key}' must be a non-negative integer",
                {"key": key, "value": value}
            )

        return value

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EditorSettings":
        """
        Build settings from their serialized form.

        Args:
            data: Dictionary with camelCase keys, as written by `to_dict`

        Returns:
            EditorSettings object; missing keys take their defaults

        Raises:
            EditorSettingsError: If a value is invalid
        """
        settings = cls.create_default()

        # Unknown language names are lexed as plain text
        language_name = data.get("language", "")
        if not isinstance(language_name, str):
            raise EditorSettingsError("Setting 'language' must be a string", {"value": language_name})

        settings.language = ProgrammingLanguageUtils.from_name(language_name)
        settings.lazy_render_padding = cls._read_count(data, "lazyRenderPadding", settings.lazy_render_padding)
        settings.idle_timeout_ms = cls._read_count(data, "idleTimeoutMs", settings.idle_timeout_ms)
        settings.cache_capacity = cls._read_count(data, "cacheCapacity", settings.cache_capacity)
        return settings

    def to_dict(self) -> Dict[str, Any]:
        """Convert the settings to their serialized form."""
        return {
            "language": ProgrammingLanguageUtils.get_name(self.language),
            "lazyRenderPadding": self.lazy_render_padding,
            "idleTimeoutMs": self.idle_timeout_ms,
            "cacheCapacity": self.cache_capacity
        }

    @classmethod
    def load(cls, path: str) -> "EditorSettings":
        """
        Load editor settings from file.

        Args:
            path: Path to the settings file

        Returns:
            EditorSettings object with loaded values

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
            EditorSettingsError: If the file holds invalid values
        """
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise EditorSettingsError("Settings file must contain a JSON object", {"path": path})

        return cls.from_dict(data)

    def save(self, path: str) -> None:
        """
        Save editor settings to file.

        Args:
            path: Path to save the settings file

        Raises:
            OSError: If there's an issue creating the directory or writing the file
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=4)
