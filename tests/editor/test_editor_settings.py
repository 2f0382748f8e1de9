"""
Tests for editor settings.
"""
import json

import pytest

from editor.editor_exceptions import EditorError, EditorSettingsError
from editor.editor_settings import EditorSettings
from syntax.programming_language import ProgrammingLanguage


class TestEditorSettings:
    """Test creating, saving and loading settings."""

    def test_defaults(self):
        """Test the default values."""
        settings = EditorSettings.create_default()

        assert settings == EditorSettings()
        assert settings.language == ProgrammingLanguage.TEXT
        assert settings.lazy_render_padding == 10
        assert settings.idle_timeout_ms == 500
        assert settings.cache_capacity == 4096

    def test_save_and_load(self, tmp_path):
        """Test that saved settings load back unchanged."""
        path = tmp_path / "config" / "editor.json"
        settings = EditorSettings(ProgrammingLanguage.JAVASCRIPT, 5, 250, 0)
        settings.save(str(path))

        assert EditorSettings.load(str(path)) == settings

    def test_saved_keys(self, tmp_path):
        """Test the keys used in the settings file."""
        path = tmp_path / "editor.json"
        EditorSettings(language=ProgrammingLanguage.CSS).save(str(path))

        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        assert data == {
            "language": "css",
            "lazyRenderPadding": 10,
            "idleTimeoutMs": 500,
            "cacheCapacity": 4096
        }

    def test_missing_keys_use_defaults(self):
        """Test loading a partial settings dictionary."""
        settings = EditorSettings.from_dict({"language": "json"})
        assert settings == EditorSettings(language=ProgrammingLanguage.JSON)

    def test_unknown_language_is_text(self):
        """Test that an unknown language name falls back to plain text."""
        assert EditorSettings.from_dict({"language": "brainfuck"}).language == ProgrammingLanguage.TEXT

    @pytest.mark.parametrize("data", [
        {"lazyRenderPadding": -1},
        {"idleTimeoutMs": "500"},
        {"cacheCapacity": 1.5},
        {"cacheCapacity": True},
        {"language": 3}
    ])
    def test_invalid_values(self, data):
        """Test that invalid values are rejected."""
        with pytest.raises(EditorSettingsError) as exc_info:
            EditorSettings.from_dict(data)

        assert isinstance(exc_info.value, EditorError)
        assert exc_info.value.error_details is not None

    def test_file_must_hold_object(self, tmp_path):
        """Test that a settings file must contain a JSON object."""
        path = tmp_path / "editor.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(EditorSettingsError):
            EditorSettings.load(str(path))

    def test_invalid_json(self, tmp_path):
        """Test that malformed JSON is reported by the JSON parser."""
        path = tmp_path / "editor.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError):
            EditorSettings.load(str(path))
