"""Tests for user settings, translations and sound playback."""
import json
import logging

import pytest
from skirmish import settings
from skirmish.audio import AudioManager, SilentAudio
from skirmish.i18n import Translator


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    """Point settings at a temporary directory."""
    settings_dir = tmp_path / ".skirmish"
    monkeypatch.setattr(settings, "SETTINGS_DIR", settings_dir)
    monkeypatch.setattr(settings, "SETTINGS_FILE", settings_dir / "settings.json")
    return settings_dir / "settings.json"


class TestSettings:

    def test_defaults_without_file(self, settings_file):
        assert settings.load_settings() == settings.DEFAULT_SETTINGS
        assert settings.get_turn_time() == 30
        assert settings.get_result_display_time() == 3.0
        assert settings.get_tick_interval() == 1.0

    def test_values_persist(self, settings_file):
        settings.set_language("en")
        settings.set_resolution(1920, 1080)
        settings.set_sound_enabled(False)

        assert settings_file.exists()
        assert settings.get_language() == "en"
        assert settings.get_resolution() == (1920, 1080)
        assert not settings.get_sound_enabled()

    def test_saved_file_merged_with_defaults(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text(json.dumps({"turn_time_seconds": 45}), encoding="utf-8")
        assert settings.get_turn_time() == 45
        assert settings.get_language() == "ru"

    def test_corrupt_file_falls_back(self, settings_file, caplog):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="skirmish.settings"):
            assert settings.load_settings() == settings.DEFAULT_SETTINGS
        assert "Failed to load settings" in caplog.text


class TestTranslator:

    def test_known_keys(self):
        assert Translator("en")("attack.selectTarget") == "Select a target"
        assert Translator("ru").t("game.ui.cancel") == "Отмена"

    def test_unknown_key_passes_through(self):
        assert Translator("en")("attack.unknownKey") == "attack.unknownKey"

    def test_unknown_language_uses_default(self):
        assert Translator("xx").language == "ru"

    def test_custom_table(self):
        t = Translator("de", table={"de": {"game.health": "Leben"}})
        assert t("game.health") == "Leben"


class TestAudio:

    def test_silent_audio_counts_plays(self):
        audio = SilentAudio()
        audio.play_interaction_sound()
        audio.play_interaction_sound()
        assert audio.plays == 2

    def test_disabled_manager_never_loads(self):
        audio = AudioManager(enabled=False)
        audio.play_interaction_sound()
        assert audio.card_sound is None

    def test_missing_sound_file_is_logged(self, tmp_path, caplog):
        audio = AudioManager(sounds_dir=str(tmp_path))
        with caplog.at_level(logging.WARNING, logger="skirmish.audio"):
            audio.play_interaction_sound()
            audio.play_interaction_sound()
        assert audio.card_sound is None
        assert caplog.text.count("Sound file missing") == 1
