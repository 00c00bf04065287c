# Area: Shared Tests
"""Tests for EngineSettings and load_settings."""

import json
import os

import pytest

from worduel._game.enums import GameVariant
from worduel.config import ENV_MAPPINGS, EngineSettings, load_settings
from worduel.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the caller's environment and .env files."""
    for key in ENV_MAPPINGS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    for key in ENV_MAPPINGS:
        os.environ.pop(key, None)


class TestEngineSettings:
    """Test defaults and validation."""

    def test_defaults(self):
        settings = EngineSettings()
        assert settings.min_wordsize == 4
        assert settings.max_wordsize == 8
        assert settings.timed_invite_expiry == 300
        assert settings.turn_invite_expiry == 900
        assert settings.timed_game_expiry == 600
        assert settings.cleanup_interval == 30
        assert settings.dictionary_path is None

    def test_invite_expiry_by_variant(self):
        settings = EngineSettings()
        assert settings.invite_expiry(GameVariant.TIMED) == 300
        assert settings.invite_expiry(GameVariant.TURN_BASED) == 900


class TestLoadSettings:
    """Test loading from file and environment."""

    def test_defaults_without_sources(self):
        assert load_settings() == EngineSettings()

    def test_config_file(self, tmp_path):
        path = tmp_path / "worduel.json"
        path.write_text(json.dumps({"max_wordsize": 6, "cleanup_interval": 5}), encoding="utf-8")
        settings = load_settings(str(path))
        assert settings.max_wordsize == 6
        assert settings.cleanup_interval == 5

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "worduel.json"
        path.write_text(json.dumps({"max_wordsize": 6}), encoding="utf-8")
        monkeypatch.setenv("WORDUEL_MAX_WORDSIZE", "7")
        monkeypatch.setenv("WORDCLASH_DICTIONARY", "/data/words.json")
        settings = load_settings(str(path))
        assert settings.max_wordsize == 7
        assert settings.dictionary_path == "/data/words.json"

    def test_env_file(self, tmp_path):
        env_file = tmp_path / "custom.env"
        env_file.write_text("WORDUEL_TIMED_GAME_EXPIRY=120\n", encoding="utf-8")
        assert load_settings(env_file=str(env_file)).timed_game_expiry == 120

    def test_negative_duration_rejected(self, monkeypatch):
        monkeypatch.setenv("WORDUEL_CLEANUP_INTERVAL", "-1")
        with pytest.raises(ConfigError):
            load_settings()

    def test_min_above_max_rejected(self, monkeypatch):
        monkeypatch.setenv("WORDUEL_MIN_WORDSIZE", "9")
        with pytest.raises(ConfigError) as exc:
            load_settings()
        assert "min_wordsize" in str(exc.value)

    def test_non_numeric_rejected(self, monkeypatch):
        monkeypatch.setenv("WORDUEL_MAX_WORDSIZE", "many")
        with pytest.raises(ConfigError):
            load_settings()

    def test_unknown_key_rejected(self, tmp_path):
        path = tmp_path / "worduel.json"
        path.write_text(json.dumps({"max_players": 3}), encoding="utf-8")
        with pytest.raises(ConfigError):
            load_settings(str(path))

    def test_unreadable_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_settings(str(tmp_path / "missing.json"))

    def test_non_object_file(self, tmp_path):
        path = tmp_path / "worduel.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_settings(str(path))
