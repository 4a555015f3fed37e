"""Tests for the config module."""

import pytest

from nk_message.config import Config, _parse_bool, load_config


class TestParseBool:
    def test_true_values(self):
        for val in ("true", "True", "TRUE", "1", "yes", "YES", " true "):
            assert _parse_bool(val) is True

    def test_false_values(self):
        for val in ("false", "False", "0", "no", "NO", "", "random"):
            assert _parse_bool(val) is False


class TestConfigDefaults:
    def test_default_values(self):
        cfg = Config()
        assert cfg.app_name == "nk_message"
        assert cfg.purge_dir == "."
        assert cfg.purge_max_age_days == 1
        assert cfg.escape_xml is True
        assert cfg.log_level == "WARNING"

    def test_frozen(self):
        cfg = Config()
        with pytest.raises(AttributeError):
            cfg.purge_dir = "/tmp"


class TestLoadConfig:
    def test_defaults(self, clean_env):
        assert load_config() == Config()

    def test_overrides(self, clean_env, monkeypatch):
        monkeypatch.setenv("NK_MESSAGE_APP", "backupjob")
        monkeypatch.setenv("NK_MESSAGE_PURGE_DIR", "/var/spool/messages")
        monkeypatch.setenv("NK_MESSAGE_PURGE_AGE_DAYS", "7")
        monkeypatch.setenv("NK_MESSAGE_ESCAPE_XML", "false")
        monkeypatch.setenv("NK_MESSAGE_LOG_LEVEL", "debug")

        cfg = load_config()

        assert cfg.app_name == "backupjob"
        assert cfg.purge_dir == "/var/spool/messages"
        assert cfg.purge_max_age_days == 7
        assert cfg.escape_xml is False
        assert cfg.log_level == "DEBUG"

    def test_invalid_age_falls_back(self, clean_env, monkeypatch):
        monkeypatch.setenv("NK_MESSAGE_PURGE_AGE_DAYS", "soon")
        assert load_config().purge_max_age_days == 1

    def test_negative_age_falls_back(self, clean_env, monkeypatch):
        monkeypatch.setenv("NK_MESSAGE_PURGE_AGE_DAYS", "-3")
        assert load_config().purge_max_age_days == 1

    def test_invalid_log_level_falls_back(self, clean_env, monkeypatch):
        monkeypatch.setenv("NK_MESSAGE_LOG_LEVEL", "LOUD")
        assert load_config().log_level == "WARNING"

    def test_empty_app_uses_default(self, clean_env, monkeypatch):
        monkeypatch.setenv("NK_MESSAGE_APP", "")
        assert load_config().app_name == "nk_message"
