"""Tests for configuration helpers."""

import logging

import pytest

from emojify import config


class TestLoadLogLevel:
    """EMOJIFY_LOG_LEVEL resolution."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("", logging.WARNING),
            ("debug", logging.DEBUG),
            ("INFO", logging.INFO),
            (" error ", logging.ERROR),
            ("15", 15),
            ("loud", logging.WARNING),
        ],
    )
    def test_resolves(self, monkeypatch, value, expected):
        monkeypatch.setattr(config, "LOG_LEVEL", value)
        assert config.load_log_level() == expected

    def test_caller_default(self, monkeypatch):
        monkeypatch.setattr(config, "LOG_LEVEL", "")
        assert config.load_log_level(logging.INFO) == logging.INFO


class TestLoadHttpTimeout:
    """EMOJIFY_HTTP_TIMEOUT resolution."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("", 30.0),
            ("12.5", 12.5),
            (" 5 ", 5.0),
            ("abc", 30.0),
            ("0", 30.0),
            ("-3", 30.0),
            ("inf", 30.0),
            ("nan", 30.0),
        ],
    )
    def test_resolves(self, monkeypatch, value, expected):
        monkeypatch.setattr(config, "HTTP_TIMEOUT", value)
        assert config.load_http_timeout() == expected

    def test_bad_value_logs_warning(self, monkeypatch, caplog):
        monkeypatch.setattr(config, "HTTP_TIMEOUT", "abc")
        config.load_http_timeout()
        assert "Ignoring invalid EMOJIFY_HTTP_TIMEOUT" in caplog.text


class TestPaths:
    """Bundled resource locations."""

    def test_bundled_files_exist(self):
        assert config.BUNDLED_TABLE_PATH.is_file()
        assert config.SCHEMA_PATH.is_file()

    def test_marker(self):
        assert config.MARKER == ":"
