"""
Tests for tracker/config.py — Centralized configuration
"""

import logging
from pathlib import Path


class TestGetLogLevel:
    """Test get_log_level() function."""

    def test_known_levels(self):
        from tracker.config import get_log_level
        assert get_log_level("debug") == logging.DEBUG
        assert get_log_level("info") == logging.INFO
        assert get_log_level("error") == logging.ERROR

    def test_case_insensitive(self):
        from tracker.config import get_log_level
        assert get_log_level("INFO") == logging.INFO
        assert get_log_level(" Debug ") == logging.DEBUG

    def test_unknown_falls_back_to_warning(self):
        from tracker.config import get_log_level
        assert get_log_level("verbose") == logging.WARNING

    def test_none_uses_default(self):
        from tracker.config import get_log_level, LOG_LEVELS
        # Should not raise, uses DEFAULT_LOG_LEVEL
        assert get_log_level(None) in LOG_LEVELS.values()


class TestDefaults:
    """Test configuration constants."""

    def test_default_seed_file_ships_with_package(self):
        import tracker
        from tracker.config import DEFAULT_SEED_FILE
        assert DEFAULT_SEED_FILE.name == "seed.yaml"
        assert DEFAULT_SEED_FILE.parent.parent == Path(tracker.__file__).parent
        assert DEFAULT_SEED_FILE.is_file()


class TestSetupLogging:
    """Test logging setup."""

    def test_setup_logging_sets_level(self, monkeypatch):
        from tracker import logging_config

        calls = {}
        monkeypatch.setattr(logging_config.logging, "basicConfig", lambda **kw: calls.update(kw))

        logging_config.setup_logging("info")

        assert calls["level"] == logging.INFO
        assert "%(levelname)s" in calls["format"]
