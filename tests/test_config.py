"""
Unit tests for configuration and formatting helpers.
"""

import json
import logging
import pytest
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from thoughtdiary.core.config import DEFAULT_STORAGE_KEY, Config
from thoughtdiary.core.utils import (
    format_bar,
    format_entry_date,
    format_percentage,
    from_millis,
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run from an empty directory with no ThoughtDiary env vars."""
    for name in (
        "THOUGHTDIARY_SETTINGS",
        "THOUGHTDIARY_DB_PATH",
        "THOUGHTDIARY_STORAGE_KEY",
        "THOUGHTDIARY_EXPORT_DIR",
        "TIMEZONE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write_settings(root: Path, name: str, data) -> None:
    path = root / "config" / "settings"
    path.mkdir(parents=True, exist_ok=True)
    (path / f"{name}.json").write_text(
        data if isinstance(data, str) else json.dumps(data), encoding="utf-8"
    )


class TestConfigFromEnv:
    """Test Config.from_env."""

    def test_defaults_without_settings_file(self, clean_env):
        """A missing settings file means defaults."""
        config = Config.from_env()
        assert config.storage_key == DEFAULT_STORAGE_KEY
        assert config.default_intensity == 50
        assert config.database_path == "data/thoughtdiary.db"
        assert config.timezone == "Europe/Bucharest"

    def test_settings_file(self, clean_env, monkeypatch):
        """Values come from the settings template."""
        write_settings(clean_env, "calm", {
            "storage": {"key": "my-journal"},
            "form": {"default_intensity": 30},
            "display": {"timezone": "UTC"},
        })
        monkeypatch.setenv("THOUGHTDIARY_SETTINGS", "calm")
        config = Config.from_env()

        assert config.settings_template == "calm"
        assert config.storage_key == "my-journal"
        assert config.default_intensity == 30
        assert config.timezone == "UTC"

    def test_env_overrides(self, clean_env, monkeypatch):
        """Environment variables win over the template."""
        write_settings(clean_env, "default", {"storage": {"key": "from-file"}})
        monkeypatch.setenv("THOUGHTDIARY_STORAGE_KEY", "from-env")
        monkeypatch.setenv("THOUGHTDIARY_DB_PATH", "/tmp/other.db")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        config = Config.from_env()
        assert config.storage_key == "from-env"
        assert config.database_path == "/tmp/other.db"
        assert config.log_level == "DEBUG"

    def test_malformed_settings(self, clean_env):
        """A broken settings file is a configuration error."""
        write_settings(clean_env, "default", "{ nope")
        with pytest.raises(ValueError, match="Invalid settings file"):
            Config.from_env()

    def test_summary(self):
        """The summary mentions the slot key."""
        assert DEFAULT_STORAGE_KEY in Config().get_summary()


class TestFormatting:
    """Test display helpers."""

    def test_entry_date_local(self):
        """Dates are shown in the configured timezone."""
        moment = datetime(2024, 3, 5, 18, 30, tzinfo=timezone.utc)
        assert format_entry_date(moment, "Europe/Bucharest") == "05.03.2024, 20:30"

    def test_entry_date_unknown_timezone(self, caplog):
        """Unknown timezones fall back to UTC with a warning."""
        moment = datetime(2024, 3, 5, 18, 30, tzinfo=timezone.utc)
        with caplog.at_level(logging.WARNING):
            assert format_entry_date(moment, "Mars/Olympus") == "05.03.2024, 18:30"
        assert "Unknown timezone" in caplog.text

    def test_from_millis(self):
        """Epoch milliseconds convert exactly."""
        moment = from_millis(1_700_000_000_123)
        assert moment.microsecond == 123000
        assert moment.tzinfo is not None

    def test_bar(self):
        """Bars scale to the largest count."""
        assert format_bar(2, 2, width=10) == "█" * 10
        assert format_bar(1, 2, width=10) == "█" * 5
        assert format_bar(0, 2) == ""
        assert format_bar(1, 1000, width=10) == "█"

    def test_percentage(self):
        """Percentages are whole numbers and safe on empty totals."""
        assert format_percentage(1, 3) == "33%"
        assert format_percentage(0, 0) == "0%"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
