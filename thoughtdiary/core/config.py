"""
Configuration management for ThoughtDiary.

Loads settings from an optional JSON template and environment variables.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

# Fixed namespace of the durable slot holding the entry document
DEFAULT_STORAGE_KEY = "app3-jurnal-ganduri-automate-v1"

DEFAULT_INTENSITY = 50


@dataclass
class Config:
    """Application configuration."""

    # Database
    database_path: str = "data/thoughtdiary.db"

    # Durable storage slot
    storage_key: str = DEFAULT_STORAGE_KEY

    # Form defaults (from settings JSON)
    default_intensity: int = DEFAULT_INTENSITY

    # Timezone used when displaying entry dates
    timezone: str = "Europe/Bucharest"

    # Logging
    log_level: str = "INFO"

    # Where exports land when no path is given
    export_dir: str = "data"

    # Settings template name
    settings_template: str = "default"

    @classmethod
    def _load_json(cls, json_path: Path) -> Dict[str, Any]:
        """
        Load JSON settings file.

        A missing file means "use defaults". A file that exists but
        cannot be parsed is a configuration error.
        """
        if not json_path.exists():
            return {}

        try:
            with open(json_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid settings file {json_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Invalid settings file {json_path}: expected an object")

        return data

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from JSON template + environment variables."""
        settings_name = os.getenv("THOUGHTDIARY_SETTINGS", "default")
        settings_path = Path(f"config/settings/{settings_name}.json")
        settings = cls._load_json(settings_path)

        storage = settings.get("storage", {})
        form = settings.get("form", {})
        display = settings.get("display", {})

        config = cls(
            database_path=os.getenv("THOUGHTDIARY_DB_PATH", "data/thoughtdiary.db"),
            storage_key=os.getenv(
                "THOUGHTDIARY_STORAGE_KEY",
                storage.get("key", DEFAULT_STORAGE_KEY),
            ),

            # From settings JSON
            default_intensity=int(form.get("default_intensity", DEFAULT_INTENSITY)),

            # Env wins over the template for display timezone
            timezone=os.getenv("TIMEZONE", display.get("timezone", "Europe/Bucharest")),

            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            export_dir=os.getenv("THOUGHTDIARY_EXPORT_DIR", "data"),

            settings_template=settings_name,
        )

        return config

    def get_summary(self) -> str:
        """Get a summary of current settings."""
        return f"""Settings: {self.settings_template}

Storage:
  Database: {self.database_path}
  Slot Key: {self.storage_key}

Form:
  Default Intensity: {self.default_intensity}%

Display:
  Timezone: {self.timezone}
  Export Dir: {self.export_dir}
  Log Level: {self.log_level}
"""
