"""Configuration loading."""

from pathlib import Path
from typing import Optional

import yaml

from .config_models import MoodJournalConfig

DEFAULT_CONFIG = MoodJournalConfig().to_dict()


def find_config() -> Optional[Path]:
    """Find config file in standard locations."""
    locations = [
        Path.cwd() / "config.yaml",
        Path.home() / ".moodjournal" / "config.yaml",
        Path.home() / "moodjournal" / "config.yaml",
    ]
    for loc in locations:
        if loc.exists():
            return loc
    return None


def load_config_model(config_path: Optional[Path] = None) -> MoodJournalConfig:
    """Load configuration as Pydantic model with validation.

    Raises:
        ValueError: Invalid YAML or config values
    """
    base_config = {}

    path = config_path or find_config()
    if path and path.exists():
        try:
            with open(path) as f:
                base_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}") from e

    try:
        return MoodJournalConfig.from_dict(base_config)
    except Exception as e:
        raise ValueError(f"Config validation failed: {e}") from e


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration as a plain dict."""
    return load_config_model(config_path).to_dict()


def get_paths(config: dict) -> dict:
    """Get expanded paths from config."""
    paths = config.get("paths", DEFAULT_CONFIG["paths"])
    log_file = paths.get("log_file")
    return {
        "journal_dir": Path(paths["journal_dir"]).expanduser(),
        "log_file": Path(log_file).expanduser() if log_file else None,
    }
