"""Pydantic configuration models for moodjournal."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from mood.aggregation import TREND_THRESHOLD
from shared_types import ChartWindow

VALID_LLM_PROVIDERS = {"auto", "claude", "openai", "gemini"}
VALID_ANALYZERS = {"lexicon", "vader"}


class LLMConfig(BaseModel):
    """LLM provider configuration."""

    provider: str = "auto"
    model: Optional[str] = None  # None = cheap-tier default for the provider
    api_key: Optional[str] = None

    @field_validator("provider")
    @classmethod
    def validate_provider(cls, v: str) -> str:
        if v not in VALID_LLM_PROVIDERS:
            raise ValueError(f"Invalid LLM provider: {v}. Must be one of {VALID_LLM_PROVIDERS}")
        return v


class PathsConfig(BaseModel):
    """File paths configuration."""

    journal_dir: Path = Path("~/moodjournal/entries")
    log_file: Optional[Path] = Path("~/moodjournal/moodjournal.log")

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.journal_dir = self.journal_dir.expanduser()
        if self.log_file:
            self.log_file = self.log_file.expanduser()
        return self


class SentimentConfig(BaseModel):
    """Sentiment analyzer selection."""

    analyzer: str = "lexicon"

    @field_validator("analyzer")
    @classmethod
    def validate_analyzer(cls, v: str) -> str:
        if v not in VALID_ANALYZERS:
            raise ValueError(f"Invalid analyzer: {v}. Must be one of {VALID_ANALYZERS}")
        return v


class SummaryConfig(BaseModel):
    """Model-based summarization configuration."""

    enabled: bool = True
    timeout_seconds: float = 30.0
    max_tokens: int = 120
    rate_limit_cooldown_seconds: float = 60.0

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {v}")
        return v


class StatsConfig(BaseModel):
    """Chart statistics configuration."""

    default_window: ChartWindow = ChartWindow.WEEK
    trend_threshold: float = TREND_THRESHOLD

    @field_validator("trend_threshold")
    @classmethod
    def validate_threshold(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"trend_threshold must be >= 0, got {v}")
        return v


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    file_level: str = "DEBUG"

    @field_validator("level", "file_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class MoodJournalConfig(BaseModel):
    """Main configuration model."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    sentiment: SentimentConfig = Field(default_factory=SentimentConfig)
    summary: SummaryConfig = Field(default_factory=SummaryConfig)
    stats: StatsConfig = Field(default_factory=StatsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def expand_env_vars(self):
        """Expand ${VAR} patterns in the API key."""
        key = self.llm.api_key
        if key and key.startswith("${") and key.endswith("}"):
            self.llm.api_key = os.getenv(key[2:-1], "") or None
        return self

    @classmethod
    def from_dict(cls, data: dict) -> "MoodJournalConfig":
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="python")
