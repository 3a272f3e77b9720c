"""Shared CLI utilities."""

from typing import Optional

import structlog
from rich.console import Console

from cli.config_models import MoodJournalConfig

console = Console()
logger = structlog.get_logger()


def get_components(config_model: Optional[MoodJournalConfig] = None) -> dict:
    """Build storage, scorer, summarizer and service from config."""
    from cli.config import load_config_model
    from journal import JournalService, MoodJournalStorage
    from mood.sentiment import create_scorer
    from summarize import Summarizer, create_summary_model

    config = config_model or load_config_model()

    storage = MoodJournalStorage(config.paths.journal_dir)
    scorer = create_scorer(config.sentiment.analyzer)
    model = create_summary_model(
        enabled=config.summary.enabled,
        provider=config.llm.provider,
        model=config.llm.model,
        api_key=config.llm.api_key,
        max_tokens=config.summary.max_tokens,
        cooldown_seconds=config.summary.rate_limit_cooldown_seconds,
    )
    summarizer = Summarizer(model, timeout=config.summary.timeout_seconds)
    service = JournalService(
        storage,
        scorer,
        summarizer,
        trend_threshold=config.stats.trend_threshold,
    )

    return {
        "config_model": config,
        "storage": storage,
        "scorer": scorer,
        "summarizer": summarizer,
        "service": service,
    }
