"""Summarization model capability backed by an LLM provider."""

import asyncio
import time
from typing import Callable, Optional, Protocol

import structlog

from llm import LLMAuthError, LLMError, LLMProvider, LLMRateLimitError, create_cheap_provider
from shared_types import UnavailableReason

from .availability import Availability, Available, Unavailable

logger = structlog.get_logger()


class SummaryModel(Protocol):
    """A model that can summarize text when it is available."""

    @property
    def availability(self) -> Availability: ...

    async def respond(self, instructions: str, prompt: str) -> str: ...


class LLMSummaryModel:
    """Adapts a blocking LLMProvider to the async summary model interface.

    Availability:
        - summaries disabled in config -> feature_disabled
        - no provider (no API key, SDK missing) -> device_not_eligible
        - after an auth failure -> other, for the rest of the process
        - within the cooldown after a rate limit -> model_not_ready
    """

    def __init__(
        self,
        provider: Optional[LLMProvider],
        enabled: bool = True,
        max_tokens: int = 120,
        cooldown_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.provider = provider
        self.enabled = enabled
        self.max_tokens = max_tokens
        self.cooldown_seconds = cooldown_seconds
        self._clock = clock
        self._cooldown_until = 0.0
        self._auth_failed = False

    @property
    def availability(self) -> Availability:
        if not self.enabled:
            return Unavailable(UnavailableReason.FEATURE_DISABLED)
        if self.provider is None:
            return Unavailable(UnavailableReason.DEVICE_NOT_ELIGIBLE)
        if self._auth_failed:
            return Unavailable(UnavailableReason.OTHER)
        if self._clock() < self._cooldown_until:
            return Unavailable(UnavailableReason.MODEL_NOT_READY)
        return Available()

    async def respond(self, instructions: str, prompt: str) -> str:
        if self.provider is None:
            raise LLMError("No summarization provider configured")

        try:
            text = await asyncio.to_thread(
                self.provider.generate,
                messages=[{"role": "user", "content": prompt}],
                system=instructions,
                max_tokens=self.max_tokens,
            )
        except LLMRateLimitError:
            self._cooldown_until = self._clock() + self.cooldown_seconds
            raise
        except LLMAuthError:
            self._auth_failed = True
            raise

        return text.strip()


def create_summary_model(
    enabled: bool = True,
    provider: str = "auto",
    model: Optional[str] = None,
    api_key: Optional[str] = None,
    max_tokens: int = 120,
    cooldown_seconds: float = 60.0,
) -> LLMSummaryModel:
    """Build a summary model from config values.

    A missing key or SDK does not raise: the model reports itself
    unavailable and callers fall back to the local summary.
    """
    llm_provider = None
    if enabled:
        try:
            llm_provider = create_cheap_provider(provider=provider, api_key=api_key, model=model)
        except LLMError as e:
            logger.info("summary_model_unavailable", error=str(e))

    return LLMSummaryModel(
        llm_provider,
        enabled=enabled,
        max_tokens=max_tokens,
        cooldown_seconds=cooldown_seconds,
    )
