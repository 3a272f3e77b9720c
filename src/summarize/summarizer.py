"""One-sentence entry summaries with a guaranteed local fallback."""

import asyncio
from typing import Optional

import structlog

from observability import metrics

from .availability import Available, Unavailable
from .fallback import summarize_locally
from .language import LangdetectDetector, LanguageDetector
from .model import SummaryModel
from .prompts import instructions_for

logger = structlog.get_logger()

DEFAULT_TIMEOUT_SECONDS = 30.0


class Summarizer:
    """Summarize journal text with a model, falling back to a local summary.

    ``summarize`` never raises for model problems: unavailability, invocation
    errors, timeouts and empty responses all produce ``summarize_locally(text)``.
    Cancellation of the awaiting task is not absorbed.
    """

    def __init__(
        self,
        model: SummaryModel,
        detector: Optional[LanguageDetector] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.model = model
        self.detector = detector or LangdetectDetector()
        self.timeout = timeout

    def instructions(self, text: str) -> str:
        """Pick instructions matching the dominant language of the text.

        A detector failure falls back to the English instructions.
        """
        try:
            language = self.detector.detect(text)
        except Exception as e:
            logger.warning("language_detection_failed", error=str(e), error_type=type(e).__name__)
            language = None
        return instructions_for(language)

    async def summarize(self, text: str) -> str:
        if not text.strip():
            return ""

        availability = self.model.availability
        if isinstance(availability, Available):
            return await self._summarize_with_model(text)
        if isinstance(availability, Unavailable):
            logger.info("summary_model_unavailable", reason=availability.reason.value)
            return self._fallback(text, availability.reason.value)
        raise TypeError(f"Unknown availability state: {availability!r}")

    async def _summarize_with_model(self, text: str) -> str:
        instructions = self.instructions(text)
        try:
            with metrics.timer("summary_model_call"):
                summary = await asyncio.wait_for(
                    self.model.respond(instructions, text), timeout=self.timeout
                )
        except asyncio.TimeoutError:
            logger.warning("summary_model_timeout", timeout=self.timeout)
            return self._fallback(text, "timeout")
        except Exception as e:
            logger.warning("summary_model_failed", error=str(e), error_type=type(e).__name__)
            return self._fallback(text, "error")

        summary = summary.strip() if isinstance(summary, str) else ""
        if not summary:
            logger.warning("summary_model_empty_response")
            return self._fallback(text, "empty")

        metrics.counter("summary_model_success")
        return summary

    @staticmethod
    def _fallback(text: str, reason: str) -> str:
        metrics.counter("summary_fallback")
        metrics.counter(f"summary_fallback_{reason}")
        return summarize_locally(text)
