"""Dominant-language detection for journal text."""

from typing import Optional, Protocol

import structlog
from langdetect import DetectorFactory, LangDetectException, detect

logger = structlog.get_logger()


class LanguageDetector(Protocol):
    def detect(self, text: str) -> Optional[str]: ...


class LangdetectDetector:
    """langdetect-backed detector. Returns an ISO 639-1 tag or None."""

    def __init__(self, seed: int = 0):
        # langdetect is non-deterministic unless seeded
        DetectorFactory.seed = seed

    def detect(self, text: str) -> Optional[str]:
        if not text.strip():
            return None
        try:
            return detect(text)
        except LangDetectException as e:
            logger.debug("language_detection_failed", error=str(e))
            return None
