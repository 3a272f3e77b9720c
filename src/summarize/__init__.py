"""Entry summarization: model-backed with a local fallback."""

from .availability import Availability, Available, Unavailable
from .fallback import summarize_locally
from .language import LangdetectDetector, LanguageDetector
from .model import LLMSummaryModel, SummaryModel, create_summary_model
from .summarizer import Summarizer

__all__ = [
    "Availability",
    "Available",
    "Unavailable",
    "summarize_locally",
    "LanguageDetector",
    "LangdetectDetector",
    "SummaryModel",
    "LLMSummaryModel",
    "create_summary_model",
    "Summarizer",
]
