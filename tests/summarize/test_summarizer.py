"""Tests for the model-with-fallback summarizer."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from observability import metrics
from summarize.availability import Available
from summarize.fallback import summarize_locally
from summarize.prompts import INSTRUCTIONS_EN, INSTRUCTIONS_IT, instructions_for
from summarize.summarizer import Summarizer

TEXT = "Today I walked by the sea and felt calm. Later I cooked dinner with friends."


class TestInstructions:
    def test_italian(self):
        assert instructions_for("it") == INSTRUCTIONS_IT

    @pytest.mark.parametrize("language", ["en", "fr", "de", None, ""])
    def test_everything_else_is_english(self, language):
        assert instructions_for(language) == INSTRUCTIONS_EN

    def test_summarizer_uses_detected_language(self, available_model):
        detector = MagicMock()
        detector.detect.return_value = "it"
        summarizer = Summarizer(available_model, detector=detector)

        asyncio.run(summarizer.summarize("Oggi sono andato al mare."))

        available_model.respond.assert_awaited_once_with(
            INSTRUCTIONS_IT, "Oggi sono andato al mare."
        )


class TestAvailableModel:
    @pytest.mark.asyncio
    async def test_returns_model_response(self, available_model, fixed_detector):
        summarizer = Summarizer(available_model, detector=fixed_detector)

        result = await summarizer.summarize(TEXT)

        assert result == "I had a calm, productive day."
        available_model.respond.assert_awaited_once_with(INSTRUCTIONS_EN, TEXT)
        assert metrics.count("summary_model_success") == 1

    @pytest.mark.asyncio
    async def test_strips_response(self, available_model, fixed_detector):
        available_model.respond = AsyncMock(return_value="  I rested.\n")
        summarizer = Summarizer(available_model, detector=fixed_detector)
        assert await summarizer.summarize(TEXT) == "I rested."

    @pytest.mark.asyncio
    async def test_empty_response_falls_back(self, available_model, fixed_detector):
        available_model.respond = AsyncMock(return_value="   ")
        summarizer = Summarizer(available_model, detector=fixed_detector)

        assert await summarizer.summarize(TEXT) == summarize_locally(TEXT)
        assert metrics.count("summary_fallback_empty") == 1

    @pytest.mark.asyncio
    async def test_detector_failure_uses_english(self, available_model):
        detector = MagicMock()
        detector.detect.side_effect = RuntimeError("detector crashed")
        summarizer = Summarizer(available_model, detector=detector)

        result = await summarizer.summarize(TEXT)

        assert result == "I had a calm, productive day."
        available_model.respond.assert_awaited_once_with(INSTRUCTIONS_EN, TEXT)

    @pytest.mark.asyncio
    async def test_non_string_response_falls_back(self, available_model, fixed_detector):
        available_model.respond = AsyncMock(return_value=None)
        summarizer = Summarizer(available_model, detector=fixed_detector)

        assert await summarizer.summarize(TEXT) == summarize_locally(TEXT)
        assert metrics.count("summary_fallback_empty") == 1


class TestUnavailableModel:
    @pytest.mark.asyncio
    async def test_falls_back_without_invoking(self, unavailable_model, fixed_detector):
        summarizer = Summarizer(unavailable_model, detector=fixed_detector)

        result = await summarizer.summarize(TEXT)

        assert result == summarize_locally(TEXT)
        unavailable_model.respond.assert_not_awaited()
        reason = unavailable_model.availability.reason.value
        assert metrics.count(f"summary_fallback_{reason}") == 1


class TestFailingModel:
    @pytest.mark.asyncio
    async def test_exception_falls_back(self, failing_model, fixed_detector):
        summarizer = Summarizer(failing_model, detector=fixed_detector)

        result = await summarizer.summarize(TEXT)

        assert result == summarize_locally(TEXT)
        assert metrics.count("summary_fallback_error") == 1

    @pytest.mark.asyncio
    async def test_timeout_falls_back(self, fixed_detector):
        async def slow(instructions, prompt):
            await asyncio.sleep(10)
            return "too late"

        model = MagicMock()
        model.availability = Available()
        model.respond = slow
        summarizer = Summarizer(model, detector=fixed_detector, timeout=0.01)

        assert await summarizer.summarize(TEXT) == summarize_locally(TEXT)
        assert metrics.count("summary_fallback_timeout") == 1

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self, fixed_detector):
        started = asyncio.Event()

        async def hang(instructions, prompt):
            started.set()
            await asyncio.sleep(10)

        model = MagicMock()
        model.availability = Available()
        model.respond = hang
        summarizer = Summarizer(model, detector=fixed_detector, timeout=None)

        task = asyncio.create_task(summarizer.summarize(TEXT))
        await started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert metrics.count("summary_fallback") == 0


class TestEdgeCases:
    @pytest.mark.asyncio
    async def test_empty_text_skips_model(self, available_model, fixed_detector):
        summarizer = Summarizer(available_model, detector=fixed_detector)
        assert await summarizer.summarize("   ") == ""
        available_model.respond.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_availability_is_contract_error(self, fixed_detector):
        model = MagicMock()
        model.availability = "ready"
        summarizer = Summarizer(model, detector=fixed_detector)
        with pytest.raises(TypeError):
            await summarizer.summarize(TEXT)
