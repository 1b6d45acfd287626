"""Tests for the tone adjustment handler."""

import pytest

from tone_picker.exceptions import InvalidInput, UpstreamRateLimited
from tone_picker.services.adjust import ToneAdjustmentService, validate_request
from tone_picker.services.cache import make_key


class TestValidateRequest:
    def test_trims_text(self):
        request = validate_request("  hello  ", 1, 2)
        assert request.text == "hello"
        assert (request.coordinate.x, request.coordinate.y) == (1, 2)

    @pytest.mark.parametrize("text", ["", "   ", "\n\t", None, 42])
    def test_rejects_missing_text(self, text):
        with pytest.raises(InvalidInput, match="Text is required"):
            validate_request(text, 1, 1)

    @pytest.mark.parametrize(
        "x, y",
        [(-1, 0), (0, 3), (3, 3), (None, 1), (1, None), (1.0, 1), ("1", 1), (True, 0)],
    )
    def test_rejects_bad_coordinates(self, x, y):
        with pytest.raises(InvalidInput, match="Invalid tone coordinates"):
            validate_request("hello", x, y)


class TestToneAdjustmentService:
    @pytest.mark.asyncio
    async def test_miss_calls_model_and_caches(self, service, mock_ai, cache):
        result = await service.adjust_tone("Please send the report.", 2, 2)

        assert result.cached is False
        assert result.adjusted_text == "Hey team, quick update for you."
        assert result.tone.description == "Very casual and friendly"
        mock_ai.complete.assert_awaited_once()
        prompt = mock_ai.complete.await_args.args[0]
        assert "Very casual and friendly" in prompt
        assert '"Please send the report."' in prompt
        assert cache.get(make_key("Please send the report.", 2, 2)) is not None

    @pytest.mark.asyncio
    async def test_second_call_is_served_from_cache(self, service, mock_ai):
        await service.adjust_tone("Please send the report.", 0, 1)
        result = await service.adjust_tone("Please send the report.", 0, 1)

        assert result.cached is True
        assert result.adjusted_text == "Hey team, quick update for you."
        assert result.tone.description == "Formal but neutral"
        assert mock_ai.complete.await_count == 1

    @pytest.mark.asyncio
    async def test_different_coordinates_miss(self, service, mock_ai):
        await service.adjust_tone("Please send the report.", 0, 1)
        await service.adjust_tone("Please send the report.", 1, 0)
        assert mock_ai.complete.await_count == 2

    @pytest.mark.asyncio
    async def test_expired_entry_triggers_fresh_call(self, service, mock_ai, clock):
        await service.adjust_tone("Please send the report.", 1, 1)
        clock.advance(301)
        result = await service.adjust_tone("Please send the report.", 1, 1)

        assert result.cached is False
        assert mock_ai.complete.await_count == 2

    @pytest.mark.asyncio
    async def test_shared_prefix_shares_result(self, service, mock_ai):
        prefix = "x" * 100
        await service.adjust_tone(prefix + " ending one", 1, 1)
        result = await service.adjust_tone(prefix + " ending two", 1, 1)
        assert result.cached is True
        assert mock_ai.complete.await_count == 1

    @pytest.mark.asyncio
    async def test_whitespace_text_never_reaches_model(self, service, mock_ai):
        with pytest.raises(InvalidInput):
            await service.adjust_tone("   ", 1, 1)
        mock_ai.complete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_out_of_range_never_reaches_model(self, service, mock_ai):
        with pytest.raises(InvalidInput):
            await service.adjust_tone("hello", 5, 1)
        mock_ai.complete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_upstream_error_propagates_and_caches_nothing(self, service, mock_ai, cache):
        mock_ai.complete.side_effect = UpstreamRateLimited()
        with pytest.raises(UpstreamRateLimited):
            await service.adjust_tone("hello", 1, 1)
        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_result_is_sanitized(self, cache, mock_ai):
        mock_ai.complete.return_value = "Certainly! Here is the rewrite:\nGood [morning], all."
        service = ToneAdjustmentService(cache=cache, ai=mock_ai)
        result = await service.adjust_tone("hi all", 0, 0)
        assert result.adjusted_text == "Good morning, all."
