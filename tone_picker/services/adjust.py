"""
Orchestrates: validation -> cache lookup -> prompt -> model call -> sanitize -> cache write.
"""
import logging

from tone_picker.exceptions import InvalidInput
from tone_picker.models import AdjustmentRequest, AdjustmentResult, ToneCoordinate
from tone_picker.prompts import TONE_ADJUSTMENT_PROMPT, describe
from tone_picker.services.ai import AIService
from tone_picker.services.cache import DEFAULT_KEY_PREFIX_LENGTH, ResultCache, make_key
from tone_picker.services.sanitizer import sanitize

logger = logging.getLogger(__name__)


def validate_request(text: object, x: object, y: object) -> AdjustmentRequest:
    if not isinstance(text, str) or not text.strip():
        raise InvalidInput("Text is required")
    if not (ToneCoordinate.in_range(x) and ToneCoordinate.in_range(y)):
        raise InvalidInput("Invalid tone coordinates")
    return AdjustmentRequest(text=text.strip(), coordinate=ToneCoordinate(x=x, y=y))


class ToneAdjustmentService:
    """Stateless per request; the cache and model client are owned by whoever builds the service."""

    def __init__(
        self,
        cache: ResultCache,
        ai: AIService,
        key_prefix_length: int = DEFAULT_KEY_PREFIX_LENGTH,
    ) -> None:
        self.cache = cache
        self.ai = ai
        self.key_prefix_length = key_prefix_length

    async def adjust_tone(self, text: object, x: object, y: object) -> AdjustmentResult:
        # 1) Validate
        request = validate_request(text, x, y)
        coord = request.coordinate
        tone = describe(coord)

        # 2) Cache lookup; a hit never reaches the model
        key = make_key(request.text, coord.x, coord.y, self.key_prefix_length)
        entry = self.cache.get(key)
        if entry is not None:
            logger.info("Cache hit for tone (%d, %d)", coord.x, coord.y)
            return AdjustmentResult(adjusted_text=entry.result_text, tone=tone, cached=True)

        # 3) Build prompt and call the model
        logger.info("Cache miss for tone (%d, %d); calling model", coord.x, coord.y)
        prompt = TONE_ADJUSTMENT_PROMPT.format(tone_description=tone.description, text=request.text)
        raw = await self.ai.complete(prompt)

        # 4) Clean up, store, respond
        adjusted = sanitize(raw)
        self.cache.put(key, adjusted)
        return AdjustmentResult(adjusted_text=adjusted, tone=tone, cached=False)
