from .tones import TONE_MATRIX, describe
from .templates import TONE_ADJUSTMENT_PROMPT

__all__ = ["TONE_MATRIX", "describe", "TONE_ADJUSTMENT_PROMPT"]
