from dataclasses import dataclass

from .tone import ToneCoordinate, ToneDescriptor


@dataclass(frozen=True)
class AdjustmentRequest:
    text: str
    coordinate: ToneCoordinate


@dataclass(frozen=True)
class AdjustmentResult:
    adjusted_text: str
    tone: ToneDescriptor
    cached: bool
