from .tone import (
    AdjustToneRequest,
    AdjustToneResponse,
    ToneOut,
    HealthResponse,
    ErrorResponse,
)

__all__ = [
    "AdjustToneRequest",
    "AdjustToneResponse",
    "ToneOut",
    "HealthResponse",
    "ErrorResponse",
]
