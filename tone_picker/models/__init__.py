from .tone import ToneCoordinate, ToneDescriptor
from .cache_entry import CacheEntry
from .adjustment import AdjustmentRequest, AdjustmentResult
from .document import ClientDocument

__all__ = [
    "ToneCoordinate",
    "ToneDescriptor",
    "CacheEntry",
    "AdjustmentRequest",
    "AdjustmentResult",
    "ClientDocument",
]
