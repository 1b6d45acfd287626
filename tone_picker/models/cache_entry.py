from dataclasses import dataclass


@dataclass(frozen=True)
class CacheEntry:
    """A cached model result. Replaced wholesale on overwrite, never mutated."""

    key: str
    result_text: str
    created_at: float  # clock reading of the owning cache, in seconds
