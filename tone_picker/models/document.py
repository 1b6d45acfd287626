import time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

MAX_HISTORY_SIZE = 50


def now_ms() -> int:
    return int(time.time() * 1000)


class ClientDocument(BaseModel):
    """The user's working text plus its undo/redo history.

    Invariant: -1 <= current_index <= len(history) - 1.
    """

    model_config = ConfigDict(populate_by_name=True)

    text: str = ""
    history: list[Any] = Field(default_factory=list)
    current_index: int = Field(-1, alias="currentIndex")
    timestamp: int = Field(default_factory=now_ms)

    @model_validator(mode="after")
    def _clamp_index(self) -> "ClientDocument":
        self.current_index = max(-1, min(self.current_index, len(self.history) - 1))
        return self

    @property
    def can_undo(self) -> bool:
        return self.current_index > 0

    @property
    def can_redo(self) -> bool:
        return self.current_index < len(self.history) - 1

    def record(self, text: str, max_history: int = MAX_HISTORY_SIZE) -> None:
        """Push a new snapshot. Anything after the current position is discarded."""
        del self.history[self.current_index + 1:]
        self.history.append(text)
        if len(self.history) > max_history:
            del self.history[: len(self.history) - max_history]
        self.current_index = len(self.history) - 1
        self.text = text
        self.timestamp = now_ms()

    def undo(self) -> Any | None:
        if not self.can_undo:
            return None
        self.current_index -= 1
        return self._move_to_current()

    def redo(self) -> Any | None:
        if not self.can_redo:
            return None
        self.current_index += 1
        return self._move_to_current()

    def _move_to_current(self) -> Any:
        snapshot = self.history[self.current_index]
        if isinstance(snapshot, str):
            self.text = snapshot
        self.timestamp = now_ms()
        return snapshot

    def to_storage(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
