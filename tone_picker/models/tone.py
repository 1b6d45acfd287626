from dataclasses import dataclass

GRID_MIN = 0
GRID_MAX = 2

X_LABELS = ("formal", "neutral", "casual")
Y_LABELS = ("professional", "neutral", "casual")


@dataclass(frozen=True)
class ToneCoordinate:
    """A point on the 3x3 tone grid. x is formality, y is register."""

    x: int
    y: int

    @staticmethod
    def in_range(value: object) -> bool:
        # bool is an int subclass; True/False are not coordinates
        return isinstance(value, int) and not isinstance(value, bool) and GRID_MIN <= value <= GRID_MAX


@dataclass(frozen=True)
class ToneDescriptor:
    x_label: str
    y_label: str
    description: str

    def to_dict(self) -> dict[str, str]:
        return {"x": self.x_label, "y": self.y_label, "description": self.description}
