"""
Static 3x3 tone grid: (x, y) -> descriptor.
x runs formal -> casual, y runs professional -> casual. The description is what goes into the prompt.
"""
from tone_picker.models.tone import X_LABELS, Y_LABELS, ToneCoordinate, ToneDescriptor

_DESCRIPTIONS = {
    (0, 0): "Very formal and professional",
    (0, 1): "Formal but neutral",
    (0, 2): "Formal but approachable",
    (1, 0): "Neutral and professional",
    (1, 1): "Balanced and neutral",
    (1, 2): "Neutral but casual",
    (2, 0): "Casual but professional",
    (2, 1): "Casual and neutral",
    (2, 2): "Very casual and friendly",
}

TONE_MATRIX: dict[tuple[int, int], ToneDescriptor] = {
    (x, y): ToneDescriptor(x_label=X_LABELS[x], y_label=Y_LABELS[y], description=text)
    for (x, y), text in _DESCRIPTIONS.items()
}


def describe(coordinate: ToneCoordinate) -> ToneDescriptor:
    """Look up the descriptor for a grid point. Callers validate the range first."""
    return TONE_MATRIX[(coordinate.x, coordinate.y)]
