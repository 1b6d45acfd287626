"""
Strip the wrapping a chat model tends to put around a rewrite: quotes, bold headers,
"Certainly! Here is ..." preambles, trailing commentary and template placeholders.
"""
import re

# Order matters: later rules expect quotes and markdown to be gone already.
_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"^[\"']|[\"']\Z"), ""),  # surrounding quotes
    (re.compile(r"^\*\*.*?\*\*:?\s*"), ""),  # **Header**:
    (re.compile(r"^Rewritten text:?\s*", re.IGNORECASE), ""),
    (re.compile(r"^Certainly!?\s*", re.IGNORECASE), ""),
    (re.compile(r"^Here is.*?:\s*", re.IGNORECASE), ""),
    (re.compile(r"^This version.*$", re.IGNORECASE | re.MULTILINE), ""),  # meta-commentary
    (re.compile(r"^Good \[.*?\]", re.IGNORECASE), "Good morning"),  # "Good [morning/afternoon]"
]


def sanitize(raw: str) -> str:
    """Clean raw model output. Falls back to the trimmed input if every rule together empties it."""
    original = raw.strip()
    text = original
    for pattern, replacement in _RULES:
        text = pattern.sub(replacement, text)
    text = text.strip()
    return text or original
