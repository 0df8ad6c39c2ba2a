"""Split model output into numbered suggestion items."""

import re

NUMBERED_ITEM_PATTERN = re.compile(r"\d+\.\s+")


def split_numbered_suggestions(text: str) -> list[str]:
    """
    Split text on "N. " markers into trimmed, non-empty items.

    Text before the first marker is kept as an item when non-empty.
    """
    segments = NUMBERED_ITEM_PATTERN.split(text)
    return [segment.strip() for segment in segments if segment.strip()]
