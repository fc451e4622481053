from typing import Iterable, Any


def clamp_score(score: int, max_score: int) -> int:
    """Clamp a score to the [0, max_score] range."""
    return max(0, min(max_score, score))


def summarize_items(items: Iterable[Any], limit: int = 5) -> str:
    """
    Join items into a short comma separated listing.

    At most ``limit`` items are shown; the remainder is reported as a count,
    e.g. ``"a, b, c and 2 more"``.
    """
    items = [str(item) for item in items]
    shown = ", ".join(items[:limit])
    hidden = len(items) - limit
    if hidden > 0:
        return f"{shown} and {hidden} more"
    return shown
