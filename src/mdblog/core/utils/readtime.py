"""Read-time estimate for post bodies"""

import math


WORDS_PER_MINUTE = 225


def estimate_read_time(content: str, words_per_minute: int = WORDS_PER_MINUTE) -> str:
    """Return e.g. '3 min read'; anything up to one minute reads as '1 min read'."""
    if words_per_minute <= 0:
        raise ValueError(f"words_per_minute must be positive, got {words_per_minute}")
    minutes = math.ceil(len(content.split()) / words_per_minute)
    if minutes <= 1:
        return "1 min read"
    return f"{minutes} min read"
