"""Reading time estimation from a word count."""

import math

from .models import ReadingTimeResult

DEFAULT_WORDS_PER_MINUTE = 250

# Below this many minutes (about 15 seconds) the label is "< 1 min read"
_MIN_DISPLAY_MINUTES = 0.25


class InvalidConfigurationError(ValueError):
    """Raised when an estimator is configured with impossible parameters."""


def estimate_reading_time(
    word_count: int,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
) -> ReadingTimeResult:
    """
    Estimate minutes needed to read ``word_count`` words.

    Args:
        word_count: Total number of words
        words_per_minute: Reading speed (250 is an average adult reader)

    Returns:
        Minutes rounded up and a label such as "~3 min read"

    Raises:
        InvalidConfigurationError: If ``words_per_minute`` is not positive
    """
    if word_count <= 0:
        return ReadingTimeResult(minutes=0, label="< 1 min read")

    if words_per_minute <= 0:
        raise InvalidConfigurationError(
            f"words_per_minute must be greater than 0 (got {words_per_minute})"
        )

    raw_minutes = word_count / words_per_minute
    if raw_minutes < _MIN_DISPLAY_MINUTES:
        return ReadingTimeResult(minutes=0, label="< 1 min read")

    minutes = math.ceil(raw_minutes)
    return ReadingTimeResult(minutes=minutes, label=f"~{minutes} min read")
