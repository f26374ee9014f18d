"""Aggregate report combining every metric for one text."""

from typing import Optional, Union

from .counter import count_all
from .models import LimitKind, TextReport
from .overflow import detect_overflow
from .readability import analyze_readability
from .reading_time import DEFAULT_WORDS_PER_MINUTE, estimate_reading_time
from .syllables import SyllableCounter, estimate_syllables
from .text_statistics import analyze_statistics


def build_text_report(
    text: str,
    top_n: int = 10,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
    limit_kind: Optional[Union[LimitKind, str]] = None,
    limit_value: Optional[int] = None,
    syllable_counter: SyllableCounter = estimate_syllables,
) -> TextReport:
    """
    Build the full details-panel report for ``text``.

    Overflow is only computed when both ``limit_kind`` and ``limit_value``
    are given. The reading time is derived from the report's own word count.
    """
    counts = count_all(text)

    overflow = None
    if limit_kind is not None and limit_value is not None:
        overflow = detect_overflow(text, limit_kind, limit_value)

    return TextReport(
        counts=counts,
        statistics=analyze_statistics(text, top_n=top_n),
        readability=analyze_readability(text, syllable_counter=syllable_counter),
        reading_time=estimate_reading_time(counts.words, words_per_minute),
        overflow=overflow,
    )
