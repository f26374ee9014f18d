"""
Text Metrics - Real-time text analysis engine.

Turns raw text into counts, readability grades, frequency statistics,
reading-time estimates and overflow boundaries. Every function is pure and
re-scans the full text, so it can be called on every keystroke.

Counting and overflow (editing surface):
    from text_metrics import count_all, detect_overflow

    counts = count_all(text)
    overflow = detect_overflow(text, "words", 500)
    within, over = overflow.split(text)

Details panel:
    from text_metrics import (
        analyze_statistics,
        analyze_readability,
        estimate_reading_time,
    )

    stats = analyze_statistics(text, top_n=10)
    grades = analyze_readability(text)  # None for empty text
    reading = estimate_reading_time(counts.words)

Custom syllable estimation:
    grades = analyze_readability(text, syllable_counter=my_counter)
"""

from .constants import ABBREVIATIONS, STOP_WORDS
from .counter import (
    PARAGRAPH_SEPARATOR_RE,
    WORD_LOOKBACK_LIMIT,
    count_all,
    count_characters,
    count_paragraphs,
    count_sentences,
    count_words,
)
from .models import (
    CountResult,
    EaseScore,
    GradeScore,
    LimitKind,
    LongestWord,
    OverflowResult,
    ReadabilityResult,
    ReadingTimeResult,
    TextReport,
    TextStatistics,
    WordFrequency,
)
from .overflow import detect_overflow
from .readability import (
    analyze_readability,
    count_syllables,
    grade_label,
    reading_ease_label,
)
from .reading_time import (
    DEFAULT_WORDS_PER_MINUTE,
    InvalidConfigurationError,
    estimate_reading_time,
)
from .report import build_text_report
from .syllables import SyllableCounter, estimate_syllables
from .text_statistics import analyze_statistics

__all__ = [
    # Counting
    "count_all",
    "count_words",
    "count_characters",
    "count_paragraphs",
    "count_sentences",
    "WORD_LOOKBACK_LIMIT",
    "PARAGRAPH_SEPARATOR_RE",
    # Overflow
    "detect_overflow",
    # Statistics
    "analyze_statistics",
    # Readability
    "analyze_readability",
    "count_syllables",
    "grade_label",
    "reading_ease_label",
    "estimate_syllables",
    "SyllableCounter",
    # Reading time
    "estimate_reading_time",
    "DEFAULT_WORDS_PER_MINUTE",
    "InvalidConfigurationError",
    # Aggregate
    "build_text_report",
    # Models
    "CountResult",
    "OverflowResult",
    "LimitKind",
    "TextStatistics",
    "LongestWord",
    "WordFrequency",
    "ReadabilityResult",
    "GradeScore",
    "EaseScore",
    "ReadingTimeResult",
    "TextReport",
    # Vocabularies
    "ABBREVIATIONS",
    "STOP_WORDS",
]

__version__ = "1.0.0"
