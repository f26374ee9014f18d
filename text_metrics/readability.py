"""
Readability analysis: Flesch-Kincaid, Coleman-Liau, Flesch Reading Ease.

Syllable counting is injected (any ``str -> int`` callable) and defaults
to ``estimate_syllables``. At least one word and one sentence are needed
for a meaningful score; otherwise ``analyze_readability`` returns None.
"""

import logging
import re
from typing import Optional

from .counter import count_sentences, count_words
from .models import EaseScore, GradeScore, ReadabilityResult
from .syllables import SyllableCounter, estimate_syllables
from .text_statistics import round_half_up

logger = logging.getLogger(__name__)

# Coleman-Liau counts Latin letters only, accented ones included
_NON_LETTER_RE = re.compile(r"[^a-zA-Z\u00C0-\u024F]")

_GRADE_BANDS = (
    (1, "Very easy to read"),
    (3, "Easy to read"),
    (5, "Fairly easy to read"),
    (8, "Plain language"),
    (10, "Fairly difficult to read"),
    (12, "Difficult to read"),
    (16, "College level"),
)

_EASE_BANDS = (
    (90, "Very easy to read"),
    (80, "Easy to read"),
    (70, "Fairly easy to read"),
    (60, "Standard"),
    (50, "Fairly difficult to read"),
    (30, "Difficult to read"),
)


def count_syllables(word: str) -> int:
    """Syllables in one word using the default estimator."""
    return estimate_syllables(word)


def flesch_kincaid_grade(words: int, sentences: int, syllables: int) -> float:
    return 0.39 * (words / sentences) + 11.8 * (syllables / words) - 15.59


def coleman_liau_index(words: int, sentences: int, letters: int) -> float:
    return 0.0588 * (letters / words * 100) - 0.296 * (sentences / words * 100) - 15.8


def flesch_reading_ease(words: int, sentences: int, syllables: int) -> float:
    return 206.835 - 1.015 * (words / sentences) - 84.6 * (syllables / words)


def analyze_readability(
    text: str,
    syllable_counter: SyllableCounter = estimate_syllables,
) -> Optional[ReadabilityResult]:
    """
    Analyze readability of the given text.

    Args:
        text: Input text
        syllable_counter: Estimator returning a syllable count per token

    Returns:
        ReadabilityResult, or None when the text has no words or sentences
    """
    trimmed = text.strip() if text else ""
    if not trimmed:
        return None

    word_count = count_words(trimmed)
    sentence_count = count_sentences(trimmed)
    if word_count == 0 or sentence_count == 0:
        logger.debug("Readability skipped: %d words, %d sentences", word_count, sentence_count)
        return None

    total_syllables = 0
    total_letters = 0
    for token in trimmed.split():
        total_syllables += syllable_counter(token)
        total_letters += len(_NON_LETTER_RE.sub("", token))

    fk_grade = round_half_up(flesch_kincaid_grade(word_count, sentence_count, total_syllables), 1)
    cl_grade = round_half_up(coleman_liau_index(word_count, sentence_count, total_letters), 1)
    ease = round_half_up(flesch_reading_ease(word_count, sentence_count, total_syllables), 1)

    return ReadabilityResult(
        flesch_kincaid=GradeScore(grade=fk_grade, label=grade_label(fk_grade)),
        coleman_liau=GradeScore(grade=cl_grade, label=grade_label(cl_grade)),
        flesch_reading_ease=EaseScore(score=ease, label=reading_ease_label(ease)),
    )


def grade_label(grade: float) -> str:
    """Map a grade level to a label such as "Grade 7 — Plain language"."""
    rounded = int(round_half_up(grade, 0))
    if rounded <= 1:
        return "Grade 1 — Very easy to read"
    for ceiling, description in _GRADE_BANDS:
        if rounded <= ceiling:
            return f"Grade {rounded} — {description}"
    return f"Grade {rounded} — Professional/academic"


def reading_ease_label(score: float) -> str:
    for floor, description in _EASE_BANDS:
        if score >= floor:
            return description
    return "Very difficult to read"
