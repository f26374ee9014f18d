"""
Overflow detection: find where text exceeds a limit.

The editor splits content at ``boundary_char_index`` into "within limit"
and "over limit" segments, so the index must agree exactly with the
counting rules in ``counter``.
"""

import logging
from typing import Union

from .counter import PARAGRAPH_SEPARATOR_RE, count_paragraphs, count_words
from .models import LimitKind, OverflowResult

logger = logging.getLogger(__name__)


def detect_overflow(
    text: str,
    limit_kind: Union[LimitKind, str],
    limit_value: int,
) -> OverflowResult:
    """
    Detect overflow in text against a limit.

    Args:
        text: Full text to check
        limit_kind: Unit of the limit ("words", "characters", "paragraphs")
        limit_value: Maximum allowed count; negative values are treated as 0

    Returns:
        OverflowResult whose boundary marks the start of the over-limit text

    Raises:
        ValueError: If ``limit_kind`` is not a known limit kind
    """
    kind = LimitKind(limit_kind)

    if limit_value < 0:
        logger.debug("Negative %s limit %d clamped to 0", kind.value, limit_value)
        limit_value = 0

    if not text:
        return _no_overflow(text)

    if kind is LimitKind.WORDS:
        return _detect_word_overflow(text, limit_value)
    if kind is LimitKind.CHARACTERS:
        return _detect_character_overflow(text, limit_value)
    return _detect_paragraph_overflow(text, limit_value)


def _no_overflow(text: str) -> OverflowResult:
    return OverflowResult(is_over=False, overflow_amount=0, boundary_char_index=len(text))


def _detect_word_overflow(text: str, limit: int) -> OverflowResult:
    """Boundary is the start of the first word past the limit."""
    total_words = count_words(text)
    if total_words <= limit:
        return _no_overflow(text)

    if limit == 0:
        return OverflowResult(is_over=True, overflow_amount=total_words, boundary_char_index=0)

    length = len(text)
    words_seen = 0
    i = 0

    while i < length and words_seen < limit:
        while i < length and text[i].isspace():
            i += 1
        if i >= length:
            break

        words_seen += 1
        while i < length and not text[i].isspace():
            i += 1

    # Whitespace after the last allowed word stays within the limit
    while i < length and text[i].isspace():
        i += 1

    return OverflowResult(
        is_over=True,
        overflow_amount=total_words - limit,
        boundary_char_index=i,
    )


def _detect_character_overflow(text: str, limit: int) -> OverflowResult:
    if len(text) <= limit:
        return _no_overflow(text)

    return OverflowResult(
        is_over=True,
        overflow_amount=len(text) - limit,
        boundary_char_index=limit,
    )


def _detect_paragraph_overflow(text: str, limit: int) -> OverflowResult:
    """Boundary is the first non-whitespace character of paragraph ``limit + 1``."""
    total_paragraphs = count_paragraphs(text)
    if total_paragraphs <= limit:
        return _no_overflow(text)

    if limit == 0:
        return OverflowResult(is_over=True, overflow_amount=total_paragraphs, boundary_char_index=0)

    length = len(text)
    paragraphs_seen = 0
    in_paragraph = False
    i = 0

    while i < length:
        separator = PARAGRAPH_SEPARATOR_RE.match(text, i)
        if separator:
            in_paragraph = False
            i = separator.end()
            continue

        if not text[i].isspace() and not in_paragraph:
            in_paragraph = True
            paragraphs_seen += 1
            if paragraphs_seen > limit:
                return OverflowResult(
                    is_over=True,
                    overflow_amount=total_paragraphs - limit,
                    boundary_char_index=i,
                )
        i += 1

    # Unreachable while the scan and count_paragraphs share one separator rule
    logger.warning(
        "Paragraph scan found %d paragraphs but counter reported %d",
        paragraphs_seen,
        total_paragraphs,
    )
    return _no_overflow(text)
