"""
Text counting: words, characters, paragraphs and sentences.

All functions are pure and re-scan the full text on every call; they are
cheap enough to run on every keystroke for texts of tens of thousands of
characters.

Sentence rules (heuristic, English only):
- ``.`` ``!`` ``?`` end sentences
- Known abbreviations ("Dr.", "etc.") never end a sentence
- Initials ("D.C.", "U.S.") end a sentence only when nothing initial-like
  or lowercase follows them
- ``...`` is a single boundary, and only when text follows it
- Runs like ``?!`` or ``!!!`` are a single boundary
- An unterminated trailing clause still counts as a sentence
"""

import re
from typing import Optional

from .constants import ABBREVIATIONS
from .models import CountResult

# Maximum characters inspected when looking for the word before a period.
# Keeps the sentence scan linear on texts with many periods.
WORD_LOOKBACK_LIMIT = 20

# Two or more consecutive line endings (LF or CRLF, mixed) separate paragraphs.
# Shared with the paragraph overflow scan so both agree on what a break is.
PARAGRAPH_SEPARATOR_RE = re.compile(r"(?:\r?\n){2,}")

_TERMINAL_MARKS = "!?"
_AFTER_PERIOD_RUN = ".!?"


def count_all(text: str) -> CountResult:
    """Compute every basic count for ``text`` in one call."""
    return CountResult(
        words=count_words(text),
        characters=count_characters(text),
        characters_no_spaces=count_characters(text, include_spaces=False),
        paragraphs=count_paragraphs(text),
        sentences=count_sentences(text),
    )


def count_words(text: str) -> int:
    """
    Count words as maximal runs of non-whitespace characters.

    Hyphenated compounds and contractions stay one word, numbers count as
    words and whitespace detection is Unicode-aware.
    """
    if not text:
        return 0
    return len(text.split())


def count_characters(text: str, include_spaces: bool = True) -> int:
    """
    Count characters in text.

    Args:
        text: Text to measure
        include_spaces: When False, every whitespace character (spaces,
            tabs, newlines) is excluded from the count

    Returns:
        Character count; whitespace-only text always counts as 0
    """
    if not text or not text.strip():
        return 0
    if include_spaces:
        return len(text)
    return sum(1 for ch in text if not ch.isspace())


def count_paragraphs(text: str) -> int:
    """Count blocks separated by one or more blank lines."""
    trimmed = text.strip() if text else ""
    if not trimmed:
        return 0
    return sum(1 for block in PARAGRAPH_SEPARATOR_RE.split(trimmed) if block.strip())


def count_sentences(text: str) -> int:
    """
    Count sentences with a single left-to-right scan.

    Text with words but no terminal punctuation is one sentence; empty or
    whitespace-only text has none.
    """
    trimmed = text.strip() if text else ""
    if not trimmed:
        return 0

    length = len(trimmed)
    count = 0
    boundary_end = 0
    i = 0

    while i < length:
        ch = trimmed[i]

        if ch == ".":
            if i + 1 < length and trimmed[i + 1] == ".":
                # Ellipsis: one boundary, and only if more text follows
                while i < length and trimmed[i] == ".":
                    i += 1
                i = _skip_whitespace(trimmed, i)
                if i < length:
                    count += 1
                    boundary_end = i
                continue

            if not _is_terminal_period(trimmed, i):
                i += 1
                continue

            count += 1
            i += 1
            while i < length and (trimmed[i] in _AFTER_PERIOD_RUN or trimmed[i].isspace()):
                i += 1
            boundary_end = i
            continue

        if ch in _TERMINAL_MARKS:
            count += 1
            while i < length and trimmed[i] in _TERMINAL_MARKS:
                i += 1
            i = _skip_whitespace(trimmed, i)
            boundary_end = i
            continue

        i += 1

    if count == 0:
        return 1

    # Unterminated final clause
    if trimmed[boundary_end:].strip():
        count += 1

    return count


def _skip_whitespace(text: str, index: int) -> int:
    length = len(text)
    while index < length and text[index].isspace():
        index += 1
    return index


def _is_terminal_period(text: str, dot_index: int) -> bool:
    """Classify a single period as sentence-ending or not."""
    word = word_before_period(text, dot_index)
    if word is None:
        return True

    if word.lower() in ABBREVIATIONS:
        return False

    if len(word) == 1 and word.isupper():
        # An initial only ends the sentence when the initialism is over
        return not _continues_initialism(text, dot_index + 1)

    return True


def _continues_initialism(text: str, index: int) -> bool:
    """True when another "X." initial or a lowercase word follows ``index``."""
    index = _skip_whitespace(text, index)
    if index >= len(text):
        return False

    ch = text[index]
    if ch.isalpha() and index + 1 < len(text) and text[index + 1] == ".":
        return True
    return ch.islower()


def word_before_period(text: str, dot_index: int) -> Optional[str]:
    """
    Return the alphabetic token that ends right before ``text[dot_index]``.

    The backward scan covers letters and dots (so "D.C" yields "C") and
    never inspects more than WORD_LOOKBACK_LIMIT characters. Returns None
    when no letter precedes the dot.
    """
    floor = max(0, dot_index - WORD_LOOKBACK_LIMIT)
    start = dot_index
    while start > floor and (text[start - 1].isalpha() or text[start - 1] == "."):
        start -= 1

    last_part = text[start:dot_index].rsplit(".", 1)[-1]
    return last_part or None
