"""
Text statistics: average lengths, unique words, longest word, top words.

Uses the same whitespace tokenization as ``counter`` so the numbers shown
in the details panel line up with the live counters.
"""

import math
from typing import Dict, List

from .constants import STOP_WORDS
from .counter import count_sentences, count_words
from .models import LongestWord, TextStatistics, WordFrequency


def round_half_up(value: float, decimals: int) -> float:
    """Round like the editor displays numbers (0.125 -> 0.13, not banker's rounding)."""
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def clean_word(token: str) -> str:
    """Strip everything except letters, digits, apostrophes and hyphens."""
    return "".join(ch for ch in token if ch.isalnum() or ch in "'-")


def extract_clean_words(text: str) -> List[str]:
    """Whitespace tokens with punctuation stripped; empty results are dropped."""
    cleaned = (clean_word(token) for token in text.split())
    return [word for word in cleaned if word]


def analyze_statistics(text: str, top_n: int = 10) -> TextStatistics:
    """
    Analyze word lengths, frequencies and unique counts.

    Args:
        text: Input text
        top_n: Number of top words to return; 0 or less returns none

    Returns:
        TextStatistics; all zeros for empty or whitespace-only text
    """
    trimmed = text.strip() if text else ""
    if not trimmed:
        return TextStatistics()

    clean_words = extract_clean_words(trimmed)

    avg_word_length = 0.0
    if clean_words:
        total_length = sum(len(word) for word in clean_words)
        avg_word_length = round_half_up(total_length / len(clean_words), 2)

    sentence_count = count_sentences(trimmed)
    avg_sentence_length = 0.0
    if sentence_count > 0:
        avg_sentence_length = round_half_up(count_words(trimmed) / sentence_count, 2)

    unique_word_count = len({word.lower() for word in clean_words})

    longest = LongestWord()
    for word in clean_words:
        if len(word) > longest.length:
            longest = LongestWord(word=word, length=len(word))

    return TextStatistics(
        avg_word_length=avg_word_length,
        avg_sentence_length=avg_sentence_length,
        unique_word_count=unique_word_count,
        longest_word=longest,
        top_words=top_words(clean_words, top_n),
    )


def top_words(clean_words: List[str], top_n: int) -> List[WordFrequency]:
    """
    Most frequent non-stop words, case-insensitive.

    Words with equal counts keep the order in which they first appear in
    the text (insertion-ordered dict plus a stable sort).
    """
    if top_n <= 0:
        return []

    frequencies: Dict[str, int] = {}
    for word in clean_words:
        lower = word.lower()
        if lower in STOP_WORDS:
            continue
        frequencies[lower] = frequencies.get(lower, 0) + 1

    ranked = sorted(frequencies.items(), key=lambda item: item[1], reverse=True)
    return [WordFrequency(word=word, count=count) for word, count in ranked[:top_n]]
