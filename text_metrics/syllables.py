"""Default syllable estimator for readability scoring."""

from typing import Callable

import pyphen

# Any callable mapping a word token to an estimated syllable count
SyllableCounter = Callable[[str], int]

# Hyphenation dictionaries ship with pyphen; loading one never touches the network
_HYPHENATOR = pyphen.Pyphen(lang="en_US", left=1, right=1)


def estimate_syllables(word: str) -> int:
    """
    Estimate English syllables in a single whitespace token.

    Each hyphenation point splits off one more syllable. Tokens containing
    a letter or digit always get at least one syllable; punctuation-only
    tokens ("—", "...") get none.
    """
    if not word or not any(ch.isalnum() for ch in word):
        return 0

    letters = "".join(ch for ch in word if ch.isalpha())
    if not letters:
        return 1
    return len(_HYPHENATOR.positions(letters)) + 1
