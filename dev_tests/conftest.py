"""Shared pytest fixtures for Text Metrics Engine tests."""

import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# ============================================================================
# Text Fixtures
# ============================================================================

SIMPLE_SENTENCE = "The quick brown fox jumps over the lazy dog."

LONG_TEXT = """The art of writing is one of the most remarkable achievements of human civilization. From the earliest cave paintings to modern digital text, the desire to record and share ideas has driven countless innovations. Writing allows us to preserve knowledge across generations, communicate complex thoughts with precision, and express the full range of human emotion.

In the ancient world, scribes held positions of great power and prestige. They were the keepers of records, the drafters of laws, and the chroniclers of history. The invention of the alphabet simplified the process dramatically, making literacy accessible to a much broader segment of society.

Today we find ourselves in yet another transformation. Digital technology has made writing more accessible than at any point in human history. Anyone with a smartphone can publish their thoughts to a global audience in seconds. How do we organize our thoughts clearly? How do we choose the right words to convey our meaning?

Counting words and measuring text might seem mundane compared to the grand sweep of literary history. But precision matters. A good word counter is a quiet but indispensable tool in every writer's toolkit."""

KNOWN_GRADE_5 = (
    "The cat sat on the mat. It was a big brown cat. The cat liked to sit in the sun. "
    "Every day the cat would find a warm spot. Then it would curl up and sleep. "
    "The cat was very happy. It had food and water and a warm home. "
    "Life was good for the little cat."
)

KNOWN_GRADE_12 = (
    "The epistemological implications of quantum mechanics necessitate a fundamental "
    "reconsideration of classical deterministic frameworks. Heisenberg's uncertainty "
    "principle demonstrates that simultaneous precise measurement of complementary "
    "variables remains inherently impossible, thereby undermining the foundational "
    "assumptions of Newtonian physics. Furthermore, the phenomenon of quantum entanglement "
    "suggests non-local correlations that challenge conventional notions of spatial "
    "causality and temporal sequence. Contemporary theoretical physicists continue to "
    "grapple with the philosophical ramifications of these observations, particularly "
    "regarding the interpretation of wave function collapse and the measurement problem."
)

# Texts shared by property checks across modules
SAMPLE_TEXTS = [
    "",
    "   \n\n  \t  ",
    "Hello",
    SIMPLE_SENTENCE,
    "Wait... what?",
    "Really?! Yes!",
    "Dr. Smith went to D.C.",
    "I live in D.C. It is busy.",
    "First.\r\n\r\nSecond.\n\nThird.",
    "  leading and trailing  \n\n\n  blocks   \n\n",
    "Café résumé naïve",
    "one two three",
    "No punctuation at all",
    "Hmm...",
    KNOWN_GRADE_5,
    LONG_TEXT,
]


@pytest.fixture
def simple_sentence():
    """Single nine-word sentence."""
    return SIMPLE_SENTENCE


@pytest.fixture
def long_text():
    """Multi-paragraph English prose."""
    return LONG_TEXT


@pytest.fixture
def known_grade_5():
    """Short sentences with common words."""
    return KNOWN_GRADE_5


@pytest.fixture
def known_grade_12():
    """Long sentences with academic vocabulary."""
    return KNOWN_GRADE_12


@pytest.fixture
def sample_texts():
    """Assorted texts covering empty, whitespace, punctuation and Unicode cases."""
    return list(SAMPLE_TEXTS)


@pytest.fixture
def one_syllable_counter():
    """Syllable estimator that counts every token as one syllable."""
    return lambda word: 1
