"""
Text Metrics Models - Immutable result objects for the analysis engine.

Core Types:
- LimitKind: Unit a limit is expressed in (words, characters, paragraphs)
- CountResult: Aggregated word/character/paragraph/sentence counts
- OverflowResult: Where text starts exceeding a limit
- TextStatistics: Average lengths, unique words, longest word, top words
- ReadabilityResult: Flesch-Kincaid, Coleman-Liau and Flesch Reading Ease
- ReadingTimeResult: Rounded reading-time estimate with a label
- TextReport: Everything the details panel shows, computed in one call

All models are frozen: every analysis call builds fresh instances and no
result is ever mutated after creation.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class LimitKind(str, Enum):
    """Unit used to express a content limit."""

    WORDS = "words"
    CHARACTERS = "characters"
    PARAGRAPHS = "paragraphs"


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class CountResult(_FrozenModel):
    """All basic counts for a text."""

    words: int = Field(default=0, ge=0, description="Whitespace-delimited word count")
    characters: int = Field(default=0, ge=0, description="Character count including whitespace")
    characters_no_spaces: int = Field(default=0, ge=0, description="Character count excluding whitespace")
    paragraphs: int = Field(default=0, ge=0, description="Blocks separated by blank lines")
    sentences: int = Field(default=0, ge=0, description="Heuristic sentence count")


class OverflowResult(_FrozenModel):
    """Result of checking a text against a limit."""

    is_over: bool = Field(default=False, description="True when the text exceeds the limit")
    overflow_amount: int = Field(default=0, ge=0, description="How many units exceed the limit")
    boundary_char_index: int = Field(
        default=0,
        ge=0,
        description="Index where the over-limit portion starts (len(text) when not over)",
    )

    def split(self, text: str) -> Tuple[str, str]:
        """Split ``text`` into its within-limit and over-limit segments."""
        return text[:self.boundary_char_index], text[self.boundary_char_index:]


class LongestWord(_FrozenModel):
    word: str = ""
    length: int = Field(default=0, ge=0)


class WordFrequency(_FrozenModel):
    word: str
    count: int = Field(..., ge=1)


class TextStatistics(_FrozenModel):
    """Word-level statistics for the details panel."""

    avg_word_length: float = Field(default=0.0, description="Mean clean-word length, 2 decimals")
    avg_sentence_length: float = Field(default=0.0, description="Words per sentence, 2 decimals")
    unique_word_count: int = Field(default=0, ge=0, description="Distinct case-folded clean words")
    longest_word: LongestWord = Field(default_factory=LongestWord)
    top_words: Tuple[WordFrequency, ...] = Field(
        default_factory=tuple,
        description="Most frequent non-stop words, descending by count",
    )


class GradeScore(_FrozenModel):
    grade: float
    label: str


class EaseScore(_FrozenModel):
    score: float
    label: str


class ReadabilityResult(_FrozenModel):
    """Readability grades; analyzers return None instead when text is too short."""

    flesch_kincaid: GradeScore
    coleman_liau: GradeScore
    flesch_reading_ease: EaseScore


class ReadingTimeResult(_FrozenModel):
    minutes: int = Field(default=0, ge=0)
    label: str = "< 1 min read"


class TextReport(_FrozenModel):
    """Aggregate of every metric computed for one text."""

    counts: CountResult
    statistics: TextStatistics
    readability: Optional[ReadabilityResult] = None
    reading_time: ReadingTimeResult
    overflow: Optional[OverflowResult] = None
