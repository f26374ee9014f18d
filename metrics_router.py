"""
FastAPI router for the text metrics engine
==========================================

Provides HTTP API endpoints for:
- Live counters and overflow boundaries (editing surface)
- Statistics, readability and reading time (details panel)
- A single aggregate report combining all of the above

Every endpoint is a thin wrapper around a pure ``text_metrics`` call.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field, model_validator

from config import config
from logging_utils import TimingTracker
from text_metrics import (
    CountResult,
    LimitKind,
    OverflowResult,
    ReadabilityResult,
    ReadingTimeResult,
    TextReport,
    TextStatistics,
    analyze_readability,
    analyze_statistics,
    build_text_report,
    count_all,
    count_words,
    detect_overflow,
    estimate_reading_time,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/metrics", tags=["metrics"])

T = TypeVar("T")


# ============================================================================
# REQUEST MODELS
# ============================================================================

class TextRequest(BaseModel):
    """Request carrying the text to analyze"""

    text: str = Field(
        ...,
        max_length=config.MAX_TEXT_LENGTH,
        description="Text to analyze (empty text yields zero results)",
    )


class OverflowRequest(TextRequest):
    """Request model for overflow detection"""

    limit_kind: LimitKind = Field(..., description="Unit of the limit: words, characters or paragraphs")
    limit_value: int = Field(..., ge=0, description="Maximum allowed count")


class StatisticsRequest(TextRequest):
    """Request model for text statistics"""

    top_n: int = Field(
        default_factory=lambda: config.DEFAULT_TOP_WORDS,
        ge=0,
        le=100,
        description="Number of most frequent words to return",
    )


class ReadingTimeRequest(BaseModel):
    """Request model for reading time; provide either word_count or text"""

    word_count: Optional[int] = Field(default=None, description="Precomputed word count")
    text: Optional[str] = Field(
        default=None,
        max_length=config.MAX_TEXT_LENGTH,
        description="Text whose words are counted when word_count is omitted",
    )
    words_per_minute: int = Field(
        default_factory=lambda: config.DEFAULT_WORDS_PER_MINUTE,
        description="Reading speed in words per minute",
    )

    @model_validator(mode="after")
    def require_word_source(self) -> "ReadingTimeRequest":
        if self.word_count is None and self.text is None:
            raise ValueError("Provide either word_count or text")
        return self


class ReportRequest(StatisticsRequest):
    """Request model for the aggregate report"""

    words_per_minute: int = Field(
        default_factory=lambda: config.DEFAULT_WORDS_PER_MINUTE,
        description="Reading speed in words per minute",
    )
    limit_kind: Optional[LimitKind] = Field(default=None, description="Optional limit unit for overflow")
    limit_value: Optional[int] = Field(default=None, ge=0, description="Optional limit value for overflow")


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class CountResponse(BaseModel):
    counts: CountResult
    processing_time_ms: float = Field(..., description="Processing time in milliseconds")


class OverflowResponse(BaseModel):
    overflow: OverflowResult
    processing_time_ms: float = Field(..., description="Processing time in milliseconds")


class StatisticsResponse(BaseModel):
    statistics: TextStatistics
    processing_time_ms: float = Field(..., description="Processing time in milliseconds")


class ReadabilityResponse(BaseModel):
    readability: Optional[ReadabilityResult] = Field(
        None,
        description="Readability grades, null when the text has no words or sentences",
    )
    processing_time_ms: float = Field(..., description="Processing time in milliseconds")


class ReadingTimeResponse(BaseModel):
    word_count: int
    reading_time: ReadingTimeResult
    processing_time_ms: float = Field(..., description="Processing time in milliseconds")


class ReportResponse(BaseModel):
    report: TextReport
    processing_time_ms: float = Field(..., description="Processing time in milliseconds")


# ============================================================================
# HELPERS
# ============================================================================

def _run_analysis(name: str, func: Callable[[], T]) -> tuple[T, float]:
    """Run ``func`` with timing; map engine errors to HTTP errors."""
    timer = TimingTracker()
    timer.start(name)
    try:
        result = func()
    except ValueError as e:
        # InvalidConfigurationError is a ValueError
        logger.warning(f"{name} rejected invalid input: {e}")
        raise HTTPException(
            status_code=422,
            detail=str(e),
        )
    except Exception as e:
        logger.error(f"{name} failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Analysis failed: {str(e)}",
        )
    elapsed_ms = timer.elapsed_ms(name)
    logger.debug("%s completed in %.2f ms", name, elapsed_ms)
    return result, elapsed_ms


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post(
    "/count",
    response_model=CountResponse,
    summary="Count Text",
    description="Word, character, paragraph and sentence counts for the current text.",
)
async def count_endpoint(request: TextRequest) -> CountResponse:
    counts, elapsed_ms = _run_analysis("count", lambda: count_all(request.text))
    return CountResponse(counts=counts, processing_time_ms=elapsed_ms)


@router.post(
    "/overflow",
    response_model=OverflowResponse,
    summary="Detect Overflow",
    description=(
        "Finds the character index where the text starts exceeding the limit. "
        "text[boundary_char_index:] is exactly the over-limit portion."
    ),
)
async def overflow_endpoint(request: OverflowRequest) -> OverflowResponse:
    overflow, elapsed_ms = _run_analysis(
        "overflow",
        lambda: detect_overflow(request.text, request.limit_kind, request.limit_value),
    )
    if overflow.is_over:
        logger.info(
            "Text over %s limit %d by %d (boundary at %d)",
            request.limit_kind.value,
            request.limit_value,
            overflow.overflow_amount,
            overflow.boundary_char_index,
        )
    return OverflowResponse(overflow=overflow, processing_time_ms=elapsed_ms)


@router.post(
    "/statistics",
    response_model=StatisticsResponse,
    summary="Text Statistics",
    description="Average word and sentence length, unique words, longest word and top words.",
)
async def statistics_endpoint(request: StatisticsRequest) -> StatisticsResponse:
    stats, elapsed_ms = _run_analysis(
        "statistics",
        lambda: analyze_statistics(request.text, top_n=request.top_n),
    )
    return StatisticsResponse(statistics=stats, processing_time_ms=elapsed_ms)


@router.post(
    "/readability",
    response_model=ReadabilityResponse,
    summary="Readability Grades",
    description="Flesch-Kincaid grade, Coleman-Liau index and Flesch Reading Ease with labels.",
)
async def readability_endpoint(request: TextRequest) -> ReadabilityResponse:
    readability, elapsed_ms = _run_analysis(
        "readability",
        lambda: analyze_readability(request.text),
    )
    return ReadabilityResponse(readability=readability, processing_time_ms=elapsed_ms)


@router.post(
    "/reading-time",
    response_model=ReadingTimeResponse,
    summary="Reading Time",
    description="Rounded reading-time estimate from a word count or a text.",
)
async def reading_time_endpoint(request: ReadingTimeRequest) -> ReadingTimeResponse:
    word_count = request.word_count if request.word_count is not None else count_words(request.text)
    reading_time, elapsed_ms = _run_analysis(
        "reading_time",
        lambda: estimate_reading_time(word_count, request.words_per_minute),
    )
    return ReadingTimeResponse(
        word_count=word_count,
        reading_time=reading_time,
        processing_time_ms=elapsed_ms,
    )


@router.post(
    "/report",
    response_model=ReportResponse,
    summary="Full Text Report",
    description=(
        "Counts, statistics, readability and reading time in one call. "
        "Overflow is included when both limit_kind and limit_value are given."
    ),
)
async def report_endpoint(request: ReportRequest) -> ReportResponse:
    report, elapsed_ms = _run_analysis(
        "report",
        lambda: build_text_report(
            request.text,
            top_n=request.top_n,
            words_per_minute=request.words_per_minute,
            limit_kind=request.limit_kind,
            limit_value=request.limit_value,
        ),
    )
    logger.info(
        "Report built for %d words / %d characters in %.2f ms",
        report.counts.words,
        report.counts.characters,
        elapsed_ms,
    )
    return ReportResponse(report=report, processing_time_ms=elapsed_ms)


@router.get(
    "/health",
    summary="Health Check",
    description="Verify that the metrics endpoints are operational",
)
async def health_check():
    """Health check endpoint for metrics router"""
    return {
        "status": "healthy",
        "endpoints": [
            "/metrics/count",
            "/metrics/overflow",
            "/metrics/statistics",
            "/metrics/readability",
            "/metrics/reading-time",
            "/metrics/report",
        ],
    }
