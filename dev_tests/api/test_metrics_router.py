"""
Tests for the metrics API endpoints.

Test Categories:
1. Counting and overflow (editing surface)
2. Statistics, readability and reading time (details panel)
3. Aggregate report and health
4. Validation errors
"""

import pytest
from fastapi.testclient import TestClient

from config import config
from main import create_app


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def client():
    """TestClient over a fresh application instance."""
    return TestClient(create_app())


# ============================================================================
# Counting and overflow
# ============================================================================

class TestCountEndpoint:

    def test_counts_text(self, client):
        """Given: Two short sentences, Then: All counters returned"""
        response = client.post("/metrics/count", json={"text": "Hello world. Bye."})
        assert response.status_code == 200
        data = response.json()
        assert data["counts"] == {
            "words": 3,
            "characters": 17,
            "characters_no_spaces": 15,
            "paragraphs": 1,
            "sentences": 2,
        }
        assert data["processing_time_ms"] >= 0

    def test_empty_text(self, client):
        """Given: Empty text, Then: Zero counts"""
        response = client.post("/metrics/count", json={"text": ""})
        assert response.status_code == 200
        assert response.json()["counts"]["sentences"] == 0

    def test_text_too_long(self, client):
        """Given: Text over MAX_TEXT_LENGTH, Then: 422"""
        response = client.post("/metrics/count", json={"text": "a" * (config.MAX_TEXT_LENGTH + 1)})
        assert response.status_code == 422


class TestOverflowEndpoint:

    def test_word_overflow(self, client):
        """Given: Three words with limit 2, Then: Boundary at "ccc" """
        response = client.post(
            "/metrics/overflow",
            json={"text": "aaa bbb ccc", "limit_kind": "words", "limit_value": 2},
        )
        assert response.status_code == 200
        assert response.json()["overflow"] == {
            "is_over": True,
            "overflow_amount": 1,
            "boundary_char_index": 8,
        }

    def test_within_limit(self, client):
        """Given: Under the limit, Then: Boundary at text length"""
        response = client.post(
            "/metrics/overflow",
            json={"text": "First.\n\nSecond.", "limit_kind": "paragraphs", "limit_value": 5},
        )
        assert response.json()["overflow"] == {
            "is_over": False,
            "overflow_amount": 0,
            "boundary_char_index": 15,
        }

    def test_unknown_limit_kind(self, client):
        """Given: Unsupported limit kind, Then: 422"""
        response = client.post(
            "/metrics/overflow",
            json={"text": "aaa", "limit_kind": "lines", "limit_value": 1},
        )
        assert response.status_code == 422

    def test_negative_limit(self, client):
        """Given: Negative limit, Then: 422"""
        response = client.post(
            "/metrics/overflow",
            json={"text": "aaa", "limit_kind": "words", "limit_value": -1},
        )
        assert response.status_code == 422


# ============================================================================
# Details panel
# ============================================================================

class TestStatisticsEndpoint:

    def test_statistics(self, client):
        """Given: Repeated words, Then: Top words ranked"""
        response = client.post(
            "/metrics/statistics",
            json={"text": "apple banana apple cherry banana apple", "top_n": 2},
        )
        assert response.status_code == 200
        stats = response.json()["statistics"]
        assert stats["top_words"] == [
            {"word": "apple", "count": 3},
            {"word": "banana", "count": 2},
        ]
        assert stats["longest_word"] == {"word": "banana", "length": 6}
        assert stats["unique_word_count"] == 3

    def test_top_n_out_of_range(self, client):
        """Given: top_n above 100, Then: 422"""
        response = client.post("/metrics/statistics", json={"text": "a", "top_n": 101})
        assert response.status_code == 422


class TestReadabilityEndpoint:

    def test_readability(self, client, known_grade_12):
        """Given: Academic text, Then: All three scores labeled"""
        response = client.post("/metrics/readability", json={"text": known_grade_12})
        assert response.status_code == 200
        readability = response.json()["readability"]
        assert readability["flesch_kincaid"]["label"].startswith("Grade ")
        assert readability["coleman_liau"]["label"].startswith("Grade ")
        assert readability["flesch_reading_ease"]["label"]

    def test_empty_text_returns_null(self, client):
        """Given: Empty text, Then: readability is null"""
        response = client.post("/metrics/readability", json={"text": ""})
        assert response.status_code == 200
        assert response.json()["readability"] is None


class TestReadingTimeEndpoint:

    def test_from_word_count(self, client):
        """Given: 500 words, Then: ~2 min read"""
        response = client.post("/metrics/reading-time", json={"word_count": 500})
        assert response.status_code == 200
        data = response.json()
        assert data["word_count"] == 500
        assert data["reading_time"] == {"minutes": 2, "label": "~2 min read"}

    def test_from_text(self, client):
        """Given: Text only, Then: Words counted from text"""
        response = client.post("/metrics/reading-time", json={"text": "one two three"})
        data = response.json()
        assert data["word_count"] == 3
        assert data["reading_time"]["label"] == "< 1 min read"

    def test_missing_word_source(self, client):
        """Given: Neither word_count nor text, Then: 422"""
        response = client.post("/metrics/reading-time", json={})
        assert response.status_code == 422

    def test_invalid_speed(self, client):
        """Given: words_per_minute 0, Then: 422 with message"""
        response = client.post("/metrics/reading-time", json={"word_count": 10, "words_per_minute": 0})
        assert response.status_code == 422
        assert "words_per_minute" in response.json()["detail"]

    def test_invalid_speed_with_no_words(self, client):
        """Given: No words and wpm 0, Then: Zero minutes"""
        response = client.post("/metrics/reading-time", json={"word_count": 0, "words_per_minute": 0})
        assert response.status_code == 200
        assert response.json()["reading_time"]["minutes"] == 0


# ============================================================================
# Report and health
# ============================================================================

class TestReportEndpoint:

    def test_report_without_limit(self, client, long_text):
        """Given: Text only, Then: All sections except overflow"""
        response = client.post("/metrics/report", json={"text": long_text})
        assert response.status_code == 200
        report = response.json()["report"]
        assert report["counts"]["paragraphs"] == 4
        assert report["readability"] is not None
        assert report["overflow"] is None

    def test_report_with_limit(self, client):
        """Given: Character limit, Then: Overflow included"""
        response = client.post(
            "/metrics/report",
            json={"text": "Hello world.", "limit_kind": "characters", "limit_value": 5},
        )
        overflow = response.json()["report"]["overflow"]
        assert overflow == {"is_over": True, "overflow_amount": 7, "boundary_char_index": 5}

    def test_report_invalid_speed(self, client):
        """Given: words_per_minute 0, Then: 422"""
        response = client.post("/metrics/report", json={"text": "Some words.", "words_per_minute": 0})
        assert response.status_code == 422


class TestHealth:

    def test_health(self, client):
        """Given: GET /metrics/health, Then: Healthy with endpoint list"""
        response = client.get("/metrics/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "/metrics/report" in data["endpoints"]

    def test_root(self, client):
        """Given: GET /, Then: Service name"""
        assert client.get("/").json()["service"] == "text-metrics"
