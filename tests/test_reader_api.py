"""Tests for the reader API endpoints."""

import pytest


# =============================================================================
# POST /api/reader/prepare
# =============================================================================


class TestPrepareEndpoint:
    """Tests for text preparation."""

    def test_prepare_success(self, client):
        response = client.post(
            "/api/reader/prepare",
            json={"text": "Hello world. This is a test.", "chunk_size": 2},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["word_count"] == 6
        assert data["chunk_count"] == 3
        assert [r["text"] for r in data["records"]] == ["Hello world.", "This is", "a test."]

        first = data["records"][0]
        assert first["parts"][0] == {"before": "H", "orp": "e", "after": "llo"}
        assert first["word_count"] == 2
        assert first["max_length"] == 5
        assert first["html"].startswith('<span class="word-part">')

        assert data["wpm"] == 300
        assert data["durations_ms"] == [400, 200, 400]

    def test_prepare_wpm_clamped(self, client):
        response = client.post(
            "/api/reader/prepare",
            json={"text": "Hello world. This is a test.", "chunk_size": 2, "wpm": 5000},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["wpm"] == 1500
        assert data["durations_ms"] == [240, 40, 240]

    def test_prepare_defaults_to_single_words(self, client):
        response = client.post("/api/reader/prepare", json={"text": "one two three"})
        assert response.status_code == 200
        assert response.json()["chunk_count"] == 3

    def test_prepare_bionic(self, client):
        response = client.post(
            "/api/reader/prepare",
            json={"text": "Speed reading is fun.", "bionic_mode": True},
        )
        assert response.status_code == 200
        for record in response.json()["records"]:
            assert record["parts"] == []
            assert "bionic-bold" in record["html"]

    def test_prepare_plain(self, client):
        response = client.post(
            "/api/reader/prepare",
            json={"text": "a < b and c", "orp_enabled": False},
        )
        assert response.status_code == 200
        records = response.json()["records"]
        assert records[1]["html"] == '<span class="word-part word-plain">&lt;</span>'

    def test_prepare_escapes_markup(self, client):
        response = client.post(
            "/api/reader/prepare",
            json={"text": "<script>alert(1)</script> is not welcome here"},
        )
        assert response.status_code == 200
        for record in response.json()["records"]:
            assert "<script>" not in record["html"]

    def test_too_few_words(self, client):
        response = client.post("/api/reader/prepare", json={"text": "one two"})
        assert response.status_code == 422
        assert response.json()["detail"] == "Need at least 3 words"

    def test_whitespace_only(self, client):
        response = client.post("/api/reader/prepare", json={"text": "   "})
        assert response.status_code == 422
        assert response.json()["detail"] == "Need at least 3 words"

    @pytest.mark.parametrize(
        "payload",
        [{}, {"text": ""}, {"text": "one two three", "chunk_size": 0}],
    )
    def test_invalid_payload(self, client, payload):
        response = client.post("/api/reader/prepare", json=payload)
        assert response.status_code == 422


# =============================================================================
# Other Reader Endpoints
# =============================================================================


class TestStatsEndpoint:
    """Tests for reading statistics."""

    def test_stats(self, client):
        response = client.post(
            "/api/reader/stats",
            json={"text": "Hello world. This is a test.", "wpm": 300},
        )
        assert response.status_code == 200
        assert response.json() == {
            "word_count": 6,
            "char_count": 23,
            "sentence_count": 2,
            "avg_word_length": 3.8,
            "estimated_time_ms": 1200,
            "estimated_time_formatted": "0:01",
        }

    def test_stats_rejects_zero_wpm(self, client):
        response = client.post("/api/reader/stats", json={"text": "a b c", "wpm": 0})
        assert response.status_code == 422


class TestStripHtmlEndpoint:
    """Tests for HTML extraction."""

    def test_strip_html(self, client):
        response = client.post(
            "/api/reader/strip-html",
            json={"html": "<p>Hello &amp; world</p><script>track()</script>"},
        )
        assert response.status_code == 200
        assert response.json() == {"text": "Hello & world", "word_count": 3}

    def test_strip_empty(self, client):
        response = client.post("/api/reader/strip-html", json={"html": ""})
        assert response.status_code == 200
        assert response.json() == {"text": "", "word_count": 0}


class TestContextEndpoint:
    """Tests for context windows."""

    def test_context(self, client):
        response = client.post(
            "/api/reader/context",
            json={"text": "a b c d e", "index": 2, "context_size": 2},
        )
        assert response.status_code == 200
        assert response.json() == {"before": "a b", "current": "c", "after": "d e"}

    def test_context_index_clamped(self, client):
        response = client.post("/api/reader/context", json={"text": "a b c", "index": 10})
        assert response.status_code == 200
        assert response.json()["current"] == "c"

    def test_context_empty_text(self, client):
        response = client.post("/api/reader/context", json={"text": ""})
        assert response.status_code == 200
        assert response.json() == {"before": "", "current": "", "after": ""}
