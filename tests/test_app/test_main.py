"""
Tests for the HTTP API.
"""

from unittest.mock import Mock, patch

import pytest
from fastapi.testclient import TestClient

from app.main import app, get_analyzer
from data_pipeline.processors.sentiment_analyzer import LexiconSentimentAnalyzer, TextBlobSentimentAnalyzer
from data_pipeline.scrapers.page_fetcher import FetchError
from scoring.pipeline import ESGAnalyzer


@pytest.fixture
def fetcher():
    return Mock(return_value="The board approved a new anti-corruption policy after an audit failure.")


@pytest.fixture
def client(lexicon, fetcher):
    analyzer = ESGAnalyzer(sentiment_backend=LexiconSentimentAnalyzer(lexicon), fetcher=fetcher, lexicon=lexicon)
    app.dependency_overrides[get_analyzer] = lambda: analyzer
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root_and_health(client):
    assert client.get("/").json()["endpoints"]["analyze"] == "/analyze"

    health = client.get("/health").json()
    assert health["status"] == "healthy"
    assert "sentiment_backend" in health


def test_analyze_text(client, example_text):
    response = client.post("/analyze", json={"text": example_text})
    assert response.status_code == 200

    data = response.json()
    assert data["score"] == 24
    assert data["environmental"].startswith("Score: 18/100 - ")
    assert data["sentiment"]["overall"]["label"] in ("positive", "neutral", "negative")
    assert len(data["negativeSnippets"]["governance"]) == 1


def test_analyze_url(client, fetcher):
    response = client.post("/analyze", json={"url": "https://example.com/esg"})

    assert response.status_code == 200
    fetcher.assert_called_once_with("https://example.com/esg")
    assert response.json()["negativeSnippets"]["governance"]


def test_text_takes_precedence_over_url(client, fetcher):
    response = client.post("/analyze", json={"url": "https://example.com", "text": "carbon"})

    assert response.status_code == 200
    fetcher.assert_not_called()


def test_missing_source_rejected(client):
    response = client.post("/analyze", json={})
    assert response.status_code == 400


def test_fetch_error_returns_502(client, fetcher):
    fetcher.side_effect = FetchError("Failed to fetch https://example.com: timed out")

    response = client.post("/analyze", json={"url": "https://example.com"})

    assert response.status_code == 502
    assert "timed out" in response.json()["detail"]


def test_internal_error_returns_500(client):
    with patch("scoring.pipeline.ESGScorer.build_result", side_effect=KeyError("environmental")):
        response = client.post("/analyze", json={"text": "carbon emissions"})

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to analyze the content"


def test_uninitialized_backend_returns_503(lexicon):
    analyzer = ESGAnalyzer(sentiment_backend=TextBlobSentimentAnalyzer(), lexicon=lexicon)
    app.dependency_overrides[get_analyzer] = lambda: analyzer
    try:
        response = TestClient(app).post("/analyze", json={"text": "carbon"})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 503


def test_health_reports_active_backend(lexicon):
    analyzer = ESGAnalyzer(sentiment_backend=TextBlobSentimentAnalyzer(), lexicon=lexicon)
    app.dependency_overrides[get_analyzer] = lambda: analyzer
    try:
        health = TestClient(app).get("/health").json()
    finally:
        app.dependency_overrides.clear()

    assert health["sentiment_backend"] == "textblob"
