"""
Tests for the end-to-end analysis pipeline.
"""

import json
from unittest.mock import Mock, patch

import pytest

from app.models import Category
from data_pipeline.processors.sentiment_analyzer import (
    BackendUninitializedError,
    LexiconSentimentAnalyzer,
    TextBlobSentimentAnalyzer,
)
from data_pipeline.scrapers.page_fetcher import FetchError
from scoring.pipeline import AnalysisError, ESGAnalyzer


@pytest.fixture
def analyzer(lexicon):
    return ESGAnalyzer(sentiment_backend=LexiconSentimentAnalyzer(lexicon), lexicon=lexicon)


def test_example_text(analyzer, example_text):
    result = analyzer.analyze_text(example_text)

    assert result.relevance[Category.ENVIRONMENTAL] > 0
    assert result.relevance[Category.SOCIAL] > 0
    assert result.score == 24
    assert result.summary.startswith("Limited")

    governance_snippets = result.negative_snippets[Category.GOVERNANCE]
    assert len(governance_snippets) == 1
    assert "violation" in governance_snippets[0] or "penalty" in governance_snippets[0]

    # 6 positive words against violation and penalty
    assert result.sentiment.governance.score == pytest.approx(0.75)
    assert result.sentiment.governance.label == "positive"


def test_empty_text_degrades_gracefully(analyzer):
    result = analyzer.analyze_text("")

    assert result.score == 0
    assert all(score == 0 for score in result.relevance.values())
    assert result.sentiment.overall.label == "neutral"
    assert result.sentiment.overall.score == 0.5
    assert all(snippets == [] for snippets in result.negative_snippets.values())


def test_analysis_is_idempotent(analyzer, example_text):
    first = json.dumps(analyzer.analyze_text(example_text).to_dict(), sort_keys=True)
    second = json.dumps(analyzer.analyze_text(example_text).to_dict(), sort_keys=True)
    assert first == second


def test_unexpected_fault_is_wrapped(analyzer):
    with patch.object(analyzer.relevance_scorer, "score", side_effect=RuntimeError("boom")):
        with pytest.raises(AnalysisError) as exc_info:
            analyzer.analyze_text("carbon emissions")

    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_uninitialized_backend_fails_fast(lexicon):
    analyzer = ESGAnalyzer(sentiment_backend=TextBlobSentimentAnalyzer(), lexicon=lexicon)

    with pytest.raises(BackendUninitializedError):
        analyzer.analyze_text("carbon emissions rose")


def test_analyze_url_uses_fetcher(lexicon, example_text):
    fetcher = Mock(return_value=example_text)
    analyzer = ESGAnalyzer(sentiment_backend=LexiconSentimentAnalyzer(lexicon), fetcher=fetcher, lexicon=lexicon)

    result = analyzer.analyze_url("https://example.com/report")

    fetcher.assert_called_once_with("https://example.com/report")
    assert result.score == 24


def test_fetch_error_propagates_unchanged(lexicon):
    error = FetchError("Failed to fetch https://example.com: 404")
    analyzer = ESGAnalyzer(
        sentiment_backend=LexiconSentimentAnalyzer(lexicon),
        fetcher=Mock(side_effect=error),
        lexicon=lexicon
    )

    with pytest.raises(FetchError) as exc_info:
        analyzer.analyze_url("https://example.com")

    assert exc_info.value is error


def test_unexpected_fetcher_fault_is_wrapped(lexicon):
    analyzer = ESGAnalyzer(
        sentiment_backend=LexiconSentimentAnalyzer(lexicon),
        fetcher=Mock(side_effect=AttributeError("'NoneType' object has no attribute 'get_text'")),
        lexicon=lexicon
    )

    with pytest.raises(AnalysisError) as exc_info:
        analyzer.analyze_url("https://example.com")

    assert isinstance(exc_info.value.__cause__, AttributeError)
