import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Tuple

from app.models import AnalysisResult, Category
from data_pipeline.processors.nlp_processor import ESGProcessor
from data_pipeline.processors.sentiment_analyzer import (
    BackendUninitializedError,
    SentimentBackend,
    create_sentiment_backend,
)
from data_pipeline.scrapers.page_fetcher import FetchError, fetch
from scoring.esg_scorer import ESGScorer
from scoring.lexicon import Lexicon, get_lexicon
from scoring.relevance import RelevanceScorer

logger = logging.getLogger(__name__)


class AnalysisError(Exception):
    """Generic analysis failure; the cause is chained"""


class ESGAnalyzer:
    """
    Runs relevance scoring, content extraction, snippet mining and sentiment
    for one piece of text. Holds no per-request state.
    """

    def __init__(
        self,
        sentiment_backend: Optional[SentimentBackend] = None,
        fetcher: Optional[Callable[[str], str]] = None,
        lexicon: Optional[Lexicon] = None
    ):
        self.lexicon = lexicon or get_lexicon()
        self.relevance_scorer = RelevanceScorer(self.lexicon)
        self.processor = ESGProcessor(self.lexicon)
        self.scorer = ESGScorer()
        self.sentiment_backend = sentiment_backend or create_sentiment_backend()
        self.fetcher = fetcher or fetch

    def _analyze_category(self, text: str, category: Category) -> Tuple[int, str, List[str]]:
        return (
            self.relevance_scorer.score(text, category),
            self.processor.extract_esg_content(text, category),
            self.processor.find_negative_snippets(text, category),
        )

    def analyze_text(self, text: str) -> AnalysisResult:
        """Analyze plain text against all three ESG categories"""
        try:
            with ThreadPoolExecutor(max_workers=len(Category)) as executor:
                futures = {
                    category: executor.submit(self._analyze_category, text, category)
                    for category in Category
                }
                per_category = {category: future.result() for category, future in futures.items()}

            relevance = {category: result[0] for category, result in per_category.items()}
            content = {category: result[1] for category, result in per_category.items()}
            snippets = {category: result[2] for category, result in per_category.items()}

            sentiment = self.sentiment_backend.analyze_esg(
                content[Category.ENVIRONMENTAL],
                content[Category.SOCIAL],
                content[Category.GOVERNANCE]
            )

            result = self.scorer.build_result(relevance, sentiment, snippets)
            logger.info(f"Analysis complete: score={result.score}, sentiment={sentiment.overall.label}")
            return result

        except BackendUninitializedError:
            raise
        except Exception as e:
            logger.error(f"Error analyzing content: {e}")
            raise AnalysisError("Failed to analyze the content") from e

    def analyze_url(self, url: str) -> AnalysisResult:
        """Fetch a page and analyze its text; FetchError propagates unchanged"""
        try:
            text = self.fetcher(url)
        except FetchError:
            raise
        except Exception as e:
            logger.error(f"Error extracting text from {url}: {e}")
            raise AnalysisError("Failed to analyze the content") from e

        return self.analyze_text(text)
