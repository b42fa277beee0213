"""
Sentiment backends for ESG content.

Two interchangeable backends satisfy the same contract (``load``, ``analyze``,
``analyze_esg``): the rule-based lexicon analyzer and a TextBlob polarity
analyzer. Both map their raw 0-1 score to a label through
``SentimentResult.from_score`` so thresholds stay identical across backends.
"""
import re
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, List, Optional, Protocol

import numpy as np
from textblob import TextBlob
from textblob.sentiments import PatternAnalyzer

from app.models import ESGSentiment, SentimentResult
from config import Config
from scoring.lexicon import Lexicon, get_lexicon

logger = logging.getLogger(__name__)

NEUTRAL_SCORE = 0.5
INTENSIFIER_BONUS = 0.5
INTENSIFIER_STEP = 0.1
MAX_INTENSITY_MULTIPLIER = 1.5

NON_WORD = re.compile(r"[^\w\s]")


class BackendUninitializedError(RuntimeError):
    """Raised when a sentiment backend is used before load()"""


class SentimentBackend(Protocol):
    name: str

    def load(self) -> None: ...

    def analyze(self, text: str) -> SentimentResult: ...

    def analyze_esg(self, environmental_text: str, social_text: str, governance_text: str) -> ESGSentiment: ...


def combine_sentiments(environmental: SentimentResult, social: SentimentResult,
                       governance: SentimentResult) -> ESGSentiment:
    """
    Fold three category sentiments into an overall one.

    The overall label comes from the mean score run through the usual
    thresholds, not from a vote over the three labels.
    """
    results = [environmental, social, governance]
    mean_score = float(np.mean([r.score for r in results]))
    mean_confidence = float(np.mean([r.confidence for r in results]))
    label = SentimentResult.from_score(mean_score).label

    return ESGSentiment(
        environmental=environmental,
        social=social,
        governance=governance,
        overall=SentimentResult(score=mean_score, label=label, confidence=mean_confidence)
    )


def analyze_esg_concurrently(analyze: Callable[[str], SentimentResult], environmental_text: str,
                             social_text: str, governance_text: str) -> ESGSentiment:
    """Run the three category analyses in parallel and combine them"""
    with ThreadPoolExecutor(max_workers=3) as executor:
        env_future = executor.submit(analyze, environmental_text)
        social_future = executor.submit(analyze, social_text)
        gov_future = executor.submit(analyze, governance_text)

        return combine_sentiments(env_future.result(), social_future.result(), gov_future.result())


class LexiconSentimentAnalyzer:
    """Rule-based scorer over positive, negative and intensifier word lists"""

    name = "lexicon"

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon or get_lexicon()

    def load(self) -> None:
        """Nothing to load, the lexicon is built with the analyzer"""

    def preprocess_text(self, text: str) -> List[str]:
        return [word for word in NON_WORD.sub(" ", text.lower()).split() if word]

    def calculate_sentiment_score(self, words: List[str]) -> float:
        positive_score = 0.0
        negative_score = 0.0
        intensifier_count = 0

        for i, word in enumerate(words):
            next_word = words[i + 1] if i + 1 < len(words) else None
            boosted = next_word is not None and next_word in self.lexicon.intensifiers

            if word in self.lexicon.positive_words:
                positive_score += 1
                if boosted:
                    positive_score += INTENSIFIER_BONUS
                    intensifier_count += 1
            elif word in self.lexicon.negative_words:
                negative_score += 1
                if boosted:
                    negative_score += INTENSIFIER_BONUS
                    intensifier_count += 1
            elif word in self.lexicon.intensifiers:
                # Counted again even when it boosted the previous word
                intensifier_count += 1

        total_score = positive_score + negative_score
        if total_score == 0:
            return NEUTRAL_SCORE

        sentiment_ratio = positive_score / total_score
        intensity_multiplier = min(1 + intensifier_count * INTENSIFIER_STEP, MAX_INTENSITY_MULTIPLIER)
        return min(max(sentiment_ratio * intensity_multiplier, 0.0), 1.0)

    def analyze(self, text: str) -> SentimentResult:
        words = self.preprocess_text(text)
        return SentimentResult.from_score(self.calculate_sentiment_score(words))

    def analyze_esg(self, environmental_text: str, social_text: str, governance_text: str) -> ESGSentiment:
        return analyze_esg_concurrently(self.analyze, environmental_text, social_text, governance_text)


class TextBlobSentimentAnalyzer:
    """TextBlob pattern polarity, rescaled from [-1, 1] to [0, 1]"""

    name = "textblob"

    def __init__(self):
        self._analyzer = None

    @property
    def is_loaded(self) -> bool:
        return self._analyzer is not None

    def load(self) -> None:
        if self._analyzer is None:
            self._analyzer = PatternAnalyzer()
            logger.info("TextBlob sentiment backend loaded")

    def analyze(self, text: str) -> SentimentResult:
        if self._analyzer is None:
            raise BackendUninitializedError("TextBlob backend not loaded. Call load() first.")

        if not text.strip():
            return SentimentResult.from_score(NEUTRAL_SCORE)

        polarity = TextBlob(text, analyzer=self._analyzer).sentiment.polarity
        score = (polarity + 1) / 2  # Convert -1,1 to 0,1
        return SentimentResult.from_score(min(max(score, 0.0), 1.0))

    def analyze_esg(self, environmental_text: str, social_text: str, governance_text: str) -> ESGSentiment:
        if self._analyzer is None:
            raise BackendUninitializedError("TextBlob backend not loaded. Call load() first.")
        return analyze_esg_concurrently(self.analyze, environmental_text, social_text, governance_text)


SENTIMENT_BACKENDS: Dict[str, Callable[[], SentimentBackend]] = {
    "lexicon": LexiconSentimentAnalyzer,
    "textblob": TextBlobSentimentAnalyzer,
}


def create_sentiment_backend(name: Optional[str] = None) -> SentimentBackend:
    """Instantiate the configured backend; callers must load() it before use"""
    name = (name or Config.SENTIMENT_BACKEND).lower()
    if name not in SENTIMENT_BACKENDS:
        raise ValueError(f"Unknown sentiment backend '{name}'. Choose from {sorted(SENTIMENT_BACKENDS)}")
    return SENTIMENT_BACKENDS[name]()
