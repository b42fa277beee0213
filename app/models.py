from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

POSITIVE = "positive"
NEGATIVE = "negative"
NEUTRAL = "neutral"

POSITIVE_THRESHOLD = 0.6
NEGATIVE_THRESHOLD = 0.4


class Category(Enum):
    ENVIRONMENTAL = "environmental"
    SOCIAL = "social"
    GOVERNANCE = "governance"

    @property
    def label(self) -> str:
        """Title-case name as used in the keyword tables"""
        return self.value.capitalize()


@dataclass(frozen=True)
class SentimentResult:
    score: float  # 0 to 1
    label: str  # "positive" | "negative" | "neutral"
    confidence: float  # 0 to 1

    @classmethod
    def from_score(cls, score: float) -> "SentimentResult":
        """
        Derive label and confidence from a raw backend score.
        Both thresholds are strict, so 0.6 and 0.4 stay neutral.
        """
        score = float(score)
        if score > POSITIVE_THRESHOLD:
            return cls(score=score, label=POSITIVE, confidence=score)
        if score < NEGATIVE_THRESHOLD:
            return cls(score=score, label=NEGATIVE, confidence=1 - score)
        return cls(score=score, label=NEUTRAL, confidence=0.5)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "label": self.label,
            "confidence": self.confidence
        }


@dataclass(frozen=True)
class ESGSentiment:
    environmental: SentimentResult
    social: SentimentResult
    governance: SentimentResult
    overall: SentimentResult

    def for_category(self, category: Category) -> SentimentResult:
        return getattr(self, category.value)

    def to_dict(self) -> dict:
        return {
            "environmental": self.environmental.to_dict(),
            "social": self.social.to_dict(),
            "governance": self.governance.to_dict(),
            "overall": self.overall.to_dict()
        }


@dataclass
class AnalysisResult:
    """Outcome of one text analysis. Built fresh per call, never cached."""

    relevance: Dict[Category, int]
    sentiment: ESGSentiment
    negative_snippets: Dict[Category, List[str]]
    score: int
    summary: str
    category_summaries: Dict[Category, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to the JSON response shape"""
        result = {
            category.value: self.category_summaries[category]
            for category in Category
        }
        result["score"] = self.score
        result["summary"] = self.summary
        result["sentiment"] = self.sentiment.to_dict()
        result["negativeSnippets"] = {
            category.value: list(self.negative_snippets[category])
            for category in Category
        }
        return result
