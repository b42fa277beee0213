from typing import Dict, List

import numpy as np

from app.models import AnalysisResult, Category, ESGSentiment
from scoring.relevance import round_half_up

# (lower bound, overall summary, category summary template)
SCORE_TIERS = [
    (80, "Excellent ESG practices with comprehensive coverage across all areas.",
     "Strong {category} practices and comprehensive disclosure."),
    (60, "Good ESG implementation with room for improvement in some areas.",
     "Good {category} initiatives with some areas for improvement."),
    (40, "Moderate ESG practices. Significant improvement needed.",
     "Basic {category} considerations present but needs enhancement."),
    (0, "Limited ESG disclosure. Major improvements required across all areas.",
     "Limited {category} disclosure and practices identified."),
]


def _tier_for(score: float):
    for tier in SCORE_TIERS:
        if score >= tier[0]:
            return tier
    return SCORE_TIERS[-1]


class ESGScorer:
    def average_score(self, relevance: Dict[Category, int]) -> float:
        return float(np.mean([relevance[category] for category in Category]))

    def calculate_overall_score(self, relevance: Dict[Category, int]) -> int:
        """Mean of the three relevance scores, rounded"""
        return round_half_up(self.average_score(relevance))

    def generate_summary(self, relevance: Dict[Category, int]) -> str:
        """Qualitative summary from the unrounded mean score"""
        return _tier_for(self.average_score(relevance))[1]

    def generate_category_summary(self, category: Category, score: int) -> str:
        return _tier_for(score)[2].format(category=category.value)

    def build_result(self, relevance: Dict[Category, int], sentiment: ESGSentiment,
                     negative_snippets: Dict[Category, List[str]]) -> AnalysisResult:
        """Fold per-category figures into the final analysis result"""
        category_summaries = {
            category: f"Score: {relevance[category]}/100 - "
                      f"{self.generate_category_summary(category, relevance[category])}"
            for category in Category
        }

        return AnalysisResult(
            relevance=dict(relevance),
            sentiment=sentiment,
            negative_snippets={category: list(negative_snippets[category]) for category in Category},
            score=self.calculate_overall_score(relevance),
            summary=self.generate_summary(relevance),
            category_summaries=category_summaries
        )
