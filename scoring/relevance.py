import re
import math
import logging
from typing import Dict, Optional

from app.models import Category
from scoring.lexicon import Lexicon, get_lexicon

logger = logging.getLogger(__name__)

MAX_RELEVANCE_SCORE = 100
FREQUENCY_SCALE = 1000


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class RelevanceScorer:
    """
    Weighted keyword relevance on a 0-100 scale.

    Each found keyword contributes term frequency * weight * 1000, and the sum
    is scaled by keyword coverage (found / total keywords in the category).
    """

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon or get_lexicon()

    def score(self, text: str, category: Category) -> int:
        """Relevance of text to a single ESG category"""
        text_lower = text.lower()
        total_words = len(text_lower.split())
        if total_words == 0:
            return 0

        keywords = self.lexicon.keywords[category]
        raw_score = 0.0
        found_keywords = 0

        for keyword, weight in keywords:
            # Substring count so multi-word keywords match across tokens
            count = len(re.findall(re.escape(keyword), text_lower))
            if count == 0:
                continue

            found_keywords += 1
            term_frequency = count / total_words
            raw_score += term_frequency * weight * FREQUENCY_SCALE

        if found_keywords == 0:
            return 0

        coverage = found_keywords / len(keywords)
        normalized_score = raw_score * coverage

        logger.debug(
            f"{category.value}: {found_keywords}/{len(keywords)} keywords, "
            f"raw={raw_score:.2f}, normalized={normalized_score:.2f}"
        )
        return min(round_half_up(normalized_score), MAX_RELEVANCE_SCORE)

    def score_all(self, text: str) -> Dict[Category, int]:
        return {category: self.score(text, category) for category in Category}
