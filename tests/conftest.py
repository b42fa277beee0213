"""
Shared fixtures for the ESG analyzer tests.
"""

import re
from types import MappingProxyType

import pytest

from app.models import Category
from scoring.lexicon import (
    INTENSIFIERS,
    NEGATIVE_INDICATORS,
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    Lexicon,
    build_lexicon,
)

EXAMPLE_TEXT = (
    "The company reports strong carbon emissions reduction and excellent diversity "
    "and inclusion training, but suffered a governance compliance violation and penalty."
)

@pytest.fixture
def example_text():
    return EXAMPLE_TEXT

@pytest.fixture
def lexicon():
    """Lexicon built from the configured keyword tables."""
    return build_lexicon()

@pytest.fixture
def small_lexicon():
    """Tiny keyword tables with hand-picked weights for exact score checks."""
    keywords = {
        Category.ENVIRONMENTAL: (("carbon", 1.5), ("water", 1.0), ("solar", 1.2), ("wind", 1.0)),
        Category.SOCIAL: (("human rights", 1.5), ("labor", 1.0)),
        Category.GOVERNANCE: (("board", 1.3), ("audit", 1.0)),
    }
    return Lexicon(
        keywords=MappingProxyType(keywords),
        positive_words=POSITIVE_WORDS,
        negative_words=NEGATIVE_WORDS,
        intensifiers=INTENSIFIERS,
        negative_indicators=NEGATIVE_INDICATORS,
        negative_indicator_pattern=re.compile(
            "|".join(re.escape(p) for p in NEGATIVE_INDICATORS), re.IGNORECASE
        ),
    )
