import re
import logging
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

from app.models import Category
from config import Config

logger = logging.getLogger(__name__)

DEFAULT_KEYWORD_WEIGHT = 1.0
MAX_KEYWORD_WEIGHT = 1.5

# Sentiment scoring vocabulary
POSITIVE_WORDS = frozenset([
    'commitment', 'excellence', 'strong', 'improve', 'increase', 'achieve',
    'innovation', 'transparency', 'accountability', 'sustainability',
    'renewable', 'diversity', 'inclusion', 'engagement', 'development',
    'training', 'safety', 'rights', 'equality', 'fairness', 'justice',
    'award', 'recognition', 'certification', 'standard', 'benchmark',
    'goal', 'objective', 'strategy', 'initiative', 'program', 'project',
    'investment', 'funding', 'saving', 'efficiency', 'performance',
    'metric', 'kpi', 'indicator', 'measure', 'assessment', 'audit',
    'review', 'evaluation', 'analysis', 'report', 'disclosure',
    'communication', 'stakeholder', 'shareholder', 'investor', 'customer',
    'employee', 'supplier', 'partner', 'community', 'society',
    'leadership', 'team', 'organization', 'company', 'corporation',
    'enterprise', 'business', 'industry', 'sector', 'market', 'economy',
    'global', 'local', 'regional', 'national', 'international',
    'worldwide', 'world', 'planet', 'earth', 'future', 'present',
    'legacy', 'heritage', 'tradition', 'culture', 'value', 'principle',
    'belief', 'mission', 'vision', 'purpose', 'success', 'growth',
    'progress', 'advancement', 'enhancement', 'optimization', 'maximization',
    'minimization', 'reduction', 'elimination', 'prevention', 'protection',
    'conservation', 'preservation', 'restoration', 'rehabilitation',
    'empowerment', 'enablement', 'facilitation', 'support', 'assistance',
    'collaboration', 'cooperation', 'partnership', 'alliance', 'network',
    'integration', 'coordination', 'alignment', 'harmonization', 'unification'
])

NEGATIVE_WORDS = frozenset([
    'failure', 'decline', 'decrease', 'violation', 'penalty', 'fine',
    'corruption', 'fraud', 'misconduct', 'non-compliance', 'breach',
    'negligence', 'irresponsibility', 'unethical', 'unlawful', 'illegal',
    'harmful', 'damaging', 'destructive', 'polluting', 'contaminating',
    'wasting', 'inefficient', 'ineffective', 'inadequate', 'insufficient',
    'deficient', 'weak', 'poor', 'bad', 'negative', 'problematic',
    'concerning', 'worrisome', 'troubling', 'alarming', 'disturbing',
    'disappointing', 'unsatisfactory', 'substandard', 'below', 'under',
    'lack', 'absence', 'missing', 'omitted', 'ignored', 'overlooked',
    'neglected', 'abandoned', 'discarded', 'rejected', 'denied',
    'refused', 'blocked', 'prevented', 'hindered', 'obstructed',
    'impeded', 'delayed', 'postponed', 'cancelled', 'terminated',
    'discontinued', 'suspended', 'banned', 'prohibited', 'restricted',
    'limited', 'constrained', 'reduced', 'cut', 'slashed', 'eliminated',
    'removed', 'withdrawn', 'retracted', 'recalled', 'recanted'
])

INTENSIFIERS = frozenset([
    'very', 'extremely', 'highly', 'significantly', 'substantially',
    'considerably', 'greatly', 'massively', 'enormously', 'tremendously',
    'exceptionally', 'outstandingly', 'remarkably', 'notably', 'particularly',
    'especially', 'specifically', 'exclusively', 'completely', 'totally',
    'absolutely', 'entirely', 'thoroughly', 'comprehensively', 'extensively',
    'intensively', 'aggressively', 'proactively', 'actively', 'dynamically',
    'vigorously', 'energetically', 'enthusiastically', 'passionately',
    'dedicatedly', 'committedly', 'devotedly', 'loyally', 'faithfully',
    'reliably', 'consistently', 'steadily', 'continuously', 'persistently',
    'determinedly', 'resolutely', 'firmly', 'strongly', 'robustly',
    'solidly', 'securely', 'safely', 'confidently', 'assuredly'
])

# Controversy vocabulary for snippet mining; kept separate from NEGATIVE_WORDS
NEGATIVE_INDICATORS = (
    'failure', 'failed', 'failing', 'violation', 'violated', 'non-compliance',
    'noncompliance', 'penalty', 'penalties', 'fined', 'fines', 'lawsuit',
    'litigation', 'scandal', 'controversy', 'breach', 'fraud', 'corruption',
    'bribery', 'misconduct', 'negligence', 'illegal', 'unlawful', 'unethical',
    'spill', 'leak', 'contamination', 'contaminated', 'toxic', 'polluting',
    'accident', 'fatality', 'fatalities', 'injury', 'injuries', 'death',
    'discrimination', 'harassment', 'child labor', 'forced labor', 'strike',
    'protest', 'layoff', 'recall', 'investigation', 'sanction', 'allegation',
    'misleading', 'greenwashing', 'deficiency', 'inadequate', 'insufficient',
    'lack of', 'decline', 'damage', 'harmful', 'poor', 'weak', 'concern'
)


class LexiconConfigError(ValueError):
    """Raised when the keyword tables are malformed"""


@dataclass(frozen=True)
class Lexicon:
    keywords: Mapping[Category, Tuple[Tuple[str, float], ...]]
    positive_words: FrozenSet[str]
    negative_words: FrozenSet[str]
    intensifiers: FrozenSet[str]
    negative_indicators: Tuple[str, ...]
    negative_indicator_pattern: re.Pattern

    def keywords_for(self, category: Category) -> Tuple[str, ...]:
        return tuple(keyword for keyword, _ in self.keywords[category])


def _build_keyword_table(category: Category) -> Tuple[Tuple[str, float], ...]:
    keywords = Config.ESG_KEYWORDS.get(category.label, [])
    if not keywords:
        raise LexiconConfigError(f"No keywords configured for {category.label}")

    table = []
    for keyword in keywords:
        weight = Config.KEYWORD_WEIGHTS.get(keyword, DEFAULT_KEYWORD_WEIGHT)
        if keyword in Config.KEYWORD_WEIGHTS and not DEFAULT_KEYWORD_WEIGHT < weight <= MAX_KEYWORD_WEIGHT:
            raise LexiconConfigError(
                f"Weight {weight} for '{keyword}' outside ({DEFAULT_KEYWORD_WEIGHT}, {MAX_KEYWORD_WEIGHT}]"
            )
        table.append((keyword.lower(), weight))
    return tuple(table)


def build_lexicon() -> Lexicon:
    """Build the keyword and sentiment tables from configuration"""
    keywords = {category: _build_keyword_table(category) for category in Category}
    pattern = re.compile(
        "|".join(re.escape(phrase) for phrase in NEGATIVE_INDICATORS),
        re.IGNORECASE
    )

    lexicon = Lexicon(
        keywords=MappingProxyType(keywords),
        positive_words=POSITIVE_WORDS,
        negative_words=NEGATIVE_WORDS,
        intensifiers=INTENSIFIERS,
        negative_indicators=NEGATIVE_INDICATORS,
        negative_indicator_pattern=pattern
    )
    logger.info(
        f"Lexicon built: {sum(len(v) for v in keywords.values())} keywords, "
        f"{len(NEGATIVE_INDICATORS)} negative indicators"
    )
    return lexicon


@lru_cache(maxsize=1)
def get_lexicon() -> Lexicon:
    """Process-wide read-only lexicon, built on first use"""
    return build_lexicon()
