import re
from typing import List, Optional

from app.models import Category
from config import Config
from scoring.lexicon import Lexicon, get_lexicon

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")


def split_sentences(text: str) -> List[str]:
    """Split on runs of . ! ? and drop blank sentences, keeping surrounding spaces"""
    return [s for s in SENTENCE_BOUNDARY.split(text) if s.strip()]


class ESGProcessor:
    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon or get_lexicon()
        self.max_content_chars = Config.MAX_ESG_CONTENT_CHARS
        self.max_snippets = Config.MAX_NEGATIVE_SNIPPETS
        self.max_snippet_chars = Config.MAX_SNIPPET_CHARS
        self.min_snippet_chars = Config.MIN_SNIPPET_CHARS

    def _mentions_category(self, sentence_lower: str, category: Category) -> bool:
        return any(keyword in sentence_lower for keyword in self.lexicon.keywords_for(category))

    def extract_esg_content(self, text: str, category: Category) -> str:
        """Sentences mentioning the category, joined and cut to the content limit"""
        relevant = [
            sentence for sentence in split_sentences(text)
            if self._mentions_category(sentence.lower(), category)
        ]
        # Cut by characters, a sentence may end mid-way
        return ". ".join(relevant)[:self.max_content_chars]

    def find_negative_snippets(self, text: str, category: Category) -> List[str]:
        """
        First sentences, in document order, that mention the category together
        with a negative indicator such as "violation" or "non-compliance".
        """
        snippets = []
        pattern = self.lexicon.negative_indicator_pattern

        for sentence in split_sentences(text):
            if len(snippets) >= self.max_snippets:
                break

            if not self._mentions_category(sentence.lower(), category):
                continue
            if not pattern.search(sentence):
                continue

            snippet = sentence.strip()[:self.max_snippet_chars].strip()
            if len(snippet) > self.min_snippet_chars:
                snippets.append(snippet)

        return snippets
