import os
from typing import Dict, List
from dotenv import load_dotenv

load_dotenv()

class Config:
    # API Configuration
    API_HOST = os.getenv("API_HOST", "0.0.0.0")
    API_PORT = int(os.getenv("API_PORT", "8000"))
    DEBUG = os.getenv("DEBUG", "False").lower() == "true"
    API_URL = os.getenv("API_URL", "http://localhost:8000")

    # Sentiment backend: "lexicon" or "textblob"
    SENTIMENT_BACKEND = os.getenv("SENTIMENT_BACKEND", "lexicon").lower()

    # Page fetching
    FETCH_TIMEOUT = int(os.getenv("FETCH_TIMEOUT", "30"))
    USER_AGENT = os.getenv(
        "USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 ESG-Content-Analyzer/1.0"
    )

    # Content Processing
    MAX_ESG_CONTENT_CHARS = 1000
    MAX_NEGATIVE_SNIPPETS = 5
    MAX_SNIPPET_CHARS = 200
    MIN_SNIPPET_CHARS = 20

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # ESG Keywords for Classification, in scoring order
    ESG_KEYWORDS: Dict[str, List[str]] = {
        "Environmental": [
            "climate", "carbon", "emissions", "renewable", "energy", "waste", "recycling",
            "sustainability", "environmental", "green", "pollution", "conservation",
            "biodiversity", "water", "footprint"
        ],
        "Social": [
            "diversity", "inclusion", "employee", "community", "health", "safety",
            "human rights", "labor", "training", "development", "equality", "workplace",
            "social responsibility", "stakeholder", "engagement"
        ],
        "Governance": [
            "board", "compliance", "transparency", "ethics", "risk", "management",
            "accountability", "shareholder", "audit", "compensation", "disclosure",
            "policy", "regulation", "corruption", "governance"
        ]
    }

    # Relevance weights in (1.0, 1.5]; keywords not listed weigh 1.0
    KEYWORD_WEIGHTS: Dict[str, float] = {
        # Environmental
        "climate": 1.5, "carbon": 1.5, "emissions": 1.4, "renewable": 1.3,
        "sustainability": 1.3, "pollution": 1.4, "biodiversity": 1.2,
        "environmental": 1.2, "footprint": 1.2, "waste": 1.1,
        # Social
        "human rights": 1.5, "social responsibility": 1.5, "diversity": 1.4,
        "inclusion": 1.4, "safety": 1.3, "equality": 1.3, "labor": 1.2,
        "community": 1.1,
        # Governance
        "governance": 1.5, "corruption": 1.5, "compliance": 1.4, "transparency": 1.4,
        "board": 1.3, "ethics": 1.3, "accountability": 1.3, "audit": 1.2,
        "disclosure": 1.2, "shareholder": 1.1
    }

# Create config instance
config = Config()
