#!/usr/bin/env python3
"""
Command-line ESG analysis of a file, a web page or stdin
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import argparse
import json
import logging

from config import config
from data_pipeline.processors.sentiment_analyzer import BackendUninitializedError, create_sentiment_backend
from data_pipeline.scrapers.page_fetcher import FetchError
from scoring.pipeline import AnalysisError, ESGAnalyzer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ESG Content Analyzer")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--url", help="Analyze the text of a web page")
    source.add_argument("--file", help="Analyze a UTF-8 text file")
    parser.add_argument("--backend", default=config.SENTIMENT_BACKEND,
                        help="Sentiment backend: lexicon or textblob")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format=config.LOG_FORMAT,
        stream=sys.stderr
    )

    try:
        backend = create_sentiment_backend(args.backend)
        backend.load()
        analyzer = ESGAnalyzer(sentiment_backend=backend)

        if args.url:
            result = analyzer.analyze_url(args.url)
        else:
            if args.file:
                with open(args.file, encoding="utf-8") as f:
                    text = f.read()
            else:
                text = sys.stdin.read()
            result = analyzer.analyze_text(text)

    except (FetchError, AnalysisError, BackendUninitializedError, ValueError, OSError) as e:
        logger.error(f"Analysis failed: {e}")
        return 1

    print(json.dumps(result.to_dict(), indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
