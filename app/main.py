from fastapi import FastAPI, Depends, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from functools import lru_cache
import logging
from datetime import datetime

from app.schemas import AnalyzeRequest, AnalysisResponse
from data_pipeline.processors.sentiment_analyzer import BackendUninitializedError, create_sentiment_backend
from data_pipeline.scrapers.page_fetcher import FetchError
from scoring.pipeline import AnalysisError, ESGAnalyzer
from config import config

# Configure logging
logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO), format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"

# Create FastAPI app
app = FastAPI(
    title="ESG Content Analyzer API",
    description="ESG relevance, sentiment and controversy analysis for text and web pages",
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_analyzer() -> ESGAnalyzer:
    """
    Analyzer dependency for FastAPI endpoints, built once per process
    """
    backend = create_sentiment_backend(config.SENTIMENT_BACKEND)
    backend.load()
    logger.info(f"Using '{backend.name}' sentiment backend")
    return ESGAnalyzer(sentiment_backend=backend)


# Startup event
@app.on_event("startup")
async def startup_event():
    logger.info("Starting ESG Content Analyzer API...")
    get_analyzer()
    logger.info("ESG Content Analyzer API started successfully")


# Health check endpoint
@app.get("/health")
async def health_check(analyzer: ESGAnalyzer = Depends(get_analyzer)):
    """System health check"""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "sentiment_backend": analyzer.sentiment_backend.name,
        "version": VERSION
    }


# Root endpoint
@app.get("/")
async def root():
    """API root endpoint"""
    return {
        "message": "ESG Content Analyzer",
        "version": VERSION,
        "docs": "/docs",
        "health": "/health",
        "endpoints": {
            "analyze": "/analyze"
        }
    }


@app.post("/analyze", response_model=AnalysisResponse)
def analyze(request: AnalyzeRequest, analyzer: ESGAnalyzer = Depends(get_analyzer)):
    """Analyze raw text, or the text of a web page, for ESG content"""
    if request.text is None and not request.url:
        raise HTTPException(status_code=400, detail="URL or text is required")

    try:
        if request.text is not None:
            result = analyzer.analyze_text(request.text)
        else:
            result = analyzer.analyze_url(request.url)
        return result.to_dict()

    except FetchError as e:
        logger.warning(f"Fetch failed for {request.url}: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    except BackendUninitializedError as e:
        logger.error(f"Sentiment backend unavailable: {e}")
        raise HTTPException(status_code=503, detail="Sentiment backend not initialized")
    except AnalysisError as e:
        logger.error(f"Error analyzing content: {e.__cause__}")
        raise HTTPException(status_code=500, detail="Failed to analyze the content")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=config.API_HOST,
        port=config.API_PORT,
        reload=config.DEBUG
    )
