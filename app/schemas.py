from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    url: Optional[str] = None
    text: Optional[str] = None


class SentimentSchema(BaseModel):
    score: float = Field(ge=0.0, le=1.0)
    label: Literal["positive", "neutral", "negative"]
    confidence: float = Field(ge=0.0, le=1.0)


class ESGSentimentSchema(BaseModel):
    environmental: SentimentSchema
    social: SentimentSchema
    governance: SentimentSchema
    overall: SentimentSchema


class NegativeSnippetsSchema(BaseModel):
    environmental: List[str] = Field(default_factory=list, max_length=5)
    social: List[str] = Field(default_factory=list, max_length=5)
    governance: List[str] = Field(default_factory=list, max_length=5)


class AnalysisResponse(BaseModel):
    environmental: str
    social: str
    governance: str
    score: int = Field(ge=0, le=100)
    summary: str
    sentiment: ESGSentimentSchema
    negativeSnippets: NegativeSnippetsSchema
