from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field


class AnalyzeSpeechRequest(BaseModel):
    """Request body for speech analysis"""
    transcript: str = Field(min_length=1)
    topic: Optional[str] = None
    mode: Optional[Literal["opinion", "storytelling"]] = None


class ErrorAnnotationDTO(BaseModel):
    type: Literal["grammar", "filler", "repetition", "clarity", "vocabulary", "fluency", "topic"]
    text: str
    suggestion: str
    position: Tuple[int, int]


class FeedbackDTO(BaseModel):
    strengths: List[str]
    improvements: List[str]
    errors: List[ErrorAnnotationDTO] = []


class AnalysisResponse(BaseModel):
    """Response format for speech analysis"""
    overall: int = Field(ge=1, le=10)
    vocabulary: int = Field(ge=1, le=10)
    fluency: int = Field(ge=1, le=10)
    confidence: int = Field(ge=1, le=10)
    clarity: int = Field(ge=1, le=10)
    grammar: int = Field(ge=1, le=10)
    topic_relevance: Optional[int] = Field(default=None, ge=1, le=10)
    transcript: str
    feedback: FeedbackDTO


class ModelStatus(BaseModel):
    model: str
    loaded: bool


class ModelList(BaseModel):
    object: str = "list"
    data: Dict[str, ModelStatus]


class HealthResponse(BaseModel):
    status: str = "ok"
    models: Dict[str, bool]
