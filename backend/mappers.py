"""Domain <-> DTO mappers.

Converts AnalysisResult (domain) into the AnalysisResponse DTO returned by
the API.
"""

from domain.models import AnalysisResult, ErrorAnnotation, Feedback
from models import AnalysisResponse, ErrorAnnotationDTO, FeedbackDTO


def error_to_dto(error: ErrorAnnotation) -> ErrorAnnotationDTO:
    return ErrorAnnotationDTO(
        type=error.type,
        text=error.text,
        suggestion=error.suggestion,
        position=error.position,
    )


def feedback_to_dto(feedback: Feedback) -> FeedbackDTO:
    return FeedbackDTO(
        strengths=list(feedback.strengths),
        improvements=list(feedback.improvements),
        errors=[error_to_dto(e) for e in feedback.errors],
    )


def result_to_dto(result: AnalysisResult) -> AnalysisResponse:
    """Convert a domain AnalysisResult to the flat response DTO."""
    return AnalysisResponse(
        overall=result.overall,
        vocabulary=result.vocabulary,
        fluency=result.fluency,
        confidence=result.confidence,
        clarity=result.clarity,
        grammar=result.grammar,
        topic_relevance=result.topic_relevance,
        transcript=result.transcript,
        feedback=feedback_to_dto(result.feedback),
    )
