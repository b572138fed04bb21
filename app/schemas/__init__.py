from app.schemas.ai import (
    AICorrectAnswer,
    AIQuizGenerationRequest,
    AIQuizQuestion,
)
from app.schemas.exam import (
    ExamRecordResponse,
    ExamResultResponse,
    ExamScoreRequest,
)
from app.schemas.quiz import (
    Difficulty,
    PublicQuestion,
    QuizGenerateRequest,
    QuizGenerateResponse,
)

__all__ = [
    "Difficulty",
    "QuizGenerateRequest",
    "QuizGenerateResponse",
    "PublicQuestion",
    "ExamScoreRequest",
    "ExamRecordResponse",
    "ExamResultResponse",
    "AIQuizGenerationRequest",
    "AIQuizQuestion",
    "AICorrectAnswer",
]
