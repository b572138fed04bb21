from app.services.ai_service import generate_quiz_batch
from app.services.exam_service import score_exam
from app.services.quiz_generator import (
    GenerationReport,
    QuizGenerator,
    generate_quiz,
    plan_batches,
)
from app.services.sample_quiz import get_sample_quiz

__all__ = [
    "generate_quiz_batch",
    "generate_quiz",
    "plan_batches",
    "GenerationReport",
    "QuizGenerator",
    "score_exam",
    "get_sample_quiz",
]
