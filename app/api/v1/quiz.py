from fastapi import APIRouter, status

from app.schemas import quiz as quiz_schema
from app.services import quiz_generator, sample_quiz

router = APIRouter(prefix="/quiz", tags=["quiz"])


@router.post("/generate", response_model=quiz_schema.QuizGenerateResponse, status_code=status.HTTP_201_CREATED)
async def generate_quiz(request: quiz_schema.QuizGenerateRequest):
    """문제 생성 API (요청 개수를 정확히 반환하거나 에러)"""
    report = await quiz_generator.generate_quiz(request)
    return quiz_schema.QuizGenerateResponse(
        questions=report.questions,
        total=len(report.questions),
        failed_batches=len(report.failed_batches),
        repaired_items=report.repaired_items,
    )


@router.get("/sample", response_model=quiz_schema.QuizGenerateResponse)
async def get_sample_quiz():
    """데모 문제 조회 API"""
    questions = sample_quiz.get_sample_quiz()
    return quiz_schema.QuizGenerateResponse(questions=questions, total=len(questions))
