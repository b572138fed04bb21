from fastapi import APIRouter

from app.schemas import exam as exam_schema
from app.services import exam_service

router = APIRouter(prefix="/exam", tags=["exam"])


@router.post("/score", response_model=exam_schema.ExamResultResponse)
async def score_exam(request: exam_schema.ExamScoreRequest):
    """답안 채점 API"""
    return exam_service.score_exam(request)
