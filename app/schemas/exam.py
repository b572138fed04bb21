from pydantic import BaseModel, Field

from app.schemas.quiz import PublicQuestion


class ExamScoreRequest(BaseModel):
    """채점 요청 스키마 (답안은 문제 순서대로, 미응답은 null)"""
    questions: list[PublicQuestion] = Field(..., min_length=1)
    answers: list[int | None] = Field(..., description="문제별 사용자 답안 인덱스 (미응답: null)")


class ExamRecordResponse(BaseModel):
    """문제별 채점 결과"""
    question_index: int
    question: str
    user_answer: int | None
    correct_option_index: int
    is_correct: bool
    explanation: str


class ExamResultResponse(BaseModel):
    """시험 결과 응답 스키마"""
    total_questions: int
    correct_count: int
    incorrect_count: int
    unanswered_count: int
    score: float = Field(..., description="정답률 (%, 소수점 둘째 자리)")
    records: list[ExamRecordResponse]
