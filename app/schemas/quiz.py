from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Difficulty(str, Enum):
    """문제 난이도"""
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class QuizGenerateRequest(BaseModel):
    """문제 생성 요청 스키마 (프론트엔드 호환: camelCase 필드명 지원)"""
    source_text: str = Field(..., alias="sourceText", description="붙여넣은 텍스트 또는 PDF에서 추출한 텍스트")
    difficulty: Difficulty = Field(Difficulty.MEDIUM, description="난이도 (Easy | Medium | Hard)")
    question_count: int = Field(..., alias="questionCount", ge=1, le=50, description="문제 개수 (1-50)")

    model_config = ConfigDict(populate_by_name=True)  # alias와 원래 필드명 모두 허용


class PublicQuestion(BaseModel):
    """프론트엔드에 전달되는 문제 (선택지 셔플 완료)"""
    question: str
    options: list[str] = Field(..., min_length=4, max_length=4, description="선택지 4개 (셔플됨)")
    correct_option_index: int = Field(..., ge=0, le=3, description="셔플 후 정답 위치 (0-3)")
    explanation: str

    model_config = ConfigDict(frozen=True)


class QuizGenerateResponse(BaseModel):
    """문제 생성 응답 스키마"""
    questions: list[PublicQuestion]
    total: int
    failed_batches: int = Field(0, description="실패한 배치 수 (진단용)")
    repaired_items: int = Field(0, description="정답 위치를 찾지 못해 0번으로 보정한 문제 수 (진단용)")

    @model_validator(mode="after")
    def check_total(self) -> "QuizGenerateResponse":
        if self.total != len(self.questions):
            raise ValueError("total은 questions 개수와 같아야 합니다")
        return self
