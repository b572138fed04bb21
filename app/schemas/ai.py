from pydantic import BaseModel, Field


class AIQuizGenerationRequest(BaseModel):
    """AI 문제 생성 요청 스키마 (내부 사용, 배치 1개 단위)"""
    source_text: str = Field(..., description="문제 생성 소스 텍스트")
    difficulty: str = Field(..., description="난이도 라벨 (프롬프트에 그대로 전달)")
    num_questions: int = Field(..., ge=1, description="이 배치에서 생성할 문제 개수")


class AICorrectAnswer(BaseModel):
    """정답 텍스트와 해설 (정답과 해설을 한 객체로 묶어 일관성 유지)"""
    text: str = Field(..., min_length=1, description="정답 선택지 전체 텍스트")
    explanation: str = Field(..., description="정답인 이유에 대한 단계별 해설")


class AIQuizQuestion(BaseModel):
    """AI가 생성하는 내부 문제 스키마 (Structured Output)"""
    question: str = Field(..., min_length=1, description="문제 내용 (수식은 LaTeX)")
    correct_answer: AICorrectAnswer
    distractors: list[str] = Field(..., min_length=3, max_length=3, description="그럴듯한 오답 3개")

    @property
    def options(self) -> list[str]:
        """셔플 전 선택지 목록 (정답이 항상 0번)"""
        return [self.correct_answer.text, *self.distractors]
