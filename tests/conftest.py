"""공통 테스트 픽스처"""
import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def client():
    """FastAPI 테스트 클라이언트"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_ai_items():
    """Gemini 응답 형태의 문제 항목 생성기"""
    def _make(count: int, prefix: str = "q") -> list[dict]:
        return [
            {
                "question": f"{prefix}{n} 문제",
                "correct_answer": {"text": f"{prefix}{n} 정답", "explanation": f"{prefix}{n} 해설"},
                "distractors": [f"{prefix}{n} 오답1", f"{prefix}{n} 오답2", f"{prefix}{n} 오답3"],
            }
            for n in range(count)
        ]
    return _make
