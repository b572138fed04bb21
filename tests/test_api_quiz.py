"""Quiz API 통합 테스트"""
from unittest.mock import AsyncMock, patch

import pytest

from app.exceptions import GeminiAPIKeyError, QuizBackendError


def _batch_side_effect(make_ai_items):
    async def _generate(request):
        return make_ai_items(request.num_questions)
    return _generate


def test_generate_quiz(client, make_ai_items):
    """문제 생성 (camelCase 요청)"""
    with patch("app.services.ai_service.generate_quiz_batch", new_callable=AsyncMock) as mock_ai:
        mock_ai.side_effect = _batch_side_effect(make_ai_items)

        response = client.post(
            "/api/v1/quiz/generate",
            json={"sourceText": "테스트 텍스트", "difficulty": "Easy", "questionCount": 12},
        )

    assert response.status_code == 201
    data = response.json()
    assert data["total"] == 12
    assert len(data["questions"]) == 12
    assert data["failed_batches"] == 0
    assert mock_ai.call_count == 2
    for question in data["questions"]:
        assert len(question["options"]) == 4
        assert question["options"][question["correct_option_index"]].endswith("정답")


def test_generate_quiz_snake_case(client, make_ai_items):
    """snake_case 필드명도 허용"""
    with patch("app.services.ai_service.generate_quiz_batch", new_callable=AsyncMock) as mock_ai:
        mock_ai.side_effect = _batch_side_effect(make_ai_items)

        response = client.post(
            "/api/v1/quiz/generate",
            json={"source_text": "테스트 텍스트", "question_count": 3},
        )

    assert response.status_code == 201
    assert response.json()["total"] == 3
    assert mock_ai.call_args.args[0].difficulty == "Medium"


def test_generate_quiz_empty_text(client):
    """빈 텍스트는 400, 백엔드 호출 없음"""
    with patch("app.services.ai_service.generate_quiz_batch", new_callable=AsyncMock) as mock_ai:
        response = client.post(
            "/api/v1/quiz/generate",
            json={"sourceText": "   ", "questionCount": 5},
        )

    assert response.status_code == 400
    assert response.json()["type"] == "EmptyInputError"
    mock_ai.assert_not_called()


def test_generate_quiz_insufficient(client, make_ai_items):
    """배치 일부 실패로 개수가 모자라면 502"""
    with patch("app.services.ai_service.generate_quiz_batch", new_callable=AsyncMock) as mock_ai:
        mock_ai.side_effect = [make_ai_items(10), QuizBackendError("boom")]

        response = client.post(
            "/api/v1/quiz/generate",
            json={"sourceText": "테스트 텍스트", "questionCount": 15},
        )

    assert response.status_code == 502
    data = response.json()
    assert data["type"] == "InsufficientGenerationError"
    assert "10 out of 15" in data["detail"]


def test_generate_quiz_all_batches_key_error(client):
    """API 키 문제로 전부 실패해도 집계 단계에서 실패 처리"""
    with patch("app.services.ai_service.generate_quiz_batch", new_callable=AsyncMock) as mock_ai:
        mock_ai.side_effect = GeminiAPIKeyError()

        response = client.post(
            "/api/v1/quiz/generate",
            json={"sourceText": "테스트 텍스트", "questionCount": 5},
        )

    assert response.status_code == 502
    assert "0 out of 5" in response.json()["detail"]


@pytest.mark.parametrize("count", [0, 51])
def test_generate_quiz_count_out_of_range(client, count):
    response = client.post(
        "/api/v1/quiz/generate",
        json={"sourceText": "테스트 텍스트", "questionCount": count},
    )

    assert response.status_code == 422


def test_generate_quiz_invalid_difficulty(client):
    response = client.post(
        "/api/v1/quiz/generate",
        json={"sourceText": "테스트 텍스트", "difficulty": "Impossible", "questionCount": 3},
    )

    assert response.status_code == 422


def test_get_sample_quiz(client):
    """데모 문제 조회"""
    response = client.get("/api/v1/quiz/sample")

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == len(data["questions"]) > 0


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
