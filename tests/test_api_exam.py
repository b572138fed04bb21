"""Exam API 통합 테스트"""


def _question(answer: int) -> dict:
    return {
        "question": "2 + 2 = ?",
        "options": ["3", "4", "5", "6"],
        "correct_option_index": answer,
        "explanation": "2 + 2 = 4",
    }


def test_score_exam(client):
    """채점 API"""
    response = client.post(
        "/api/v1/exam/score",
        json={"questions": [_question(1), _question(1)], "answers": [1, None]},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["correct_count"] == 1
    assert data["unanswered_count"] == 1
    assert data["score"] == 50.0
    assert len(data["records"]) == 2


def test_score_exam_mismatched_answers(client):
    response = client.post(
        "/api/v1/exam/score",
        json={"questions": [_question(1)], "answers": [1, 2]},
    )

    assert response.status_code == 400
    assert response.json()["type"] == "InvalidQuizRequestError"


def test_score_exam_invalid_question(client):
    """선택지가 4개가 아니면 422"""
    question = _question(0)
    question["options"] = ["only", "three", "options"]

    response = client.post(
        "/api/v1/exam/score",
        json={"questions": [question], "answers": [0]},
    )

    assert response.status_code == 422
