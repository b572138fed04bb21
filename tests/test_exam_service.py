"""Exam Service 테스트"""
import pytest

from app.exceptions import InvalidQuizRequestError
from app.schemas import exam as exam_schema
from app.schemas.quiz import PublicQuestion
from app.services import exam_service


@pytest.fixture
def questions():
    """채점용 문제 3개 (정답: 2, 0, 3)"""
    return [
        PublicQuestion(question=f"문제 {i}", options=["a", "b", "c", "d"], correct_option_index=answer, explanation=f"해설 {i}")
        for i, answer in enumerate([2, 0, 3])
    ]


def test_score_exam_counts(questions):
    """정답/오답/미응답 집계와 점수"""
    request = exam_schema.ExamScoreRequest(questions=questions, answers=[2, 1, None])

    result = exam_service.score_exam(request)

    assert result.total_questions == 3
    assert result.correct_count == 1
    assert result.incorrect_count == 2
    assert result.unanswered_count == 1
    assert result.score == 33.33
    assert [r.is_correct for r in result.records] == [True, False, False]
    assert result.records[2].user_answer is None
    assert result.records[1].correct_option_index == 0
    assert result.records[0].explanation == "해설 0"


def test_score_exam_perfect(questions):
    request = exam_schema.ExamScoreRequest(questions=questions, answers=[2, 0, 3])

    result = exam_service.score_exam(request)

    assert result.score == 100.0
    assert result.incorrect_count == 0


def test_score_exam_answer_count_mismatch(questions):
    """답안 개수가 다르면 예외"""
    request = exam_schema.ExamScoreRequest(questions=questions, answers=[0, 1])

    with pytest.raises(InvalidQuizRequestError):
        exam_service.score_exam(request)


@pytest.mark.parametrize("bad_answer", [4, -1])
def test_score_exam_answer_out_of_range(questions, bad_answer):
    request = exam_schema.ExamScoreRequest(questions=questions, answers=[0, bad_answer, 1])

    with pytest.raises(InvalidQuizRequestError):
        exam_service.score_exam(request)
