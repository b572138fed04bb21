import logging

from app.exceptions import InvalidQuizRequestError
from app.schemas import exam as exam_schema

logger = logging.getLogger(__name__)


def score_exam(request: exam_schema.ExamScoreRequest) -> exam_schema.ExamResultResponse:
    """답안 채점 (미응답은 오답으로 집계)"""
    questions = request.questions
    answers = request.answers

    if len(answers) != len(questions):
        raise InvalidQuizRequestError(
            f"답안 개수({len(answers)})가 문제 개수({len(questions)})와 다릅니다"
        )

    records = []
    for index, (question, user_answer) in enumerate(zip(questions, answers)):
        if user_answer is not None and not 0 <= user_answer < len(question.options):
            raise InvalidQuizRequestError(
                f"{index + 1}번 문제의 답안이 선택지 범위를 벗어났습니다: {user_answer}"
            )
        records.append(
            exam_schema.ExamRecordResponse(
                question_index=index,
                question=question.question,
                user_answer=user_answer,
                correct_option_index=question.correct_option_index,
                is_correct=user_answer == question.correct_option_index,
                explanation=question.explanation,
            )
        )

    correct_count = sum(1 for r in records if r.is_correct)
    unanswered_count = sum(1 for r in records if r.user_answer is None)
    total = len(records)

    logger.info(f"채점 완료: 전체={total}, 정답={correct_count}, 미응답={unanswered_count}")
    return exam_schema.ExamResultResponse(
        total_questions=total,
        correct_count=correct_count,
        incorrect_count=total - correct_count,
        unanswered_count=unanswered_count,
        score=round(correct_count / total * 100, 2),
        records=records,
    )
