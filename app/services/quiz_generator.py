"""문제 생성 오케스트레이션

요청 개수를 모델 호출 단위(청크)로 나눠 동시에 생성하고, 일부 배치가 실패해도
성공한 배치의 문제를 모아 요청 개수를 정확히 맞춘다. 모자라면 명시적으로 실패한다.
"""
import asyncio
import logging
import random
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

from pydantic import ValidationError

from app.core.config import settings
from app.exceptions import EmptyInputError, InsufficientGenerationError
from app.schemas.ai import AIQuizGenerationRequest, AIQuizQuestion
from app.schemas.quiz import PublicQuestion, QuizGenerateRequest
from app.services import ai_service

logger = logging.getLogger(__name__)

QuizBackend = Callable[[AIQuizGenerationRequest], Awaitable[list[Any]]]


@dataclass
class GenerationReport:
    """생성 결과 + 진단 정보"""
    questions: list[PublicQuestion]
    requested: int
    produced: int
    failed_batches: list[int] = field(default_factory=list)
    dropped_items: int = 0
    repaired_items: int = 0


def plan_batches(question_count: int, chunk_size: int) -> list[int]:
    """배치별 문제 개수 (마지막 배치는 나머지, 나누어떨어지면 chunk_size)"""
    if chunk_size < 1:
        raise ValueError("chunk_size는 1 이상이어야 합니다")
    sizes = []
    remaining = question_count
    while remaining > 0:
        size = min(remaining, chunk_size)
        sizes.append(size)
        remaining -= size
    return sizes


def fisher_yates_shuffle(items: list, rng: random.Random) -> None:
    """제자리 셔플 (i: 마지막 인덱스 → 1, j ∈ [0, i])"""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]


def locate_correct_index(options: list[str], correct_text: str) -> int | None:
    try:
        return options.index(correct_text)
    except ValueError:
        return None


class QuizGenerator:
    """청크 분할 → 동시 디스패치 → 전부 settle 후 집계 → 개수 강제"""

    def __init__(
        self,
        backend: QuizBackend | None = None,
        rng: random.Random | None = None,
        chunk_size: int | None = None,
    ):
        self.backend = backend or ai_service.generate_quiz_batch
        self.rng = rng or random.Random()
        self.chunk_size = chunk_size or settings.quiz_chunk_size

    async def generate(self, request: QuizGenerateRequest) -> list[PublicQuestion]:
        report = await self.generate_with_report(request)
        return report.questions

    async def generate_with_report(self, request: QuizGenerateRequest) -> GenerationReport:
        if not request.source_text or not request.source_text.strip():
            raise EmptyInputError()

        requested = request.question_count
        batch_sizes = plan_batches(requested, self.chunk_size)
        logger.info(
            f"문제 생성 시작: 요청={requested}, 난이도={request.difficulty.value}, "
            f"배치={batch_sizes}"
        )

        batch_requests = [
            AIQuizGenerationRequest(
                source_text=request.source_text,
                difficulty=request.difficulty.value,
                num_questions=size,
            )
            for size in batch_sizes
        ]
        # 하나가 실패해도 나머지 배치는 취소하지 않음
        results = await asyncio.gather(
            *(self.backend(batch_request) for batch_request in batch_requests),
            return_exceptions=True,
        )

        collected: list[AIQuizQuestion] = []
        failed_batches: list[int] = []
        first_error: BaseException | None = None
        dropped = 0

        for position, result in enumerate(results):
            if isinstance(result, BaseException):
                failed_batches.append(position)
                if first_error is None:
                    first_error = result
                logger.error(
                    f"문제 생성 배치 실패: batch={position + 1}/{len(results)}, "
                    f"error_type={type(result).__name__}, error={result}"
                )
                continue

            if not isinstance(result, list):
                failed_batches.append(position)
                logger.error(
                    f"배치 응답이 리스트가 아님: batch={position + 1}/{len(results)}, "
                    f"type={type(result).__name__}"
                )
                continue

            valid_items, invalid_count = self._validate_items(result, position)
            dropped += invalid_count
            collected.extend(valid_items)

        if len(collected) < requested:
            logger.warning(
                f"문제 생성 개수 부족: 요청={requested}, 생성={len(collected)}, "
                f"실패 배치={failed_batches}, 폐기 항목={dropped}"
            )
            raise InsufficientGenerationError(produced=len(collected), requested=requested) from first_error

        if len(collected) > requested:
            logger.info(f"초과 생성분 잘라냄: 생성={len(collected)}, 요청={requested}")

        questions = []
        repaired = 0
        for item in collected[:requested]:
            question, was_repaired = self.shape_question(item)
            questions.append(question)
            repaired += was_repaired

        logger.info(
            f"문제 생성 완료: 요청={requested}, 수집={len(collected)}, "
            f"실패 배치={len(failed_batches)}, 보정={repaired}"
        )
        return GenerationReport(
            questions=questions,
            requested=requested,
            produced=len(collected),
            failed_batches=failed_batches,
            dropped_items=dropped,
            repaired_items=repaired,
        )

    def shape_question(self, item: AIQuizQuestion) -> tuple[PublicQuestion, bool]:
        """내부 문제 → 공개 문제 (선택지 셔플, 정답 위치 계산)

        셔플 후 정답 텍스트를 찾지 못하면 0번으로 보정하고 (문제, True)를 반환한다.
        """
        options = item.options
        fisher_yates_shuffle(options, self.rng)

        correct_index = locate_correct_index(options, item.correct_answer.text)
        repaired = correct_index is None
        if repaired:
            logger.warning(f"정답 선택지를 찾을 수 없어 0번으로 보정: question={item.question[:50]}...")
            correct_index = 0

        question = PublicQuestion(
            question=item.question,
            options=options,
            correct_option_index=correct_index,
            explanation=item.correct_answer.explanation,
        )
        return question, repaired

    @staticmethod
    def _validate_items(raw_items: list[Any], position: int) -> tuple[list[AIQuizQuestion], int]:
        valid = []
        invalid = 0
        for item in raw_items:
            if isinstance(item, AIQuizQuestion):
                valid.append(item)
                continue
            try:
                valid.append(AIQuizQuestion.model_validate(item))
            except ValidationError as e:
                invalid += 1
                logger.warning(
                    f"형식이 잘못된 문제 폐기: batch={position + 1}, errors={e.error_count()}"
                )
        return valid, invalid


async def generate_quiz(request: QuizGenerateRequest) -> GenerationReport:
    """기본 설정(Gemini 백엔드, 전역 난수)으로 문제 생성"""
    return await QuizGenerator().generate_with_report(request)
