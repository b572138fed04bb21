import asyncio
import json
import logging
from typing import Any

from google import genai
from google.genai import types
from google.genai.errors import ClientError, ServerError

from app.core.config import settings
from app.exceptions import GeminiAPIKeyError, GeminiServiceUnavailableError, QuizBackendError
from app.schemas.ai import AIQuizGenerationRequest, AIQuizQuestion

logger = logging.getLogger(__name__)

_gemini_client: genai.Client | None = None
# 동시 Gemini API 요청 수 제한 (과부하 방지)
_gemini_semaphore: asyncio.Semaphore | None = None

PROMPT_TEMPLATE = """You are an expert quiz creator. Your task is to generate EXACTLY {num_questions} multiple-choice questions based on the provided context.
The difficulty of the questions must be '{difficulty}'.

It is absolutely critical that you generate the precise number of questions requested. Your response MUST be a valid JSON array containing exactly {num_questions} question objects. Do not generate more or fewer questions than requested.

For each question provide:
1. "question": the question text.
2. "correct_answer": an object with "text" (the full text of the single correct answer) and "explanation" (a detailed, step-by-step explanation that logically proves why this answer is correct).
3. "distractors": exactly 3 plausible but incorrect answer options. None of them may be the correct answer.

Format mathematical equations, formulas and chemical notation with LaTeX delimiters ($...$ for inline, $$...$$ for block-level).

Context:
---
{context}
---
"""


def get_gemini_client() -> genai.Client:
    """Gemini 클라이언트 싱글톤"""
    global _gemini_client
    if _gemini_client is None:
        if not settings.gemini_api_key:
            raise GeminiAPIKeyError("GEMINI_API_KEY is not configured.")
        _gemini_client = genai.Client(api_key=settings.gemini_api_key)
    return _gemini_client


def get_gemini_semaphore() -> asyncio.Semaphore:
    """Gemini API 동시 요청 제한 Semaphore 싱글톤"""
    global _gemini_semaphore
    if _gemini_semaphore is None:
        max_concurrent = max(1, settings.gemini_max_concurrent)
        _gemini_semaphore = asyncio.Semaphore(max_concurrent)
        logger.info(f"Gemini API 동시 요청 제한 설정: 최대 {max_concurrent}개")
    return _gemini_semaphore


def build_prompt(request: AIQuizGenerationRequest) -> str:
    return PROMPT_TEMPLATE.format(
        num_questions=request.num_questions,
        difficulty=request.difficulty,
        context=request.source_text,
    )


def parse_quiz_items(raw_text: str | None) -> list[Any]:
    """Gemini 응답 텍스트를 문제 항목 리스트로 파싱 (마크다운 코드 블록 제거)

    개별 항목의 구조 검증은 하지 않는다. 배열 또는 {"questions": [...]} 형태를 허용한다.
    """
    if not raw_text or not raw_text.strip():
        raise QuizBackendError("The question generator returned an empty response.")

    result = raw_text.strip()
    if result.startswith("```json"):
        result = result[7:]
    if result.startswith("```"):
        result = result[3:]
    if result.endswith("```"):
        result = result[:-3]
    result = result.strip()

    try:
        data = json.loads(result)
    except json.JSONDecodeError as e:
        raise QuizBackendError(f"The question generator returned invalid JSON: {e.msg}") from e

    if isinstance(data, dict) and isinstance(data.get("questions"), list):
        return data["questions"]
    if isinstance(data, list):
        return data
    raise QuizBackendError(
        f"The question generator returned an unexpected payload type: {type(data).__name__}"
    )


def classify_gemini_error(error: Exception) -> QuizBackendError:
    """SDK/런타임 예외를 백엔드 예외 계층으로 변환"""
    if isinstance(error, QuizBackendError):
        return error

    error_message = str(error)
    lowered = error_message.lower()
    status_code = getattr(error, "code", None)

    if isinstance(error, ClientError):
        if status_code == 403 or "403" in error_message or "permission_denied" in lowered or "leaked" in lowered:
            return GeminiAPIKeyError()
        return QuizBackendError(f"Gemini API rejected the request ({status_code}).")

    if isinstance(error, ServerError):
        if status_code == 503 or "503" in error_message or "unavailable" in lowered or "overloaded" in lowered:
            return GeminiServiceUnavailableError()
        return QuizBackendError(f"Gemini API server error ({status_code}).")

    if isinstance(error, asyncio.TimeoutError):
        return QuizBackendError(
            f"The question generator did not respond within {settings.gemini_timeout_seconds:g} seconds."
        )

    return QuizBackendError(f"Gemini API call failed: {type(error).__name__}")


def _call_gemini(client: genai.Client, prompt: str) -> str | None:
    """동기 Gemini 호출 (executor에서 실행)"""
    response = client.models.generate_content(
        model=settings.gemini_model,
        contents=prompt,
        config=types.GenerateContentConfig(
            temperature=settings.gemini_temperature,
            response_mime_type="application/json",
            response_schema=list[AIQuizQuestion],
        ),
    )
    return response.text


async def generate_quiz_batch(request: AIQuizGenerationRequest) -> list[Any]:
    """배치 1개 분량의 문제를 Gemini로 생성 (재시도 없음, 동시 요청 제한)

    반환 항목 개수는 요청과 다를 수 있으며, 항목 검증은 호출자가 담당한다.
    """
    semaphore = get_gemini_semaphore()
    prompt = build_prompt(request)

    async with semaphore:
        logger.debug(f"Gemini API 요청 시작: num_questions={request.num_questions}")
        try:
            client = get_gemini_client()
            # Gemini는 동기 API이므로 asyncio로 래핑
            loop = asyncio.get_running_loop()
            raw_text = await asyncio.wait_for(
                loop.run_in_executor(None, _call_gemini, client, prompt),
                timeout=settings.gemini_timeout_seconds,
            )
            items = parse_quiz_items(raw_text)
        except Exception as e:
            backend_error = classify_gemini_error(e)
            logger.error(
                f"Gemini API 호출 실패: error_type={type(e).__name__}, "
                f"classified={type(backend_error).__name__}, error_message={str(e)[:200]}"
            )
            if backend_error is e:
                raise
            raise backend_error from e

    logger.info(f"Gemini 배치 응답 수신: 요청={request.num_questions}, 수신={len(items)}")
    return items
