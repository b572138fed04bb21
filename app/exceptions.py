"""커스텀 예외 클래스 정의"""


class BaseAppError(Exception):
    """애플리케이션 기본 예외 클래스"""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class EmptyInputError(BaseAppError):
    """소스 텍스트가 비어 있을 때 발생하는 예외 (400)"""

    def __init__(self, message: str = "No text provided. Paste some text or upload a PDF before generating a quiz."):
        super().__init__(message, status_code=400)


class InsufficientGenerationError(BaseAppError):
    """모든 배치가 끝난 뒤에도 요청 개수만큼 문제가 생성되지 않았을 때 (502)"""

    def __init__(self, produced: int, requested: int):
        self.produced = produced
        self.requested = requested
        super().__init__(
            f"The AI failed to generate all questions. It produced {produced} out of {requested} requested. "
            "Please try again or reduce the number of questions.",
            status_code=502,
        )


class QuizBackendError(BaseAppError):
    """개별 배치의 문제 생성 백엔드 호출 실패 (502)"""

    def __init__(self, message: str = "The question generator failed to respond."):
        super().__init__(message, status_code=502)


class GeminiServiceUnavailableError(QuizBackendError):
    """Gemini API 서비스 일시적 과부하 에러 (503)"""

    def __init__(self, message: str = "The Gemini API is temporarily overloaded. Please try again shortly."):
        super().__init__(message)
        self.status_code = 503


class GeminiAPIKeyError(QuizBackendError):
    """Gemini API 키 관련 에러 (403)"""

    def __init__(self, message: str = "Quiz generation failed because of a Gemini API key problem. Contact the administrator."):
        super().__init__(message)
        self.status_code = 403


class InvalidQuizRequestError(BaseAppError):
    """잘못된 문제 요청일 때 발생하는 예외 (400)"""

    def __init__(self, message: str):
        super().__init__(message, status_code=400)
