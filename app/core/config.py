from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정 (.env / 환경변수)"""

    environment: str = "development"

    # Gemini
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash"
    gemini_temperature: float = 0.7
    gemini_timeout_seconds: float = 90.0
    # 동시 Gemini 요청 수 (50문제 / 청크 10 = 5개 배치가 한 번에 나가도록)
    gemini_max_concurrent: int = 5

    # 한 번의 모델 호출로 생성할 최대 문제 수
    quiz_chunk_size: int = 10

    allowed_origins: str = "http://localhost:3000,http://localhost:9002"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def allowed_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


settings = Settings()
