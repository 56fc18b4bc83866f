from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 앱 관련 설정
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000

    # 로깅 관련 설정
    DATA_PATH: str = "./data"
    LOG_PATH: str = "/logs"
    ENVIRONMENT: str = "LOCAL"
    LOG_LEVEL: str = "DEBUG"
    APP_NAME: str = "sketch2flutter"

    # LLM 관련 설정 ("openai" 또는 "azure")
    LLM_PROVIDER: str = "openai"
    OPENAI_API_KEY: str = ""
    OPENAI_BASE_URL: str = ""
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_TIMEOUT: float = 120.0

    # Azure OpenAI (AOAI) 설정
    AOAI_ENDPOINT: str = ""
    AOAI_API_KEY: str = ""
    AOAI_API_VERSION: str = "2024-02-01"
    AOAI_DEPLOY_GPT4O_MINI: str = ""

    # 생성 파라미터
    CODE_MAX_TOKENS: int = 8192
    ELEMENTS_MAX_TOKENS: int = 4000
    LLM_TEMPERATURE: float = 0.2

    # UI 요소 추출 캔버스 크기
    CANVAS_WIDTH: int = 1200
    CANVAS_HEIGHT: int = 800

    # 뷰/피규어 저장소 서비스 (미설정 시 네비게이션/요소 저장 비활성)
    WORKSPACE_API_URI: str = ""
    WORKSPACE_API_TIMEOUT: float = 10.0


settings = Settings()


def get_setting() -> Settings:
    return settings
