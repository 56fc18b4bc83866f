from typing import Optional

from core.ai.azure_llm import AzureLLM
from core.ai.llm import LLM
from core.ai.openai_llm import OpenAILLM
from core.config import get_setting
from core.exception.exceptions import DependencyUnavailable

settings = get_setting()

_llm: Optional[LLM] = None


def _create_llm() -> LLM:
    provider = settings.LLM_PROVIDER.lower()
    if provider == "azure":
        if not settings.AOAI_API_KEY or not settings.AOAI_ENDPOINT:
            raise DependencyUnavailable("AOAI_API_KEY/AOAI_ENDPOINT 환경변수가 설정되지 않았습니다")
        return AzureLLM(
            api_key=settings.AOAI_API_KEY,
            base_url=settings.AOAI_ENDPOINT,
            deployment=settings.AOAI_DEPLOY_GPT4O_MINI,
            api_version=settings.AOAI_API_VERSION,
            timeout=settings.OPENAI_TIMEOUT,
        )
    if provider == "openai":
        if not settings.OPENAI_API_KEY:
            raise DependencyUnavailable("OPENAI_API_KEY 환경변수가 설정되지 않았습니다")
        return OpenAILLM(
            api_key=settings.OPENAI_API_KEY,
            model=settings.OPENAI_MODEL,
            base_url=settings.OPENAI_BASE_URL,
            timeout=settings.OPENAI_TIMEOUT,
        )
    raise DependencyUnavailable(f"알 수 없는 LLM_PROVIDER: {settings.LLM_PROVIDER}")


# FastAPI Depends 용 DI 팩토리 (프로세스당 1개 클라이언트)
def get_llm() -> LLM:
    global _llm
    if _llm is None:
        _llm = _create_llm()
    return _llm
