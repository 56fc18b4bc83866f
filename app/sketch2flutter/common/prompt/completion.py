import logging
from typing import Any, Dict, List

from core.ai.llm import LLM
from core.exception.exceptions import (
    ServiceException,
    UpstreamEmptyResponse,
    UpstreamRequestFailed,
)

logger = logging.getLogger("sketch2flutter.completion")


async def request_completion_text(
    llm: LLM,
    messages: List[Dict[str, Any]],
    max_tokens: int,
    temperature: float,
) -> str:
    """LLM 을 1회 호출하여 첫 번째 choice 의 텍스트를 반환. 재시도하지 않습니다."""
    try:
        completion = await llm.generate_chat(
            messages=messages, max_tokens=max_tokens, temperature=temperature
        )
    except ServiceException:
        raise
    except Exception as e:
        logger.error(f"LLM API 오류: {e}")
        raise UpstreamRequestFailed(str(e)) from e

    choices = getattr(completion, "choices", None) or []
    content = choices[0].message.content if choices else None
    if not content:
        raise UpstreamEmptyResponse()

    logger.info(f"응답 길이: {len(content)} 문자")
    logger.debug(f"응답 앞부분: {content[:100]}...")
    return content
