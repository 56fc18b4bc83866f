import json
import logging
import re
from typing import Any, List

from core.exception.exceptions import MalformedUpstreamJSON

logger = logging.getLogger("sketch2flutter.ui_elements")

JSON_ARRAY_RE = re.compile(r"\[\s*\{[\s\S]*\}\s*\]")


def parse_ui_elements(content: str) -> List[Any]:
    """
    LLM 응답에서 UI 요소 JSON 배열을 꺼냅니다.
    `[ { ... } ]` 구간을 먼저 찾고, 없으면 응답 전체를 JSON 으로 해석합니다.
    """
    match = JSON_ARRAY_RE.search(content)
    candidate = match.group(0) if match else content.strip()

    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as e:
        logger.error(f"UI 요소 JSON 파싱 실패: {e}")
        raise MalformedUpstreamJSON(str(e)) from e

    if not isinstance(parsed, list):
        raise MalformedUpstreamJSON(f"배열이 아닌 응답: {type(parsed).__name__}")
    return parsed
