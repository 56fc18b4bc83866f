from typing import Any, Dict, Optional

import httpx
from core.config import get_setting

settings = get_setting()


class WorkspaceApiClient:
    """
    뷰/피규어 저장소 서비스 REST 호출 공통부.
    요청마다 AsyncClient 를 열고 닫으며, HTTP 오류는 호출자에게 그대로 전파합니다.
    """

    def __init__(self, base_url: str, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = {"X-Request-Source": settings.APP_NAME}

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.get(
                f"{self.base_url}{path}", params=params, headers=self.headers
            )
            resp.raise_for_status()
            return resp.json()

    async def _post(self, path: str, payload: Dict[str, Any]) -> Any:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.post(
                f"{self.base_url}{path}", json=payload, headers=self.headers
            )
            resp.raise_for_status()
            return resp.json()
