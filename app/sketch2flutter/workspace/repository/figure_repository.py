from typing import Any, Dict, List, Optional

from core.config import get_setting
from sketch2flutter.workspace.repository.figure_repository_abc import (
    FigureRepositoryABC,
)
from sketch2flutter.workspace.repository.workspace_api_client import WorkspaceApiClient

settings = get_setting()


class FigureRepository(WorkspaceApiClient, FigureRepositoryABC):
    async def find_all(self, view_id: str) -> List[Dict[str, Any]]:
        data = await self._get(f"/figura/vista/{view_id}")
        return list(data or [])

    async def create(self, figure_data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post("/figura", figure_data)


# FastAPI Depends 용 DI 팩토리 (저장소 URI 미설정 시 None)
def get_figure_repository() -> Optional[FigureRepository]:
    if not settings.WORKSPACE_API_URI:
        return None
    return FigureRepository(
        settings.WORKSPACE_API_URI, timeout=settings.WORKSPACE_API_TIMEOUT
    )
