from typing import List, Optional

from core.config import get_setting
from sketch2flutter.common.domain.workspace import ViewDescriptor
from sketch2flutter.workspace.repository.view_repository_abc import ViewRepositoryABC
from sketch2flutter.workspace.repository.workspace_api_client import WorkspaceApiClient

settings = get_setting()


class ViewRepository(WorkspaceApiClient, ViewRepositoryABC):
    async def find_all(self, project_id: str) -> List[ViewDescriptor]:
        data = await self._get(f"/vista/proyecto/{project_id}")
        return [ViewDescriptor.model_validate(item) for item in data or []]


# FastAPI Depends 용 DI 팩토리 (저장소 URI 미설정 시 None)
def get_view_repository() -> Optional[ViewRepository]:
    if not settings.WORKSPACE_API_URI:
        return None
    return ViewRepository(
        settings.WORKSPACE_API_URI, timeout=settings.WORKSPACE_API_TIMEOUT
    )
