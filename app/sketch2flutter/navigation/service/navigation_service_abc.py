from abc import ABC, abstractmethod
from typing import Optional

from sketch2flutter.common.domain.artifact import NavigationBundle


class NavigationServiceABC(ABC):
    @abstractmethod
    async def generate_navigation(self, project_id: str) -> Optional[NavigationBundle]:
        """
        프로젝트의 뷰 목록으로 라우트 테이블과 네비게이션 파일을 생성합니다.

        Returns:
            뷰가 2개 미만이면 None (네비게이션 불필요)
        """
        pass
