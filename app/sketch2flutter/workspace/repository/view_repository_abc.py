from abc import ABC, abstractmethod
from typing import List

from sketch2flutter.common.domain.workspace import ViewDescriptor


class ViewRepositoryABC(ABC):
    @abstractmethod
    async def find_all(self, project_id: str) -> List[ViewDescriptor]:
        """프로젝트에 속한 뷰 목록"""
        pass
