from abc import ABC, abstractmethod
from typing import Any, Dict, List


class FigureRepositoryABC(ABC):
    @abstractmethod
    async def find_all(self, view_id: str) -> List[Dict[str, Any]]:
        """뷰에 속한 도형(figure) 목록"""
        pass

    @abstractmethod
    async def create(self, figure_data: Dict[str, Any]) -> Dict[str, Any]:
        """도형 1건을 저장하고 저장소가 부여한 id 를 포함한 레코드를 반환"""
        pass
