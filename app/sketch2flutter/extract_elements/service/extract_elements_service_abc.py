from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union


@dataclass
class ElementExtractionResult:
    created: List[Dict[str, Any]] = field(default_factory=list)
    failures: List[str] = field(default_factory=list)


class ExtractElementsServiceABC(ABC):
    @abstractmethod
    async def extract_ui_elements(
        self,
        image: Union[bytes, str],
        view_id: str,
        description: str = "",
    ) -> ElementExtractionResult:
        """
        스케치 이미지에서 UI 요소(도형)를 추출해 뷰에 저장합니다.

        Args:
            image: 이미지 바이트, base64 문자열 또는 data URI
            view_id: 도형을 추가할 뷰 ID
            description: LLM 에 전달할 부가 설명

        Returns:
            저장된 도형 레코드와 건별 실패 메시지
        """
        pass
