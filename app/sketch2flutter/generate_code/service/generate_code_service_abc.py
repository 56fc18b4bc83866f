from abc import ABC, abstractmethod
from typing import Optional, Union

from sketch2flutter.common.domain.artifact import GenerationBundle


class GenerateCodeServiceABC(ABC):
    @abstractmethod
    async def generate_from_image(
        self,
        image: Union[bytes, str],
        page_name: str,
        description: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> GenerationBundle:
        """
        화면 캡처 이미지로부터 Flutter 코드를 생성합니다.

        Args:
            image: 이미지 바이트, base64 문자열 또는 data URI
            page_name: 생성할 화면 이름
            description: 화면에 대한 부가 설명
            project_id: 지정하면 프로젝트 뷰 기반 네비게이션도 함께 생성

        Returns:
            GenerationBundle: 분류된 Flutter 산출물
        """
        pass

    @abstractmethod
    async def generate_from_prompt(
        self,
        prompt: str,
        page_name: str,
        description: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> GenerationBundle:
        """텍스트 설명으로부터 Flutter 코드를 생성합니다."""
        pass
