from typing import Any, Dict, List, Optional, Union

from core.ai.llm import LLM
from core.ai.llm_factory import get_llm
from core.config import get_setting
from core.exception.exceptions import DependencyUnavailable
from core.log.logging import get_logging
from fastapi import Depends
from sketch2flutter.common.domain.artifact import GenerationBundle
from sketch2flutter.common.flutter.pipeline import run_extraction_pipeline
from sketch2flutter.common.image import prepare_image_base64
from sketch2flutter.common.prompt.completion import request_completion_text
from sketch2flutter.common.prompt.messages import (
    build_code_generation_messages,
    build_prompt_generation_messages,
)
from sketch2flutter.generate_code.service.generate_code_service_abc import (
    GenerateCodeServiceABC,
)
from sketch2flutter.navigation.service.navigation_service import (
    get_navigation_service,
)
from sketch2flutter.navigation.service.navigation_service_abc import (
    NavigationServiceABC,
)

settings = get_setting()
logger = get_logging()


class GenerateCodeService(GenerateCodeServiceABC):
    def __init__(
        self, llm: LLM, navigation_service: Optional[NavigationServiceABC] = None
    ):
        self.llm = llm
        self.navigation_service = navigation_service

    async def generate_from_image(
        self,
        image: Union[bytes, str],
        page_name: str,
        description: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> GenerationBundle:
        logger.info(f"이미지 기반 Flutter 코드 생성 시작: {page_name}")
        image_base64 = prepare_image_base64(image)
        logger.info(f"base64 이미지 크기: {len(image_base64)} 문자")

        messages = build_code_generation_messages(image_base64, page_name, description)
        return await self._generate(messages, project_id)

    async def generate_from_prompt(
        self,
        prompt: str,
        page_name: str,
        description: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> GenerationBundle:
        logger.info(f"프롬프트 기반 Flutter 코드 생성 시작: {page_name}")
        messages = build_prompt_generation_messages(prompt, page_name, description)
        return await self._generate(messages, project_id)

    async def _generate(
        self, messages: List[Dict[str, Any]], project_id: Optional[str]
    ) -> GenerationBundle:
        content = await request_completion_text(
            self.llm,
            messages,
            max_tokens=settings.CODE_MAX_TOKENS,
            temperature=settings.LLM_TEMPERATURE,
        )
        bundle = run_extraction_pipeline(content)

        if project_id:
            await self._attach_navigation(bundle, project_id)
        return bundle

    async def _attach_navigation(self, bundle: GenerationBundle, project_id: str) -> None:
        # 네비게이션은 부가 기능이므로 실패해도 코드 생성 결과는 그대로 반환
        if self.navigation_service is None:
            logger.warning("네비게이션 서비스가 없어 네비게이션 생성을 건너뜁니다")
            return
        try:
            bundle.navigation = await self.navigation_service.generate_navigation(
                project_id
            )
        except DependencyUnavailable as e:
            logger.warning(f"네비게이션 생성 생략: {e.message}")
        except Exception as e:
            logger.warning(f"프로젝트 {project_id} 네비게이션 생성 실패: {e}")


# FastAPI Depends 용 DI 팩토리
def get_generate_code_service(
    llm: LLM = Depends(get_llm),
    navigation_service: NavigationServiceABC = Depends(get_navigation_service),
) -> GenerateCodeService:
    return GenerateCodeService(llm, navigation_service)
