from typing import Any, List, Optional, Union

from core.ai.llm import LLM
from core.ai.llm_factory import get_llm
from core.config import get_setting
from core.exception.exceptions import DependencyUnavailable, PartialPersistenceFailure
from core.log.logging import get_logging
from fastapi import Depends
from pydantic import ValidationError
from sketch2flutter.common.domain.workspace import UIElement
from sketch2flutter.common.image import prepare_image_base64
from sketch2flutter.common.prompt.completion import request_completion_text
from sketch2flutter.common.prompt.messages import build_element_extraction_messages
from sketch2flutter.common.ui_elements import parse_ui_elements
from sketch2flutter.extract_elements.service.extract_elements_service_abc import (
    ElementExtractionResult,
    ExtractElementsServiceABC,
)
from sketch2flutter.workspace.repository.figure_repository import (
    get_figure_repository,
)
from sketch2flutter.workspace.repository.figure_repository_abc import (
    FigureRepositoryABC,
)

settings = get_setting()
logger = get_logging()


class ExtractElementsService(ExtractElementsServiceABC):
    def __init__(self, llm: LLM, figure_repository: Optional[FigureRepositoryABC]):
        self.llm = llm
        self.figure_repository = figure_repository

    async def extract_ui_elements(
        self,
        image: Union[bytes, str],
        view_id: str,
        description: str = "",
    ) -> ElementExtractionResult:
        if self.figure_repository is None:
            raise DependencyUnavailable("피규어 저장소 서비스가 설정되지 않았습니다")

        logger.info("이미지에서 UI 요소 추출 시작")
        image_base64 = prepare_image_base64(image)

        content = await request_completion_text(
            self.llm,
            build_element_extraction_messages(
                image_base64,
                description,
                canvas_width=settings.CANVAS_WIDTH,
                canvas_height=settings.CANVAS_HEIGHT,
            ),
            max_tokens=settings.ELEMENTS_MAX_TOKENS,
            temperature=settings.LLM_TEMPERATURE,
        )

        raw_elements = parse_ui_elements(content)
        return await self._create_figures(raw_elements, view_id)

    async def _create_figures(
        self, raw_elements: List[Any], view_id: str
    ) -> ElementExtractionResult:
        result = ElementExtractionResult()

        for index, raw in enumerate(raw_elements):
            try:
                element = self._validate(index, raw)
                created = await self.figure_repository.create(
                    element.to_figure_data(view_id)
                )
                if not isinstance(created, dict):
                    raise PartialPersistenceFailure(
                        index, f"저장소 응답이 객체가 아님: {created!r}"
                    )
            except PartialPersistenceFailure as failure:
                self._record_failure(result, failure)
                continue
            except Exception as e:
                self._record_failure(result, PartialPersistenceFailure(index, str(e)))
                continue

            result.created.append(created)
            logger.info(f"도형 생성: {created.get('id')} ({element.kind})")

        logger.info(f"생성된 도형: {len(result.created)} / {len(raw_elements)}")
        return result

    def _validate(self, index: int, raw: Any) -> UIElement:
        if not isinstance(raw, dict):
            raise PartialPersistenceFailure(index, f"객체가 아닌 요소: {raw!r}")
        try:
            return UIElement.model_validate(raw)
        except ValidationError as e:
            raise PartialPersistenceFailure(index, str(e)) from e

    def _record_failure(
        self, result: ElementExtractionResult, failure: PartialPersistenceFailure
    ) -> None:
        message = f"element[{failure.index}]: {failure.detail}"
        logger.warning(f"도형 저장 실패, 건너뜀 - {message}")
        result.failures.append(message)


# FastAPI Depends 용 DI 팩토리
def get_extract_elements_service(
    llm: LLM = Depends(get_llm),
    figure_repository: Optional[FigureRepositoryABC] = Depends(get_figure_repository),
) -> ExtractElementsService:
    return ExtractElementsService(llm, figure_repository)
