from core.log.logging import get_logging
from fastapi import APIRouter, Depends
from sketch2flutter.extract_elements.controller.dto.extract_elements_dto import (
    ExtractElementsRequestDTO,
    ExtractElementsResponseDTO,
)
from sketch2flutter.extract_elements.service.extract_elements_service import (
    ExtractElementsService,
    get_extract_elements_service,
)

router = APIRouter(prefix="/code-generator", tags=["extract_elements"])

logger = get_logging()


@router.post("/generate-ui-from-image", response_model=ExtractElementsResponseDTO)
async def generate_ui_from_image(
    body: ExtractElementsRequestDTO,
    service: ExtractElementsService = Depends(get_extract_elements_service),
) -> ExtractElementsResponseDTO:
    if not body.viewId or not body.viewId.strip():
        return ExtractElementsResponseDTO(
            success=False,
            message="View id is required",
            error="viewId is empty",
        )

    try:
        result = await service.extract_ui_elements(
            image=body.image,
            view_id=body.viewId,
            description=body.description,
        )
    except Exception as e:
        logger.error(f"UI 이미지 처리 실패: {e}")
        return ExtractElementsResponseDTO(
            success=False,
            message=f"Error processing UI image: {e}",
            error=str(e),
        )

    return ExtractElementsResponseDTO(
        success=True,
        message="UI elements extracted successfully",
        figuresCount=len(result.created),
        data=result.created,
        failures=result.failures,
    )
