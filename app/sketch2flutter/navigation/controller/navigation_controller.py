from core.log.logging import get_logging
from fastapi import APIRouter, Depends
from sketch2flutter.navigation.controller.dto.navigation_dto import (
    NavigationResponseDTO,
    to_navigation_data,
)
from sketch2flutter.navigation.service.navigation_service import (
    NavigationService,
    get_navigation_service,
)

router = APIRouter(prefix="/code-generator", tags=["navigation"])

logger = get_logging()


@router.get("/navigation/{project_id}", response_model=NavigationResponseDTO)
async def generate_navigation(
    project_id: str,
    service: NavigationService = Depends(get_navigation_service),
) -> NavigationResponseDTO:
    try:
        bundle = await service.generate_navigation(project_id)
    except Exception as e:
        logger.error(f"네비게이션 생성 실패: {e}")
        return NavigationResponseDTO(
            success=False,
            message=f"Error generating navigation: {e}",
            error=str(e),
        )

    if bundle is None:
        return NavigationResponseDTO(
            success=True,
            message="Project has fewer than 2 views; no navigation generated",
        )
    return NavigationResponseDTO(
        success=True,
        message="Navigation generated successfully",
        data=to_navigation_data(bundle),
    )
