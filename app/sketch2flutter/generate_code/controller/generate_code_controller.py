from datetime import datetime, timezone

from core.log.logging import get_logging
from fastapi import APIRouter, Depends
from sketch2flutter.generate_code.controller.dto.generate_code_dto import (
    GenerateCodeResponseDTO,
    GenerateFromPromptRequestDTO,
    GenerateFromScreenshotRequestDTO,
    to_generated_code,
)
from sketch2flutter.generate_code.service.generate_code_service import (
    GenerateCodeService,
    get_generate_code_service,
)

router = APIRouter(prefix="/code-generator", tags=["generate_code"])

logger = get_logging()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _missing_page_name() -> GenerateCodeResponseDTO:
    return GenerateCodeResponseDTO(
        success=False,
        message="Page name is required",
        error="pageName is empty",
    )


@router.post(
    "/generate-flutter-from-screenshot", response_model=GenerateCodeResponseDTO
)
async def generate_flutter_from_screenshot(
    body: GenerateFromScreenshotRequestDTO,
    service: GenerateCodeService = Depends(get_generate_code_service),
) -> GenerateCodeResponseDTO:
    if not body.pageName or not body.pageName.strip():
        return _missing_page_name()

    try:
        bundle = await service.generate_from_image(
            image=body.image,
            page_name=body.pageName,
            description=body.description,
            project_id=body.projectId,
        )
    except Exception as e:
        logger.error(f"스크린샷 기반 코드 생성 실패: {e}")
        return GenerateCodeResponseDTO(
            success=False,
            message="Error generating Flutter code from screenshot",
            error=str(e),
        )

    return GenerateCodeResponseDTO(
        success=True,
        message="Flutter code generated successfully",
        data=to_generated_code(bundle),
        generatedAt=_now(),
    )


@router.post("/generate-flutter-from-prompt", response_model=GenerateCodeResponseDTO)
async def generate_flutter_from_prompt(
    body: GenerateFromPromptRequestDTO,
    service: GenerateCodeService = Depends(get_generate_code_service),
) -> GenerateCodeResponseDTO:
    if not body.pageName or not body.pageName.strip():
        return _missing_page_name()
    if not body.prompt or not body.prompt.strip():
        return GenerateCodeResponseDTO(
            success=False,
            message="Prompt is required",
            error="prompt is empty",
        )

    try:
        bundle = await service.generate_from_prompt(
            prompt=body.prompt,
            page_name=body.pageName,
            description=body.description,
            project_id=body.projectId,
        )
    except Exception as e:
        logger.error(f"프롬프트 기반 코드 생성 실패: {e}")
        return GenerateCodeResponseDTO(
            success=False,
            message="Error generating Flutter code from prompt",
            error=str(e),
        )

    return GenerateCodeResponseDTO(
        success=True,
        message="Flutter code generated successfully",
        data=to_generated_code(bundle),
        generatedAt=_now(),
    )
