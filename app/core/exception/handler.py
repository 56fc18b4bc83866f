from core.exception.error_codes import ERROR_STATUS_CODES
from core.exception.exceptions import ServiceException
from core.log.logging import get_logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = get_logging()


async def service_exception_handler(
    request: Request, exc: ServiceException
) -> JSONResponse:
    logger.error(f"{request.url.path} 처리 실패: {exc.message}")
    return JSONResponse(
        status_code=ERROR_STATUS_CODES.get(exc.error_code, 500),
        content={
            "success": False,
            "message": exc.error_code.value,
            "error": str(exc),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceException, service_exception_handler)
