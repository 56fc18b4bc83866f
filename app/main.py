from contextlib import asynccontextmanager
from typing import AsyncGenerator

from core.config import get_setting
from core.exception.handler import register_exception_handlers
from core.log.logging import get_logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sketch2flutter.web.router import router

settings = get_setting()

logger = get_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info(
        f"{settings.APP_NAME} 시작 (environment={settings.ENVIRONMENT}, "
        f"llm={settings.LLM_PROVIDER})"
    )
    if not settings.WORKSPACE_API_URI:
        logger.warning("WORKSPACE_API_URI 가 설정되지 않아 네비게이션/도형 저장 기능이 비활성화됩니다")
    yield
    logger.info(f"{settings.APP_NAME} 종료")


app = FastAPI(
    title="Sketch2Flutter",
    description="Screenshot / sketch to Flutter code generator",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS 미들웨어 추가
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 프로덕션에서는 구체적인 도메인으로 제한
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# 라우터 등록
app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        access_log=False,
    )
