from fastapi import APIRouter
from sketch2flutter.generate_code.controller.generate_code_controller import (
    router as generate_code_router,
)

router = APIRouter()
router.include_router(generate_code_router)
