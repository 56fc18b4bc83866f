from fastapi import APIRouter
from sketch2flutter.extract_elements.controller.extract_elements_controller import (
    router as extract_elements_router,
)

router = APIRouter()
router.include_router(extract_elements_router)
