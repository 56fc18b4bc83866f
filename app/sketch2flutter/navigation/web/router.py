from fastapi import APIRouter
from sketch2flutter.navigation.controller.navigation_controller import (
    router as navigation_router,
)

router = APIRouter()
router.include_router(navigation_router)
