from fastapi import APIRouter
from sketch2flutter.extract_elements.web.router import router as extract_elements_router
from sketch2flutter.generate_code.web.router import router as generate_code_router
from sketch2flutter.navigation.web.router import router as navigation_router

router = APIRouter()
router.include_router(generate_code_router)
router.include_router(extract_elements_router)
router.include_router(navigation_router)
