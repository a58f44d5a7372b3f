from fastapi import APIRouter

from backend.api.contracts.api_paths import ApiPaths
from backend.api.routes.v1.analysis import router as analysis_router
from backend.api.routes.v1.guide import router as guide_router
from backend.api.routes.v1.health import router as health_router
from backend.api.routes.v1.info import router as info_router
from backend.api.routes.v1.screening import router as screening_router
from backend.api.routes.v1.settings import router as settings_router
from backend.api.routes.v1.views import router as views_router

v1_router = APIRouter(prefix=ApiPaths().v1_prefix)

v1_router.include_router(health_router)
v1_router.include_router(info_router)
v1_router.include_router(screening_router)
v1_router.include_router(analysis_router)
v1_router.include_router(views_router)
v1_router.include_router(settings_router)
v1_router.include_router(guide_router)
