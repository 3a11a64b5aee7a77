from fastapi import APIRouter

from seo_studio.features.content_generation.routes.content_generation import (
    legacy_router as legacy_content_router,
)
from seo_studio.features.content_generation.routes.content_generation import (
    router as content_router,
)
from seo_studio.features.health.routes.health import router as health_router
from seo_studio.features.scraping.routes.scraping import router as scraping_router
from seo_studio.features.seo_analysis.routes.seo_analysis import (
    legacy_router as legacy_analysis_router,
)
from seo_studio.features.seo_analysis.routes.seo_analysis import router as analysis_router

# Mounted under /api
api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(scraping_router)
api_router.include_router(analysis_router)
api_router.include_router(content_router)

# Mounted under /analysis: URL-driven analysis and suggestion-driven writing
analysis_router_legacy = APIRouter()

analysis_router_legacy.include_router(legacy_analysis_router)
analysis_router_legacy.include_router(legacy_content_router)
