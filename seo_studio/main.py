from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from seo_studio.api_routers.routers import analysis_router_legacy, api_router
from seo_studio.platform.config import get_settings
from seo_studio.platform.exceptions import add_exception_handlers


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Scrape a page, score it for SEO and draft new content from the analysis",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
    )

    @app.get("/", tags=["Info"])
    def root():
        return {
            "app_name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs_url": "/docs",
            "api_base": "/api",
        }

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_exception_handlers(app)

    app.include_router(api_router, prefix="/api")
    app.include_router(analysis_router_legacy, prefix="/analysis")

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run("seo_studio.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
