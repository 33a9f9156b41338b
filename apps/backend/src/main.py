from fastapi import FastAPI
from .config import settings
from .middleware import CorsPolicyMiddleware
from .api.routes_health import router as health_router


def create_app() -> FastAPI:
    app = FastAPI(
        title=f"{settings.SERVICE_NAME} API",
        version="0.1.0",
        description="Development backend for the RailRakshak mobile app: CORS-open API with a health probe."
    )

    # Open CORS for every route (dev only)
    app.add_middleware(CorsPolicyMiddleware)

    # Register routers
    app.include_router(health_router)
    return app


app = create_app()
