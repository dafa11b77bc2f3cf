"""Sokobo storefront FastAPI application.

Single-domain web server over the in-memory entity store. Every ``/api``
request runs inside the sokobo domain context so repositories resolve.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sokobo.api.errors import install_error_handlers
from sokobo.api.orders import router as order_router
from sokobo.api.portfolio import router as portfolio_router
from sokobo.api.products import router as product_router
from sokobo.api.site import router as site_router
from sokobo.api.users import auth_router, users_router
from sokobo.config import Settings, get_settings
from sokobo.domain import sokobo
from sokobo.store.seed import seed_demo_data
from sokobo.store.storage import Storage
from sokobo.utils.logging import get_logger, request_scope

# Initialized at module level so uvicorn workers share one domain.
# PROTEAN_ENV selects the domain.toml overlay ("test", "production").
sokobo.init()

logger = get_logger(__name__)

_DOMAIN_PREFIX = "/api"


def create_app(settings: Settings | None = None, storage: Storage | None = None) -> FastAPI:
    """Build the application around one Storage instance.

    Tests pass their own ``settings`` (demo seeding off) and ``storage``.
    """
    settings = settings or get_settings()
    storage = storage or Storage(sokobo)

    if settings.seed_demo_data:
        with sokobo.domain_context():
            seed_demo_data(storage, settings)

    app = FastAPI(
        title=settings.app_name,
        description="Streetwear storefront: catalogue, checkout, portfolio and accounts",
    )
    app.state.settings = settings
    app.state.storage = storage

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the sokobo domain context and bind request logging context."""
        if not request.url.path.startswith(_DOMAIN_PREFIX):
            # Health check, docs, etc.
            return await call_next(request)

        request_id = request.headers.get("x-request-id", uuid.uuid4().hex)
        with request_scope(request_id=request_id, method=request.method, path=request.url.path):
            with sokobo.domain_context():
                response = await call_next(request)
        return response

    install_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(product_router)
    app.include_router(order_router)
    app.include_router(portfolio_router)
    app.include_router(site_router)

    @app.get("/health")
    async def health():
        return JSONResponse(
            content={
                "status": "ok",
                "domain": sokobo.name,
                "environment": settings.environment,
            }
        )

    logger.info("app_created", environment=settings.environment, seeded=settings.seed_demo_data)
    return app


app = create_app()
