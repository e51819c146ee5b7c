from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from typing import Optional
import logging

from inventory_app.api.routes import health, users, inventory
from inventory_app.config import Settings, settings as default_settings
from inventory_app.errors import InventoryError, NotFoundError
from inventory_app.ids import IdGenerator
from inventory_app.seed import seed_products, seed_users
from inventory_app.services.product_store import ProductStore
from inventory_app.services.user_store import UserStore

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Basic logging setup, skipped when the host already configured handlers."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level.upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        message = err.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "Invalid request: " + "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": message}``."""

    @app.exception_handler(InventoryError)
    async def inventory_error_handler(request: Request, exc: InventoryError):
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _error(400, _describe_validation_error(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # Known path with the wrong method is still an unmatched route.
        if exc.status_code in (404, 405):
            missing = NotFoundError.for_route(request.method, request.url.path)
            return _error(missing.status_code, missing.message)
        return _error(exc.status_code, str(exc.detail))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Announce the listener on startup."""
    logger.info("Inventory backend running on port %s", app.state.settings.port)
    yield


def create_app(
    settings: Optional[Settings] = None,
    user_store: Optional[UserStore] = None,
    product_store: Optional[ProductStore] = None
) -> FastAPI:
    """Build the application with its own stores.

    Stores that are not passed in are created empty and, when
    ``settings.seed_data`` is on, filled with the seed records.
    """
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Inventory API",
        description="In-memory user accounts and inventory with low stock alerts",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
        # Only the listed routes are served; trailing slashes are not rewritten.
        redirect_slashes=False,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    id_generator = IdGenerator()
    if user_store is None:
        user_store = UserStore(id_generator)
        if settings.seed_data:
            seed_users(user_store)
    if product_store is None:
        product_store = ProductStore(id_generator)
        if settings.seed_data:
            seed_products(product_store)

    app.state.settings = settings
    app.state.user_store = user_store
    app.state.product_store = product_store

    # Include routers
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(inventory.router)

    register_exception_handlers(app)

    return app


app = create_app()
