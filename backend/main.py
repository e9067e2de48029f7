"""FastAPI backend for SiteForge: streamed website mockups, payments, admin."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from siteforge import __version__
from siteforge.config import Settings, get_settings
from siteforge.state import AppState, build_state

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


# ---------------------------------------------------------------------------
# Basic in-memory rate limiter (per IP, 30 requests / 60 s for mutating routes)
# ---------------------------------------------------------------------------
RATE_LIMIT_WINDOW = 60  # seconds
RATE_LIMIT_MAX = 30  # max requests per window


def _install_rate_limiter(app: FastAPI) -> None:
    rate_store: dict[str, list[float]] = {}
    app.state.rate_store = rate_store

    @app.middleware("http")
    async def rate_limit_middleware(request: Request, call_next):
        """Simple sliding-window rate limiter for non-GET routes."""
        if request.method in ("GET", "HEAD", "OPTIONS"):
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        now = time.time()
        for ip in [ip for ip, hits in rate_store.items() if not hits or now - hits[-1] >= RATE_LIMIT_WINDOW]:
            del rate_store[ip]
        recent = [t for t in rate_store.get(client_ip, []) if now - t < RATE_LIMIT_WINDOW]
        if len(recent) >= RATE_LIMIT_MAX:
            rate_store[client_ip] = recent
            return JSONResponse(
                status_code=429,
                content={"success": False, "error": "Rate limit exceeded. Try again later."},
            )
        recent.append(now)
        rate_store[client_ip] = recent
        return await call_next(request)


class HealthResponse(BaseModel):
    status: str
    active_jobs: int


def create_app(state: AppState | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the app. A prebuilt ``state`` is used as-is and not closed on shutdown."""
    settings = state.settings if state is not None else (settings or get_settings())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = state is None
        app.state.services = state if state is not None else build_state(settings)
        logger.info("SiteForge API %s started", __version__)
        yield
        if owned:
            await app.state.services.aclose()

    app = FastAPI(
        title="SiteForge API",
        description="AI-generated website mockups streamed over SSE, with Razorpay checkout.",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )

    _install_rate_limiter(app)

    # CORS is added last so it is the outermost middleware (Starlette is LIFO)
    # and its headers land on 429 responses too.
    cors_kw: dict = {
        "allow_origins": settings.cors_origin_list,
        "allow_credentials": True,
        "allow_methods": ["*"],
        "allow_headers": ["*"],
    }
    if settings.cors_origin_regex:
        cors_kw["allow_origin_regex"] = settings.cors_origin_regex
    logger.info("CORS configured for origins: %s", settings.cors_origin_list)
    app.add_middleware(CORSMiddleware, **cors_kw)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Errors go out as ``{success: false, error}``, the shape the web clients read."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.get("/health", response_model=HealthResponse)
    @app.get("/api/health", response_model=HealthResponse)
    async def health(request: Request):
        """Health check endpoint."""
        return HealthResponse(status="ok", active_jobs=request.app.state.services.jobs.count())

    from backend.routes import admin, generation, payment

    app.include_router(generation.router, prefix="/api", tags=["generation"])
    app.include_router(payment.router, prefix="/api", tags=["payment"])
    app.include_router(admin.router, prefix="/api", tags=["admin"])
    return app


app = create_app()
