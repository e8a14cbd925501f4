"""
FastAPI application factory for the Space Explorer dashboard.

Usage:
    python -m api.app                    # Dev server on port 8000
    CATALOG_URL=http://localhost:9000/bodies python -m api.app

OpenAPI docs available at http://localhost:8000/docs after starting.

The catalogue is fetched exactly once, in the lifespan handler, and kept in
memory for the life of the process.  A failed fetch leaves the app serving
its error state; there is no retry.

Structured JSON logging when APP_LOG_FORMAT=json.
CORS middleware with configurable origins via APP_CORS_ORIGINS.
"""

import json
import logging
import time
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool

from api.routes import bodies, dashboard
from api.routes import frontend as frontend_routes
from catalog.client import make_fetcher
from catalog.errors import CatalogUnavailableError
from catalog.store import CatalogStore, LoadStatus
from utils.config import AppConfig
from utils.formatting import format_average, format_count, format_diameter, format_distance

# ── Configuration ─────────────────────────────────────────────────────────────
_cfg = AppConfig.from_env()

# ── Structured JSON logging ──────────────────────────────────────────────────


class _JsonFormatter(logging.Formatter):
    """Emit log records as newline-delimited JSON."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Merge extra fields added via logger.info("...", extra={...})
        for key in ("method", "path", "status", "duration_ms", "request_id"):
            if hasattr(record, key):
                data[key] = getattr(record, key)
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data)


_logger = logging.getLogger("space_explorer_api")
_handler = logging.StreamHandler()
if _cfg.log_format == "json":
    _handler.setFormatter(_JsonFormatter())
else:
    _handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    )
logging.basicConfig(handlers=[_handler], level=logging.INFO, force=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fetch and normalize the catalogue once on startup."""
    store: CatalogStore = app.state.store
    snap = await run_in_threadpool(store.load)
    if snap.status is LoadStatus.ERROR:
        _logger.error("startup fetch failed: %s", snap.error)
    else:
        _logger.info("startup fetch complete bodies=%d", len(snap.dataset))
    yield


def create_app(store: CatalogStore | None = None,
               config: AppConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Catalogue store to serve (useful for testing).  Defaults to
               one that fetches ``config.catalog_url``.
        config: Application config (default: read from the environment).

    Returns:
        Configured FastAPI application instance.
    """
    cfg = config or _cfg
    _logger.info("app config: %s", cfg.to_dict())
    if store is None:
        store = CatalogStore(
            make_fetcher(cfg.catalog_url, timeout=cfg.catalog_timeout),
            source_url=cfg.catalog_url,
        )

    app = FastAPI(
        title="Space Explorer API",
        summary="Planets and dwarf planets from the Solar System OpenData catalogue.",
        description=(
            "## Space Explorer API\n\n"
            "Serves a normalized snapshot of the first 15 planets and dwarf planets "
            "published by the Solar System OpenData API.\n\n"
            "### Key concepts\n"
            "- **Distance** is the semi-major axis in astronomical units, rounded "
            "to two decimals.\n"
            "- **Diameter** is twice the mean radius, in kilometres.\n"
            "- Unknown measurements are `null`.\n"
            "- **Statistics** always cover the whole catalogue, never the "
            "filtered subset; unknown diameters count as zero in the average.\n\n"
            "### Data freshness\n"
            "The catalogue is fetched once when the server starts."
        ),
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {
                "name": "bodies",
                "description": "Filter the catalogue by name and category.",
            },
            {
                "name": "dashboard",
                "description": "Load status and whole-catalogue statistics.",
            },
            {
                "name": "meta",
                "description": "Health check.",
            },
        ],
    )
    app.state.store = store

    # ── CORS middleware ───────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "HEAD", "OPTIONS"],
        allow_headers=["*"],
    )

    # ── Request logging middleware ────────────────────────────────────────────

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log each request with its duration and a short request ID."""
        request_id = str(uuid.uuid4())[:8]
        start = time.monotonic()
        path = request.url.path

        response = await call_next(request)
        duration_ms = (time.monotonic() - start) * 1000
        response.headers["X-Request-ID"] = request_id

        if cfg.log_format == "json":
            _logger.info(
                "request",
                extra={
                    "method": request.method,
                    "path": path,
                    "status": response.status_code,
                    "duration_ms": round(duration_ms, 1),
                    "request_id": request_id,
                },
            )
        else:
            _logger.info(
                "method=%s path=%s status=%d duration_ms=%.1f rid=%s",
                request.method, path, response.status_code, duration_ms,
                request_id,
            )
        return response

    # ── Content Security Policy + security headers ────────────────────────────

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        """Add Content-Security-Policy, X-Content-Type-Options, and X-Frame-Options."""
        response = await call_next(request)
        # 'self' plus the CDN that serves HTMX.
        response.headers["Content-Security-Policy"] = (
            "default-src 'self'; "
            "script-src 'self' unpkg.com; "
            "style-src 'self' 'unsafe-inline'; "
            "img-src 'self' data:; "
            "connect-src 'self';"
        )
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        return response

    # ── Error handling ────────────────────────────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        """Catch unhandled exceptions and return JSON instead of HTML traceback."""
        _logger.exception("unhandled error path=%s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "detail": str(exc),
                "status_code": 500,
            },
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        return JSONResponse(
            status_code=400,
            content={"error": "Bad request", "detail": str(exc), "status_code": 400},
        )

    @app.exception_handler(CatalogUnavailableError)
    async def catalog_unavailable_handler(request: Request, exc: CatalogUnavailableError):
        return JSONResponse(
            status_code=503,
            content={
                "error": "Catalogue unavailable",
                "detail": exc.message,
                "status_code": 503,
            },
        )

    # ── Health check ──────────────────────────────────────────────────────────

    @app.get("/health", tags=["meta"], summary="Health check")
    def health():
        """Return 200 OK once the catalogue is loaded, 503 otherwise."""
        snap = app.state.store.snapshot()
        if snap.ready:
            return {"status": "ok", "bodies": len(snap.dataset), "source": snap.source_url}
        return JSONResponse(
            status_code=503,
            content={"status": snap.status.value, "error": snap.error},
        )

    # ── Register routers ──────────────────────────────────────────────────────

    prefix = "/api/v1"
    app.include_router(bodies.router,    prefix=prefix)
    app.include_router(dashboard.router, prefix=prefix)

    # ── Static files + Jinja2 templates ───────────────────────────────────────
    _here = Path(__file__).parent.parent  # project root

    static_dir = _here / "static"
    templates_dir = _here / "templates"

    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    if templates_dir.exists():
        templates = Jinja2Templates(directory=str(templates_dir))
        templates.env.filters["fmt_distance"] = format_distance
        templates.env.filters["fmt_diameter"] = format_diameter
        templates.env.filters["fmt_average"] = format_average
        templates.env.filters["fmt_count"] = format_count

        # Wire templates into the frontend router
        frontend_routes.set_templates(templates)
        app.include_router(frontend_routes.router)

    return app


# Singleton instance for uvicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.app:app",
        host=_cfg.api_host,
        port=_cfg.api_port,
        reload=True,
        log_level="info",
    )
