"""
FastAPI application factory.

Development mode renders the page shell from the packaged templates on
every request; production mode serves the output of `livehouse build`
with a fallback to its index.html for unknown paths.
"""
import logging
import sqlite3
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

import livehouse.config as cfg_module
import livehouse.db as db_module
from livehouse import __version__
from livehouse.api import pages
from livehouse.api import router as api_router
from livehouse.auth import AdminSessions
from livehouse.errors import STATUS_BAD_REQUEST, STATUS_INTERNAL_ERROR, error_body
from livehouse.generator.build import STATIC_DIR, make_env
from livehouse.uploads import URL_PREFIX

logger = logging.getLogger(__name__)


def init_store(db_path: Path) -> int:
    """Create/migrate the events table and seed it when empty. Returns the number seeded."""
    conn = db_module.connect(db_path)
    try:
        return db_module.seed_if_empty(conn)
    finally:
        conn.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_store(app.state.db_path)
    logger.info(
        "livehouse ready (%s mode, database %s)",
        "production" if app.state.production else "development",
        app.state.db_path,
    )
    yield


def create_app(cfg: dict) -> FastAPI:
    app = FastAPI(title="livehouse", version=__version__, lifespan=lifespan)

    app.state.cfg = cfg
    app.state.db_path = cfg_module.get_database_path(cfg)
    app.state.upload_dir = cfg_module.get_upload_dir(cfg)
    app.state.production = cfg_module.is_production(cfg)
    app.state.sessions = AdminSessions(cfg_module.get_admin_password(cfg))
    app.state.jinja_env = make_env(cfg)

    _install_error_handlers(app)

    app.include_router(api_router)
    app.include_router(pages.router)

    app.state.upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount(URL_PREFIX, StaticFiles(directory=app.state.upload_dir), name="uploads")

    if app.state.production:
        _mount_dist(app, cfg_module.get_dist_dir(cfg))
    else:
        app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
        app.add_api_route("/", pages.index_page, methods=["GET"], include_in_schema=False)

    return app


def _mount_dist(app: FastAPI, dist_dir: Path) -> None:
    index = dist_dir / "index.html"
    if not index.exists():
        raise FileNotFoundError(f"'{index}' is missing. Run 'livehouse build' first.")

    app.mount("/static", StaticFiles(directory=dist_dir / "static"), name="static")

    @app.get("/{path:path}", include_in_schema=False)
    def spa_fallback(path: str):
        if path.startswith("api/"):
            return JSONResponse(status_code=404, content=error_body("Not Found"))
        return FileResponse(index)


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        where = ".".join(str(p) for p in errors[0]["loc"]) if errors else "request"
        return JSONResponse(status_code=STATUS_BAD_REQUEST, content=error_body(f"Invalid {where}"))

    @app.exception_handler(sqlite3.Error)
    async def store_exception_handler(request: Request, exc: sqlite3.Error):
        logger.error("Store error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=STATUS_INTERNAL_ERROR, content=error_body("Operation failed"))
