# FastAPI entrypoint
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
import uvicorn

from insight_hub.core.config import Settings, settings
from insight_hub.core.insight_repository import InsightRepository, format_errors
from insight_hub.core.timer_store import TimerStore
from insight_hub.api.v1.routes_health import router as health_router
from insight_hub.api.v1.routes_insights import router as insights_router
from insight_hub.api.v1.routes_timers import router as timers_router

import logging

# Configure global logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(message)s"
)

logger = logging.getLogger(__name__)

API_ENDPOINTS = {
    "insights": {
        "getAll": "GET /api/insights",
        "getOne": "GET /api/insights/:id",
        "search": "GET /api/insights/search/:query",
        "byTag": "GET /api/insights/tag/:tag",
        "create": "POST /api/insights",
        "update": "PUT /api/insights/:id",
        "delete": "DELETE /api/insights/:id",
    },
    "timers": {
        "getAll": "GET /api/timers",
        "getOne": "GET /api/timers/:id",
        "create": "POST /api/timers",
        "update": "PUT /api/timers/:id",
        "delete": "DELETE /api/timers/:id",
    },
}


def _serve_spa(app: FastAPI, static_dir: Path) -> None:
    """Serve files from ``static_dir``, falling back to index.html for client-side routes."""

    root = static_dir.resolve()
    index_file = root / "index.html"

    @app.get("/{full_path:path}", include_in_schema=False)
    def spa(full_path: str):
        if full_path == "api" or full_path.startswith("api/"):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

        candidate = (root / full_path).resolve()
        if full_path and candidate.is_file() and candidate.is_relative_to(root):
            return FileResponse(candidate)
        if index_file.is_file():
            return FileResponse(index_file)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")


def create_app(
    config: Optional[Settings] = None,
    insight_repository: Optional[InsightRepository] = None,
    timer_store: Optional[TimerStore] = None,
) -> FastAPI:
    cfg = config or settings

    if insight_repository is None:
        insight_repository = InsightRepository()
        if cfg.SEED_SAMPLE_DATA:
            insight_repository.seed_sample_data()

    app = FastAPI(title="Insight Hub", version=cfg.API_VERSION)
    app.state.config = cfg
    app.state.insight_repository = insight_repository
    app.state.timer_store = timer_store if timer_store is not None else TimerStore()

    # CORS setup
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = format_errors(exc.errors())
        if request.url.path.startswith("/api/insights"):
            content = {"success": False, "errors": errors}
        else:
            content = {"detail": "; ".join(errors)}
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": "Internal server error"},
        )

    @app.get("/api")
    def api_index():
        return {
            "message": "Engineering Insights Platform API",
            "version": cfg.API_VERSION,
            "endpoints": API_ENDPOINTS,
        }

    # Routers
    app.include_router(health_router, prefix="/api")
    app.include_router(insights_router, prefix="/api")
    app.include_router(timers_router, prefix="/api")

    if cfg.STATIC_DIR:
        static_dir = Path(cfg.STATIC_DIR)
        if static_dir.is_dir():
            _serve_spa(app, static_dir)
        else:
            logger.warning(f"STATIC_DIR {static_dir} does not exist; SPA hosting disabled")

    logger.info(f"Insight Hub ready with {len(insight_repository)} insight(s)")
    return app


app = create_app()


def run() -> None:
    """Start the API with uvicorn on the configured host and port."""

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
