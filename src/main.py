"""releaseBoard FastAPI application entry point.

Wires the spreadsheet reader, dataset cache, and query services together,
loads configuration from ``.env`` and ``config/config.yaml``, and
configures structured logging.

Run locally with ``python -m src.main`` or ``uvicorn src.main:app``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

import structlog
import uvicorn
from fastapi import FastAPI

from src.api.middleware import (
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    configure_cors,
)
from src.api.routes import API_VERSION
from src.api.routes import router as api_router
from src.config.loader import (
    build_column_mapping,
    build_summary_columns,
    build_summary_files,
    load_config,
)
from src.config.settings import Settings
from src.providers.cache.dataset_cache import DatasetCache
from src.providers.spreadsheet.openpyxl_reader import OpenpyxlSpreadsheetReader
from src.services.release_query_service import ReleaseQueryService
from src.services.summary_service import SummaryService
from src.utils.logging import configure_logging, get_logger

# ---------------------------------------------------------------------------
# Module-level settings & logging
# ---------------------------------------------------------------------------

settings = Settings()

configure_logging(
    log_level=settings.log_level,
    json_output=(settings.app_env == "production"),
)
_logger: structlog.BoundLogger = get_logger(__name__)


# ---------------------------------------------------------------------------
# DI assembly
# ---------------------------------------------------------------------------


def _build_all(app_settings: Settings) -> dict[str, Any]:
    """Construct every provider and service instance for the application.

    Returns a flat dict of named components to be stored on ``app.state``.
    """
    config = load_config(app_settings.config_path)
    reader = OpenpyxlSpreadsheetReader()

    dataset_cache = DatasetCache(
        path=app_settings.releases_path,
        reader=reader,
        columns=build_column_mapping(config),
    )
    release_service = ReleaseQueryService(
        cache=dataset_cache,
        default_limit=app_settings.releases_default_limit,
        max_limit=app_settings.releases_max_limit,
        top_n=app_settings.stats_top_n,
    )
    summary_service = SummaryService(
        data_dir=app_settings.data_dir,
        reader=reader,
        files=build_summary_files(config),
        columns=build_summary_columns(config),
        cache_size=app_settings.summary_cache_size,
    )

    return {
        "dataset_cache": dataset_cache,
        "release_service": release_service,
        "summary_service": summary_service,
    }


# ---------------------------------------------------------------------------
# FastAPI application factory
# ---------------------------------------------------------------------------


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build and configure the FastAPI application.

    Parameters
    ----------
    app_settings:
        Settings to wire the services with; defaults to the module-level
        ``settings``.  Tests pass a Settings pointing at a temp directory.
    """
    s = app_settings or settings

    @asynccontextmanager
    async def _lifespan(application: FastAPI):  # noqa: ANN202
        components = _build_all(s)
        for key, value in components.items():
            setattr(application.state, key, value)

        _logger.info(
            "app_startup",
            version=API_VERSION,
            environment=s.app_env,
            releases_path=str(s.releases_path),
        )
        yield
        _logger.info("app_shutdown")

    application = FastAPI(
        title="releaseBoard API",
        version=API_VERSION,
        description=(
            "Read-only JSON endpoints over a spreadsheet of music releases: "
            "filtered listings, aggregate stats, filter options, and "
            "pre-aggregated summaries."
        ),
        lifespan=_lifespan,
    )

    # -- Middleware (order matters: last added = first executed) --
    application.add_middleware(ErrorHandlingMiddleware)
    application.add_middleware(RequestLoggingMiddleware)
    configure_cors(application)

    application.include_router(api_router)
    return application


app = create_app()

# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    uvicorn.run(
        "src.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=(settings.app_env == "development"),
    )
