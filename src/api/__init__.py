"""releaseBoard API layer — routes, schemas, and middleware."""

from src.api.middleware import (
    ErrorHandlingMiddleware,
    PermissiveCORSMiddleware,
    RequestLoggingMiddleware,
    configure_cors,
)
from src.api.routes import router
from src.api.schemas import (
    ErrorResponse,
    HealthResponse,
    OptionsResponse,
    ReleaseStatsResponse,
    ReleasesResponse,
    SummaryResponse,
)

__all__ = [
    "ErrorHandlingMiddleware",
    "PermissiveCORSMiddleware",
    "RequestLoggingMiddleware",
    "configure_cors",
    "router",
    "ErrorResponse",
    "HealthResponse",
    "OptionsResponse",
    "ReleaseStatsResponse",
    "ReleasesResponse",
    "SummaryResponse",
]
