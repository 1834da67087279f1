"""Custom exception hierarchy for releaseBoard.

All application exceptions inherit from :class:`ReleaseBoardError`, which
carries an optional ``source`` naming the file or component that caused
the failure, and an ``http_status`` class attribute that the API
middleware uses to pick the response code.

    ReleaseBoardError  (base -- catch-all for any releaseBoard error)
    +-- DataUnavailableError     (backing spreadsheet missing / unreadable)
    |   +-- SummaryNotFoundError (pre-aggregated summary file absent)
    +-- BadRequestError          (unrecognised request parameter value)
    +-- InternalError            (unexpected parse / runtime failure)
    +-- ConfigurationError       (startup / invalid config)
"""


class ReleaseBoardError(Exception):
    """Base exception for all releaseBoard errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``source``.  The ``__str__`` method prefixes the source in brackets
    for structured log output, e.g. ``[NewReleases.xlsx] File not found``.
    """

    http_status: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        source: str | None = None,
    ) -> None:
        self._message = message
        self._source = source
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def source(self) -> str | None:
        return self._source

    def __str__(self) -> str:
        if self._source:
            return f"[{self._source}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Data access errors
# ---------------------------------------------------------------------------

class DataUnavailableError(ReleaseBoardError):
    """Raised when a backing spreadsheet is missing or cannot be read.

    The previously cached dataset (if any) is left in place when this is
    raised during a refresh.
    """

    def __init__(
        self,
        message: str = "Data file is unavailable",
        source: str | None = None,
    ) -> None:
        super().__init__(message=message, source=source)


class SummaryNotFoundError(DataUnavailableError):
    """Raised when a summary file has not been uploaded yet."""

    http_status = 404

    def __init__(
        self,
        message: str = "Summary file not found",
        source: str | None = None,
    ) -> None:
        super().__init__(message=message, source=source)


# ---------------------------------------------------------------------------
# Request / runtime errors
# ---------------------------------------------------------------------------

class BadRequestError(ReleaseBoardError):
    """Raised when a request parameter has an unrecognised value."""

    http_status = 400

    def __init__(
        self,
        message: str = "Bad request",
        source: str | None = None,
    ) -> None:
        super().__init__(message=message, source=source)


class InternalError(ReleaseBoardError):
    """Wraps an unexpected exception so it can be reported uniformly."""

    def __init__(
        self,
        message: str = "Internal error",
        source: str | None = None,
    ) -> None:
        super().__init__(message=message, source=source)


class ConfigurationError(ReleaseBoardError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        source: str | None = None,
    ) -> None:
        super().__init__(message=message, source=source)
