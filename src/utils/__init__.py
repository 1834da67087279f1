"""Utility modules for releaseBoard.

- **country_canonicalizer** -- alias table collapsing country spellings
  ("UAE", "U.A.E.") into one display name for option listings.
- **dates** -- spreadsheet cell to UTC ``datetime`` coercion (real dates,
  legacy serial numbers, free text) and ISO-8601 rendering.
- **errors** -- exception hierarchy rooted at ReleaseBoardError; each
  class carries the HTTP status the API answers with.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
- **query_params** -- folds repeated / comma-separated query values into
  canonical sets and parses lenient numeric parameters.
"""
