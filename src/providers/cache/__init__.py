"""Cache providers.

DatasetCache keeps the parsed release workbook in memory keyed by the
file's modification time.  It lives in one process; each worker of a
multi-worker deployment parses the file once on its own.
"""

from src.providers.cache.dataset_cache import DatasetCache

__all__ = ["DatasetCache"]
