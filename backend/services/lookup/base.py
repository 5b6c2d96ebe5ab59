"""Abstract base class for the table-backed lookup resolvers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any
import logging

from services.lookup.cache import LookupCache
from services.lookup.table_reader import read_table

logger = logging.getLogger(__name__)


class BaseTableResolver(ABC):
    """Base class for resolvers that consult a bundled table before heuristics.

    Subclasses must implement:
        - resolver_name: identifier used for the table cache key
        - resolve(...): the tiered lookup itself

    and may override index_rows() to reshape the raw rows once at load time.
    """

    resolver_name: str = ""

    def __init__(self, cache: LookupCache, data_dir: Path, table_file: str) -> None:
        self.cache = cache
        self.data_dir = Path(data_dir)
        self.table_file = table_file

    @property
    def table_key(self) -> str:
        return f"table:{self.resolver_name}"

    @property
    def table_path(self) -> Path:
        return self.data_dir / self.table_file

    def index_rows(self, rows: list[dict[str, str]]) -> Any:
        """Shape raw rows for lookup. Default keeps the row list."""
        return rows

    def load_table(self) -> Any | None:
        """Return the indexed table, loading it on first use.

        A failed load is logged and reported as None so callers fall through
        to their next tier. Failures are not cached; a later call retries.
        """
        table = self.cache.get(self.table_key)
        if table is not None:
            return table

        try:
            rows = read_table(self.table_path)
        except (OSError, ValueError) as e:
            logger.warning("Table unavailable for %s (%s): %s", self.resolver_name, self.table_path, e)
            return None

        table = self.index_rows(rows)
        self.cache.set(self.table_key, table)
        logger.info("Loaded %s table: %d rows from %s", self.resolver_name, len(rows), self.table_path)
        return table

    @abstractmethod
    def resolve(self, *args: Any, **kwargs: Any) -> Any:
        """Run the tiered lookup."""
