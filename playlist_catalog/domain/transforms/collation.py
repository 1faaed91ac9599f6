"""Unicode-aware string ordering for song fields.

Keys come from the Unicode Collation Algorithm (pyuca), so ordering does not
depend on the process locale: "amy" sorts before "Zed" and "Émile" before
"Zoe" even under the C locale.
"""

from functools import lru_cache
from pathlib import Path

from pyuca import Collator

from playlist_catalog.config import get_logger, settings

logger = get_logger(__name__)


@lru_cache(maxsize=4)
def get_collator(table: Path | None = None) -> Collator:
    """Load a collator, from a custom allkeys table when one is given.

    Loading parses the whole table, so collators are cached per table.
    """
    if table is None:
        logger.debug("Loading default Unicode collation table")
        return Collator()

    logger.debug(f"Loading Unicode collation table from {table}")
    return Collator(str(table))


def collation_key(value: str) -> tuple[int, ...]:
    """Sort key comparing strings by the configured collation table."""
    return get_collator(settings.sorting.collation_table).sort_key(value)
