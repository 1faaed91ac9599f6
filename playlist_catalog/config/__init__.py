"""Configuration module for the playlist catalog.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_config(key: str, default=None) -> Any
    Flat-key configuration access

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru sinks for the application

Usage:
------
```python
from playlist_catalog.config import get_logger, settings

logger = get_logger(__name__)
collation_table = settings.sorting.collation_table
```
"""

from .logging import get_logger, setup_loguru_logger
from .settings import Settings, get_config, settings

__all__ = [
    "Settings",
    "get_config",
    "get_logger",
    "settings",
    "setup_loguru_logger",
]
