"""Application layer: the stateful playlist catalog."""

from .catalog import Catalog

__all__ = ["Catalog"]
