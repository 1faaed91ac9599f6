"""Pure playlist transformations."""

from .collation import collation_key, get_collator
from .core import (
    SORT_KEYS,
    Transform,
    append_song,
    create_pipeline,
    remove_songs_titled,
    sort_by_criterion,
    toggle_favorite,
)

__all__ = [
    "SORT_KEYS",
    "Transform",
    "append_song",
    "collation_key",
    "create_pipeline",
    "get_collator",
    "remove_songs_titled",
    "sort_by_criterion",
    "toggle_favorite",
]
