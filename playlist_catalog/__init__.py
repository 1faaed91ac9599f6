"""In-memory catalog of named playlists and their songs.

```python
from playlist_catalog import Catalog

catalog = Catalog()
catalog.create_playlist("Road Trip")
catalog.add_song_to_playlist(
    "Road Trip", {"title": "Go", "artist": "Zed", "genre": "Pop", "duration": 180}
)
catalog.sort_songs("Road Trip", "artist")
```
"""

from playlist_catalog.application.catalog import Catalog
from playlist_catalog.domain.entities import Playlist, Song, SongDraft
from playlist_catalog.domain.exceptions import (
    CatalogError,
    InvalidSortCriterionError,
    PlaylistNotFoundError,
    SongNotFoundError,
)

__all__ = [
    "Catalog",
    "CatalogError",
    "InvalidSortCriterionError",
    "Playlist",
    "PlaylistNotFoundError",
    "Song",
    "SongDraft",
    "SongNotFoundError",
]
