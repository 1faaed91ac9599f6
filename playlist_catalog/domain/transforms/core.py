"""
Pure functional transformations for playlists.

Every function returns a new Playlist and leaves its input untouched. Each
one is curried: called without a playlist it returns a transform that can be
composed with ``create_pipeline``; called with one it applies immediately.
"""

from collections.abc import Callable
from typing import Any

from toolz import compose_left, curry

from playlist_catalog.domain.entities.playlist import Playlist
from playlist_catalog.domain.entities.song import Song

from .collation import collation_key

# Type alias for transformation functions
Transform = Callable[[Playlist], Playlist]

# Sort key builders by criterion
SORT_KEYS: dict[str, Callable[[Song], Any]] = {
    "title": lambda song: collation_key(song.title),
    "artist": lambda song: collation_key(song.artist),
    "duration": lambda song: song.duration,
}


def create_pipeline(*operations: Transform) -> Transform:
    """Compose multiple transformations into a single operation."""
    return compose_left(*operations)


@curry
def append_song(song: Song, playlist: Playlist | None = None) -> Transform | Playlist:
    """
    Add a song to the end of a playlist.

    Args:
        song: Song to append
        playlist: Optional playlist to transform immediately

    Returns:
        Transformation function or transformed playlist if provided
    """

    def transform(p: Playlist) -> Playlist:
        return p.with_songs([*p.songs, song])

    return transform(playlist) if playlist is not None else transform


@curry
def remove_songs_titled(
    title: str, playlist: Playlist | None = None
) -> Transform | Playlist:
    """
    Drop every song whose title matches exactly.

    Args:
        title: Song title to remove
        playlist: Optional playlist to transform immediately

    Returns:
        Transformation function or transformed playlist if provided
    """

    def transform(p: Playlist) -> Playlist:
        return p.with_songs([song for song in p.songs if song.title != title])

    return transform(playlist) if playlist is not None else transform


@curry
def toggle_favorite(title: str, playlist: Playlist | None = None) -> Transform | Playlist:
    """Flip the favorite flag of every song with the given title."""

    def transform(p: Playlist) -> Playlist:
        return p.with_songs(
            [
                song.toggle_favorite() if song.title == title else song
                for song in p.songs
            ]
        )

    return transform(playlist) if playlist is not None else transform


@curry
def sort_by_criterion(
    criterion: str, playlist: Playlist | None = None
) -> Transform | Playlist:
    """
    Order songs ascending by title, artist or duration.

    Strings are compared with the active locale collation; durations
    numerically. The sort is stable, so ties keep their prior order.

    Args:
        criterion: One of the keys of ``SORT_KEYS``
        playlist: Optional playlist to transform immediately

    Returns:
        Transformation function or transformed playlist if provided

    Raises:
        KeyError: If the criterion has no sort key
    """
    key_fn = SORT_KEYS[criterion]

    def transform(p: Playlist) -> Playlist:
        return p.with_songs(sorted(p.songs, key=key_fn))

    return transform(playlist) if playlist is not None else transform
