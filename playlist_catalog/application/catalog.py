"""In-memory catalog of named playlists.

The Catalog owns an ordered sequence of immutable Playlist records. Every
mutating operation validates its preconditions first, derives a new sequence
with the pure transforms from ``playlist_catalog.domain.transforms`` and swaps
it in with a single assignment, so a failed call never leaves partial state.

Lookups are linear scans by exact name. Playlist names are not required to be
unique; operations that change songs apply to every playlist with a matching
name, while validation looks at the first one.
"""

from collections.abc import Mapping
from typing import Any

from playlist_catalog.config import get_logger
from playlist_catalog.domain.entities import Playlist, Song, SongDraft
from playlist_catalog.domain.exceptions import (
    InvalidSortCriterionError,
    PlaylistNotFoundError,
    SongNotFoundError,
)
from playlist_catalog.domain.transforms import (
    SORT_KEYS,
    Transform,
    append_song,
    create_pipeline,
    remove_songs_titled,
    sort_by_criterion,
    toggle_favorite,
)

logger = get_logger(__name__)


class Catalog:
    """Owner of all playlists and the songs they hold."""

    def __init__(self, playlists: list[Playlist] | None = None) -> None:
        self._playlists: tuple[Playlist, ...] = tuple(playlists or ())

    def __len__(self) -> int:
        return len(self._playlists)

    def __repr__(self) -> str:
        return f"Catalog(playlists={[p.name for p in self._playlists]!r})"

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_all_playlists(self) -> tuple[Playlist, ...]:
        """Return the playlists in creation order."""
        return self._playlists

    def get_playlist(self, name: str) -> Playlist:
        """Return the first playlist with this exact name.

        Raises:
            PlaylistNotFoundError: If no playlist has the name
        """
        for playlist in self._playlists:
            if playlist.name == name:
                return playlist

        logger.warning(f"Playlist not found: {name!r}")
        raise PlaylistNotFoundError(name)

    # -------------------------------------------------------------------------
    # Playlist lifecycle
    # -------------------------------------------------------------------------

    def create_playlist(self, name: str) -> None:
        """Append a new empty playlist. Duplicate names are accepted."""
        self._playlists = (*self._playlists, Playlist(name=name))
        logger.debug(f"Created playlist {name!r} ({len(self._playlists)} total)")

    def remove_playlist(self, name: str) -> None:
        """Remove every playlist with this name. Missing names are ignored."""
        remaining = tuple(p for p in self._playlists if p.name != name)
        removed = len(self._playlists) - len(remaining)
        self._playlists = remaining
        logger.debug(f"Removed {removed} playlist(s) named {name!r}")

    # -------------------------------------------------------------------------
    # Song operations
    # -------------------------------------------------------------------------

    def add_song_to_playlist(
        self, name: str, song: SongDraft | Song | Mapping[str, Any]
    ) -> None:
        """Append a song to the named playlist with its favorite flag cleared.

        Args:
            name: Playlist name
            song: Draft, song or mapping with title, artist, genre and
                duration. Any supplied favorite value is ignored.

        Raises:
            PlaylistNotFoundError: If no playlist has the name
        """
        self.get_playlist(name)
        new_song = _draft_from(song).to_song()
        self._apply(name, append_song(new_song))
        logger.debug(f"Added {new_song.title!r} to playlist {name!r}")

    def remove_song_from_playlist(self, name: str, title: str) -> None:
        """Remove every song with this title from the named playlist.

        Raises:
            PlaylistNotFoundError: If no playlist has the name
            SongNotFoundError: If the playlist has no song with the title
        """
        playlist = self.get_playlist(name)
        if not playlist.has_song(title):
            logger.warning(f"Song {title!r} not found in playlist {name!r}")
            raise SongNotFoundError(name, title)

        self._apply(name, remove_songs_titled(title))
        logger.debug(f"Removed {title!r} from playlist {name!r}")

    def favorite_song(self, name: str, title: str) -> None:
        """Toggle the favorite flag of every song with this title.

        Unlike the other song operations this never raises: an unknown
        playlist or title leaves the catalog unchanged.
        """
        self._apply(name, toggle_favorite(title))
        logger.debug(f"Toggled favorite on {title!r} in playlist {name!r}")

    def sort_songs(self, name: str, criterion: str) -> tuple[Song, ...]:
        """Sort the named playlist ascending by title, artist or duration.

        The new order is stored in the catalog and returned. Ties keep their
        previous relative order.

        Raises:
            PlaylistNotFoundError: If no playlist has the name
            InvalidSortCriterionError: If criterion is not a sortable field
        """
        self.get_playlist(name)
        allowed = tuple(SORT_KEYS)
        if criterion not in allowed:
            logger.warning(f"Rejected sort of {name!r} by {criterion!r}")
            raise InvalidSortCriterionError(criterion, allowed)

        self._apply(name, sort_by_criterion(criterion))
        sorted_playlist = self.get_playlist(name)
        logger.debug(
            f"Sorted playlist {name!r} by {criterion}: {sorted_playlist.titles}"
        )
        return sorted_playlist.songs

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _apply(self, name: str, *transforms: Transform) -> None:
        """Replace every playlist with this name by its copy run through transforms."""
        transform = create_pipeline(*transforms)
        self._playlists = tuple(
            transform(p) if p.name == name else p for p in self._playlists
        )


def _draft_from(song: SongDraft | Song | Mapping[str, Any]) -> SongDraft:
    if isinstance(song, SongDraft):
        return song
    if isinstance(song, Song):
        return SongDraft(
            title=song.title,
            artist=song.artist,
            genre=song.genre,
            duration=song.duration,
        )
    return SongDraft.from_mapping(song)
