"""Playlist-related domain entities."""

import attrs
from attrs import define, field, validators

from .song import Song


def _to_tuple(songs) -> tuple[Song, ...]:
    return tuple(songs)


@define(frozen=True, slots=True)
class Playlist:
    """Named, ordered collection of songs.

    Insertion order is meaningful until the playlist is sorted. Songs are held
    in a tuple so a playlist handed out by the catalog cannot be mutated in
    place.
    """

    name: str = field(validator=validators.instance_of(str))
    songs: tuple[Song, ...] = field(
        factory=tuple,
        converter=_to_tuple,
        validator=validators.deep_iterable(
            member_validator=validators.instance_of(Song),
        ),
    )

    def with_songs(self, songs) -> "Playlist":
        """Create a new playlist with the given songs."""
        return attrs.evolve(self, songs=songs)

    def has_song(self, title: str) -> bool:
        """Check whether any song in the playlist has exactly this title."""
        return any(song.title == title for song in self.songs)

    @property
    def titles(self) -> list[str]:
        """Get song titles in playlist order."""
        return [song.title for song in self.songs]
