"""Song-related domain entities.

Pure song representations with no dependencies beyond attrs.
"""

from collections.abc import Mapping
from typing import Any

import attrs
from attrs import define, field, validators

_duration_validator = validators.instance_of((int, float))


@define(frozen=True, slots=True)
class SongDraft:
    """Caller-supplied song data, before it is placed in a playlist."""

    title: str = field(validator=validators.instance_of(str))
    artist: str = field(validator=validators.instance_of(str))
    genre: str = field(validator=validators.instance_of(str))
    duration: int | float = field(validator=_duration_validator)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SongDraft":
        """Build a draft from a plain mapping, ignoring unknown keys."""
        return cls(
            title=data["title"],
            artist=data["artist"],
            genre=data["genre"],
            duration=data["duration"],
        )

    def to_song(self) -> "Song":
        """Materialize the draft as a song that is not yet a favorite."""
        return Song(
            title=self.title,
            artist=self.artist,
            genre=self.genre,
            duration=self.duration,
        )


@define(frozen=True, slots=True)
class Song:
    """Immutable track record held by a playlist.

    Durations are in seconds.
    """

    title: str = field(validator=validators.instance_of(str))
    artist: str = field(validator=validators.instance_of(str))
    genre: str = field(validator=validators.instance_of(str))
    duration: int | float = field(validator=_duration_validator)
    favorite: bool = field(default=False, validator=validators.instance_of(bool))

    def with_favorite(self, favorite: bool) -> "Song":
        """Create a new song with the given favorite flag."""
        return attrs.evolve(self, favorite=favorite)

    def toggle_favorite(self) -> "Song":
        """Create a new song with the favorite flag flipped."""
        return self.with_favorite(not self.favorite)
