"""Core domain entities representing playlist catalog concepts."""

from .playlist import Playlist
from .song import Song, SongDraft

__all__ = [
    "Playlist",
    "Song",
    "SongDraft",
]
