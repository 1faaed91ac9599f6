"""Shared test fixtures - plain domain objects with no external dependencies.

Function-scoped so every test starts from a fresh catalog.
"""

import pytest

from playlist_catalog import Catalog, SongDraft


@pytest.fixture
def catalog():
    """Empty catalog."""
    return Catalog()


@pytest.fixture
def song_draft():
    """Basic song draft."""
    return SongDraft(title="A", artist="B", genre="Rock", duration=200)


@pytest.fixture
def song_drafts():
    """Drafts with unsorted durations and artists."""
    return [
        SongDraft(title="Long", artist="Carla", genre="Jazz", duration=300),
        SongDraft(title="Short", artist="Amy", genre="Pop", duration=100),
        SongDraft(title="Medium", artist="Bob", genre="Rock", duration=200),
    ]


@pytest.fixture
def populated_catalog(catalog, song_drafts):
    """Catalog with playlist "P" holding the standard drafts and an empty "Q"."""
    catalog.create_playlist("P")
    catalog.create_playlist("Q")
    for draft in song_drafts:
        catalog.add_song_to_playlist("P", draft)
    return catalog
