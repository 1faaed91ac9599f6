"""Domain exceptions raised by catalog operations.

All of them are precondition violations detected before any state changes.
"""


class CatalogError(ValueError):
    """Base class for catalog precondition failures."""


class PlaylistNotFoundError(CatalogError):
    """No playlist has the requested name."""

    def __init__(self, playlist_name: str):
        self.playlist_name = playlist_name
        super().__init__(f"Playlist not found: {playlist_name!r}")


class SongNotFoundError(CatalogError):
    """The playlist exists but holds no song with the requested title."""

    def __init__(self, playlist_name: str, title: str):
        self.playlist_name = playlist_name
        self.title = title
        super().__init__(f"Song not found: {title!r} in playlist {playlist_name!r}")


class InvalidSortCriterionError(CatalogError):
    """Sort was requested on a field songs cannot be ordered by."""

    def __init__(self, criterion: object, allowed: tuple[str, ...]):
        self.criterion = criterion
        self.allowed = allowed
        super().__init__(
            f"Invalid sorting criterion: {criterion!r}. Must be one of {', '.join(allowed)}"
        )
