"""Core services: the in-memory album store."""
from albumstore.core.album_store import AlbumNotFound, AlbumStore

__all__ = ["AlbumNotFound", "AlbumStore"]
