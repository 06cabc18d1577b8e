"""In-memory album collection: lookup, append, replace and remove by id."""
import logging
import random
import threading
from dataclasses import replace
from typing import Iterable, List, Optional

from albumstore.config import ID_MAX, ID_MIN
from albumstore.models.album import Album

logger = logging.getLogger(__name__)

SAMPLE_ALBUMS = (
    Album(id="1", title="Blue Train", artist="John Coltrane", price=56.99),
    Album(id="2", title="Jeru", artist="Gerry Mulligan", price=17.99),
    Album(id="3", title="Sarah Vaughan and Clifford Brown", artist="Sarah Vaughan", price=39.99),
)


class AlbumNotFound(LookupError):
    def __init__(self, album_id: str) -> None:
        super().__init__("album not found.")
        self.album_id = album_id


class AlbumStore:
    """Ordered list of albums behind a single lock.

    Each call is atomic; a get followed by an update from another
    request is not. New ids are random and never checked for uniqueness.
    """

    def __init__(
        self,
        albums: Optional[Iterable[Album]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._albums: List[Album] = [replace(a) for a in albums or ()]
        self._rng = rng or random.Random()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._albums)

    def list(self) -> List[Album]:
        """Return a snapshot of all albums in insertion order."""
        with self._lock:
            return list(self._albums)

    def get(self, album_id: str) -> Album:
        """Return the first album with album_id."""
        with self._lock:
            for a in self._albums:
                if a.id == album_id:
                    return a
        raise AlbumNotFound(album_id)

    def create(self, album: Album) -> str:
        """Assign a new id to album, append it and return the id."""
        with self._lock:
            album.id = str(self._rng.randint(ID_MIN, ID_MAX))
            if any(a.id == album.id for a in self._albums):
                logger.warning("Album id %s already in use; storing duplicate", album.id)
            self._albums.append(album)
        logger.info("Created album %s", album.id)
        return album.id

    def update(self, album_id: str, album: Album) -> Album:
        """Replace the album with album_id; the stored id stays album_id."""
        album.id = album_id
        with self._lock:
            for i, a in enumerate(self._albums):
                if a.id == album_id:
                    self._albums[i] = album
                    break
            else:
                raise AlbumNotFound(album_id)
        logger.info("Updated album %s", album_id)
        return album

    def delete(self, album_id: str) -> Album:
        """Remove the album with album_id and return it."""
        with self._lock:
            for i, a in enumerate(self._albums):
                if a.id == album_id:
                    removed = self._albums.pop(i)
                    break
            else:
                raise AlbumNotFound(album_id)
        logger.info("Deleted album %s", album_id)
        return removed
