"""Shared application state (injected into routes)."""
from typing import Optional

from fastapi import Request

from albumstore.config import ERROR_STYLE, ERROR_STYLES, SEED_ALBUMS
from albumstore.core.album_store import SAMPLE_ALBUMS, AlbumStore


class AppState:
    def __init__(
        self,
        store: Optional[AlbumStore] = None,
        error_style: str = ERROR_STYLE,
    ) -> None:
        if error_style not in ERROR_STYLES:
            raise ValueError(
                f"Unknown error style {error_style!r}; expected one of {', '.join(ERROR_STYLES)}"
            )
        self.store = store if store is not None else AlbumStore(SAMPLE_ALBUMS if SEED_ALBUMS else ())
        self.error_style = error_style


def get_state(request: Request) -> AppState:
    return request.app.state.albumstore
