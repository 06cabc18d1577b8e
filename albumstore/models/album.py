"""Album record and the request body used to create or update one."""
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict


class MissingAlbumFields(ValueError):
    """Request body carried no album fields."""


@dataclass
class Album:
    """Stored album. id is assigned by the store."""
    id: str
    title: str
    artist: str
    price: float


class AlbumRequest(BaseModel):
    """Decoded JSON body. id is accepted but never applied."""
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    id: Optional[str] = None
    title: Optional[str] = None
    artist: Optional[str] = None
    price: Optional[float] = None

    def album_fields(self) -> dict:
        """Album fields present in the body, id excluded. JSON null counts as absent."""
        dumped = self.model_dump(exclude={"id"}, exclude_unset=True)
        return {k: v for k, v in dumped.items() if v is not None}

    def bind(self, base: Optional[Album] = None) -> Album:
        """Decode onto base; fields absent from the body keep base values."""
        fields = self.album_fields()
        if base is None:
            if not fields:
                raise MissingAlbumFields("missing required Album fields.")
            base = Album(id="", title="", artist="", price=0.0)
        return Album(
            id=base.id,
            title=fields.get("title", base.title),
            artist=fields.get("artist", base.artist),
            price=fields.get("price", base.price),
        )
