"""Album CRUD: list, create, get, update, delete."""
from typing import Optional

from fastapi import APIRouter, Body, Depends

from albumstore.api.render import render
from albumstore.api.state import AppState, get_state
from albumstore.core.album_store import AlbumNotFound
from albumstore.models.album import Album, AlbumRequest, MissingAlbumFields
from albumstore.models.response import (
    RequestAborted,
    Success,
    err_invalid_request,
    err_not_found,
)

router = APIRouter()


def album_ctx(album_id: str, state: AppState = Depends(get_state)) -> Album:
    """Resolve album_id to a stored album or stop the request with 404."""
    if not album_id:
        raise RequestAborted(err_not_found())
    try:
        return state.store.get(album_id)
    except AlbumNotFound:
        raise RequestAborted(err_not_found())


def _bind(body: Optional[AlbumRequest], base: Optional[Album] = None) -> Album:
    if body is None:
        raise RequestAborted(err_invalid_request(MissingAlbumFields("request body is empty.")))
    try:
        return body.bind(base)
    except MissingAlbumFields as e:
        raise RequestAborted(err_invalid_request(e))


@router.get("/")
def list_albums(state: AppState = Depends(get_state)):
    """List all albums."""
    return render(Success(state.store.list()), state.error_style)


@router.post("/")
def create_album(
    body: Optional[AlbumRequest] = Body(None),
    state: AppState = Depends(get_state),
):
    """Create an album. Any id in the body is replaced by a store-assigned one."""
    album = _bind(body)
    state.store.create(album)
    return render(Success(album, status=201), state.error_style)


@router.get("/{album_id}/")
def get_album(
    album: Album = Depends(album_ctx),
    state: AppState = Depends(get_state),
):
    """Return one album."""
    return render(Success(album), state.error_style)


@router.post("/{album_id}/")
def update_album(
    album_id: str,
    body: Optional[AlbumRequest] = Body(None),
    album: Album = Depends(album_ctx),
    state: AppState = Depends(get_state),
):
    """Update an album. Fields missing from the body keep their stored values; id never changes."""
    updated = _bind(body, album)
    try:
        updated = state.store.update(album_id, updated)
    except AlbumNotFound:
        return render(err_not_found(), state.error_style)
    return render(Success(updated), state.error_style)


@router.delete("/{album_id}/")
def delete_album(album_id: str, state: AppState = Depends(get_state)):
    """Delete an album. An unknown id is a 400 here, unlike the 404 from get and update."""
    try:
        removed = state.store.delete(album_id)
    except AlbumNotFound as e:
        return render(err_invalid_request(e), state.error_style)
    return render(Success(removed), state.error_style)
