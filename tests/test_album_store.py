"""Tests for the in-memory album store."""

import logging
import random
import threading

import pytest

from albumstore.core.album_store import SAMPLE_ALBUMS, AlbumNotFound, AlbumStore
from albumstore.models.album import Album
from tests.conftest import SequenceRandom


def _album(title: str = "T", artist: str = "A", price: float = 9.99) -> Album:
    return Album(id="", title=title, artist=artist, price=price)


def test_seeded_store_keeps_sample_order(store: AlbumStore) -> None:
    assert [a.id for a in store.list()] == ["1", "2", "3"]
    assert store.get("2").title == "Jeru"


def test_seeding_copies_albums(store: AlbumStore) -> None:
    store.get("1").title = "Changed"
    assert SAMPLE_ALBUMS[0].title == "Blue Train"


def test_get_unknown_raises(store: AlbumStore) -> None:
    with pytest.raises(AlbumNotFound) as exc:
        store.get("999")
    assert exc.value.album_id == "999"
    assert str(exc.value) == "album not found."


def test_create_assigns_id_in_range_and_appends(empty_store: AlbumStore) -> None:
    album = _album()
    album.id = "ignored"
    album_id = empty_store.create(album)

    assert album.id == album_id
    assert 10 <= int(album_id) <= 109
    assert empty_store.list() == [album]


def test_create_n_albums_lists_n_with_unique_ids() -> None:
    store = AlbumStore(rng=SequenceRandom([10, 11, 12, 13, 14]))
    for i in range(5):
        store.create(_album(title=f"T{i}"))

    albums = store.list()
    assert len(albums) == 5
    ids = [a.id for a in albums]
    assert all(ids)
    assert len(set(ids)) == 5


def test_create_collision_is_stored_and_logged(caplog) -> None:
    store = AlbumStore(rng=SequenceRandom([42, 42]))
    store.create(_album(title="first"))
    with caplog.at_level(logging.WARNING, logger="albumstore.core.album_store"):
        store.create(_album(title="second"))

    assert [a.id for a in store.list()] == ["42", "42"]
    assert "already in use" in caplog.text
    # Lookup returns the first match
    assert store.get("42").title == "first"


def test_update_replaces_in_place_and_keeps_path_id(store: AlbumStore) -> None:
    replacement = Album(id="77", title="New", artist="Someone", price=1.0)
    updated = store.update("2", replacement)

    assert updated.id == "2"
    assert [a.id for a in store.list()] == ["1", "2", "3"]
    assert store.get("2") == Album(id="2", title="New", artist="Someone", price=1.0)


def test_update_unknown_raises(store: AlbumStore) -> None:
    with pytest.raises(AlbumNotFound):
        store.update("999", _album())
    assert len(store) == 3


def test_delete_removes_and_returns(store: AlbumStore) -> None:
    removed = store.delete("1")

    assert removed.title == "Blue Train"
    assert [a.id for a in store.list()] == ["2", "3"]
    with pytest.raises(AlbumNotFound):
        store.get("1")


def test_delete_unknown_raises(store: AlbumStore) -> None:
    with pytest.raises(AlbumNotFound):
        store.delete("999")


def test_list_returns_snapshot(store: AlbumStore) -> None:
    snapshot = store.list()
    store.delete("1")
    assert len(snapshot) == 3


def test_concurrent_creates_do_not_lose_albums() -> None:
    store = AlbumStore(rng=random.Random(7))

    def worker() -> None:
        for _ in range(50):
            store.create(_album())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 400
