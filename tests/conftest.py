"""Shared test fixtures."""

import random

import pytest
from fastapi.testclient import TestClient

from albumstore.api.app import create_app
from albumstore.api.state import AppState
from albumstore.core.album_store import SAMPLE_ALBUMS, AlbumStore


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def store(rng: random.Random) -> AlbumStore:
    return AlbumStore(SAMPLE_ALBUMS, rng=rng)


@pytest.fixture
def empty_store(rng: random.Random) -> AlbumStore:
    return AlbumStore(rng=rng)


@pytest.fixture
def state(store: AlbumStore) -> AppState:
    return AppState(store, error_style="structured")


@pytest.fixture
def client(state: AppState) -> TestClient:
    return TestClient(create_app(state))


@pytest.fixture
def adhoc_client(store: AlbumStore) -> TestClient:
    return TestClient(create_app(AppState(store, error_style="adhoc")))


class SequenceRandom(random.Random):
    """Hands out ids from a fixed sequence so tests control collisions."""

    def __init__(self, values) -> None:
        super().__init__(0)
        self._values = iter(values)

    def randint(self, a: int, b: int) -> int:
        value = next(self._values)
        assert a <= value <= b
        return value
