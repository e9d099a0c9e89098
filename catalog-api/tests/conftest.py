"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from plates.domain import Plate
from plates.services import PlateService
from plates.stores import DjangoPlateStore
from tests.factories import build_plate


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def store() -> DjangoPlateStore:
    return DjangoPlateStore()


@pytest.fixture
def service(store: DjangoPlateStore) -> PlateService:
    return PlateService(store)


@pytest.fixture
def add_plate(db, store: DjangoPlateStore):
    """Insert a plate straight into the store and return it."""

    def _add(*args, **kwargs) -> Plate:
        return store.insert(build_plate(*args, **kwargs))

    return _add


@pytest.fixture
def catalog(add_plate) -> list[Plate]:
    """Three plates, the middle one reserved."""
    return [
        add_plate("ABC123", 100, 120, is_for_sale=True),
        add_plate("XYZ789", 200, 240, is_for_sale=False),
        add_plate("LMN456", 300, 360, is_for_sale=True),
    ]
