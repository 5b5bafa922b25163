from __future__ import annotations

import pytest

from database import EntityStore
from main import CatalogService
from seed import seed_sample_data


@pytest.fixture
def store() -> EntityStore:
    return EntityStore()


@pytest.fixture
def seeded_store() -> EntityStore:
    s = EntityStore()
    seed_sample_data(s)
    return s


@pytest.fixture
def service() -> CatalogService:
    return CatalogService(seed=False)
