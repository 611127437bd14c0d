import itertools
import pathlib
import sys
from datetime import datetime, timezone

import pytest


REPO_ROOT = pathlib.Path(__file__).resolve().parents[2]
sys.path.append(str(REPO_ROOT))

# Wednesday
FIXED_NOW = datetime(2024, 3, 13, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture()
def id_factory():
    counter = itertools.count(1)
    return lambda: f"ord-{next(counter)}"


@pytest.fixture()
def test_settings():
    from foodspend.app.config import Settings

    return Settings(
        database_url=None,
        host="127.0.0.1",
        port=3000,
        summary_scheduler_enabled=False,
        log_level="INFO",
    )


@pytest.fixture()
def memory_store():
    from foodspend.app.services.order_store import MemoryOrderStore

    return MemoryOrderStore()


@pytest.fixture()
def order_service(memory_store, fixed_clock, id_factory):
    from foodspend.app.services.order_service import OrderService

    return OrderService(memory_store, clock=fixed_clock, id_factory=id_factory)


@pytest.fixture()
def api_app(test_settings, memory_store, fixed_clock, id_factory):
    from foodspend.app.main import create_app

    return create_app(test_settings, store=memory_store, clock=fixed_clock, id_factory=id_factory)


@pytest.fixture()
def api_client(api_app):
    from fastapi.testclient import TestClient

    return TestClient(api_app)
