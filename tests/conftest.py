from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from main import create_app
from oficina.models.car import CarCreate
from oficina.models.client import ClientCreate
from oficina.models.service import ServiceCreate
from oficina.store import OficinaStore


class FakeClock:
    """Relógio que avança um minuto a cada leitura."""

    def __init__(self, start=datetime(2026, 10, 1, 9, 0, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self):
        self.current += timedelta(minutes=1)
        return self.current


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'oficina.db'}"


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(db_url, clock):
    return OficinaStore.from_url(db_url, clock=clock).initialize()


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as c:
        yield c


@pytest.fixture
def maria(store):
    return store.clients.create(ClientCreate(
        name="Maria Silva", phone="11999990000", email="maria@example.com", tax_id="123.456.789-00"))


@pytest.fixture
def uno(store, maria):
    return store.cars.create(CarCreate(
        client_id=maria.id, plate="abc1234", model="Uno", brand="Fiat", year=2015))


@pytest.fixture
def para_choque(store):
    return store.services.create(ServiceCreate(
        description="Troca de para-choque", value=Decimal("450.00"),
        estimated_time_hours=2, category="Funilaria"))


@pytest.fixture
def pintura(store):
    return store.services.create(ServiceCreate(
        description="Pintura de porta", value=Decimal("300.00"),
        estimated_time_hours=1.5, category="Pintura"))
