import pytest

from oficina.database import make_engine, make_session_factory
from oficina.identifiers import RandomId, TimestampPrefixedId
from oficina.models.client import Client
from oficina.storage import Collection, SqlBackingStore
from oficina.store import OficinaStore


@pytest.fixture
def backing(db_url):
    engine = make_engine(db_url)
    backing = SqlBackingStore(make_session_factory(engine), engine=engine)
    backing.create_schema()
    return backing


def test_missing_slot_returns_default(backing):
    assert backing.get("clients", default=list) == []
    assert backing.get("clients") is None
    assert not backing.has("clients")


def test_set_replaces_whole_collection(backing):
    backing.set("cars", [{"id": "1"}, {"id": "2"}])
    backing.set("cars", [{"id": "3"}])
    assert backing.get("cars", default=list) == [{"id": "3"}]


def test_failed_write_keeps_previous_value(backing):
    backing.set("cars", [{"id": "1"}])
    with pytest.raises(TypeError):
        backing.set("cars", [{"id": object()}])
    assert backing.get("cars", default=list) == [{"id": "1"}]


def test_seed_does_not_overwrite_existing_data(backing):
    backing.set("clients", [{"id": "x"}])
    Collection(backing, "clients", Client).seed()
    Collection(backing, "employees", Client).seed()
    assert backing.get("clients") == [{"id": "x"}]
    assert backing.get("employees") == []


def test_collection_snapshot_is_a_copy(store, maria):
    snapshot = store.clients.collection.all()
    snapshot[0].name = "Outro nome"
    assert store.clients.list()[0].name == "Maria Silva"


def test_data_survives_a_new_store(db_url, store, maria, uno):
    reopened = OficinaStore.from_url(db_url).initialize()
    assert reopened.clients.list() == [maria]
    assert reopened.cars.list() == [uno]


def test_optional_fields_are_not_written_when_empty(store, maria):
    stored = store.backing.get("clients")
    assert "address" not in stored[0]
    assert stored[0]["taxId"] == "123.456.789-00"


def test_random_ids_are_unique():
    strategy = RandomId()
    assert len({strategy.next_id() for _ in range(100)}) == 100


def test_timestamp_ids_never_repeat_within_same_millisecond():
    strategy = TimestampPrefixedId("OS-", clock=lambda: 1700000000.0)
    first = strategy.next_id()
    second = strategy.next_id()
    assert first == "OS-1700000000000"
    assert second == "OS-1700000000001"


def test_timestamp_ids_skip_taken_numbers():
    strategy = TimestampPrefixedId("OS-", clock=lambda: 1700000000.0)
    assert strategy.next_id(["OS-1700000000000", "OS-1700000000001"]) == "OS-1700000000002"
