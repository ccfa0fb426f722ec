from datetime import date
from decimal import Decimal

import pytest

from oficina import lifecycle
from oficina.exceptions import InactiveServiceError, InvalidReferenceError, NotFoundError
from oficina.models.car import CarCreate
from oficina.models.client import ClientCreate
from oficina.models.service import ServiceUpdate
from oficina.models.service_order import (
    OrderStatus,
    ServiceOrderCreate,
    ServiceOrderItem,
    ServiceOrderUpdate,
)


def assert_totals_consistent(order):
    assert order.total_value == sum((i.total_value for i in order.items), Decimal("0"))
    for item in order.items:
        assert item.total_value == item.quantity * item.unit_value


@pytest.fixture
def order(store, maria, uno):
    return store.service_orders.create(ServiceOrderCreate(client_id=maria.id, car_id=uno.id))


def test_new_order_defaults(order):
    assert order.id.startswith("OS-")
    assert order.status == OrderStatus.PENDING
    assert order.items == []
    assert order.total_value == 0
    assert order.completed_at is None


def test_draft_add_item_snapshots_catalog(maria, uno, para_choque):
    draft = ServiceOrderCreate(client_id=maria.id, car_id=uno.id)
    draft = lifecycle.add_item(draft, para_choque, 2)

    assert len(draft.items) == 1
    item = draft.items[0]
    assert item.unit_value == Decimal("450.00")
    assert item.description == "Troca de para-choque"
    assert draft.total_value == Decimal("900.00")
    assert draft.estimated_time_hours == 4


def test_draft_add_same_service_merges_quantity(maria, uno, para_choque, pintura):
    draft = ServiceOrderCreate(client_id=maria.id, car_id=uno.id)
    draft = lifecycle.add_item(draft, para_choque)
    draft = lifecycle.add_item(draft, pintura)
    draft = lifecycle.add_item(draft, para_choque, 2)

    assert [i.service_id for i in draft.items] == [para_choque.id, pintura.id]
    assert draft.items[0].quantity == 3
    assert draft.total_value == Decimal("1650.00")
    assert draft.estimated_time_hours == 7.5
    assert_totals_consistent(draft)


def test_draft_remove_item_recomputes(maria, uno, para_choque, pintura):
    draft = ServiceOrderCreate(client_id=maria.id, car_id=uno.id)
    draft = lifecycle.add_item(lifecycle.add_item(draft, para_choque), pintura)
    draft = lifecycle.remove_item(draft, para_choque.id)

    assert [i.service_id for i in draft.items] == [pintura.id]
    assert draft.total_value == Decimal("300.00")
    assert draft.estimated_time_hours == 1.5


def test_create_ignores_stale_totals_in_draft(store, maria, uno, para_choque):
    item = ServiceOrderItem(service_id=para_choque.id, quantity=2, unit_value=Decimal("450.00"),
                            total_value=Decimal("1"), unit_estimated_time_hours=2)
    created = store.service_orders.create(ServiceOrderCreate(
        client_id=maria.id, car_id=uno.id, items=[item], total_value=Decimal("5")))

    assert created.total_value == Decimal("900.00")
    assert created.estimated_time_hours == 4
    assert_totals_consistent(created)


def test_add_and_remove_items_on_stored_order(store, order, para_choque, pintura):
    store.service_orders.add_item(order.id, para_choque.id)
    updated = store.service_orders.add_item(order.id, pintura.id, 2)
    assert updated.total_value == Decimal("1050.00")
    assert updated.updated_at > order.updated_at
    assert_totals_consistent(updated)

    updated = store.service_orders.remove_item(order.id, pintura.id)
    assert updated.total_value == Decimal("450.00")
    assert store.service_orders.get(order.id) == updated


def test_catalog_price_change_does_not_touch_existing_items(store, order, para_choque):
    store.service_orders.add_item(order.id, para_choque.id)
    store.services.update(para_choque.id, ServiceUpdate(value=Decimal("500.00"), estimated_time_hours=5))

    unchanged = store.service_orders.update(order.id, ServiceOrderUpdate(observations="Cliente aguarda"))
    assert unchanged.total_value == Decimal("450.00")
    assert unchanged.estimated_time_hours == 2


def test_inactive_or_unknown_service_cannot_be_added(store, order, para_choque):
    store.services.toggle_active(para_choque.id)
    with pytest.raises(InactiveServiceError):
        store.service_orders.add_item(order.id, para_choque.id)
    with pytest.raises(NotFoundError):
        store.service_orders.add_item(order.id, "nao-existe")


def test_update_items_recomputes_totals(store, order, para_choque):
    item = ServiceOrderItem(service_id=para_choque.id, quantity=3, unit_value=Decimal("100"))
    updated = store.service_orders.update(order.id, ServiceOrderUpdate(items=[item]))

    assert updated.total_value == Decimal("300")
    # item sem snapshot de horas usa o catálogo atual
    assert updated.estimated_time_hours == 6
    assert_totals_consistent(updated)


def test_completion_is_stamped_on_each_entry(store, order):
    completed = store.service_orders.change_status(order.id, OrderStatus.COMPLETED)
    assert completed.completed_at is not None
    assert completed.completed_at >= order.created_at

    reopened = store.service_orders.change_status(order.id, OrderStatus.IN_PROGRESS)
    assert reopened.completed_at == completed.completed_at

    again = store.service_orders.change_status(order.id, OrderStatus.COMPLETED)
    assert again.completed_at > completed.completed_at

    edited = store.service_orders.update(order.id, ServiceOrderUpdate(observations="Pago"))
    assert edited.completed_at == again.completed_at


def test_every_transition_is_allowed(store, order):
    for status in [OrderStatus.CANCELLED, OrderStatus.PENDING, OrderStatus.COMPLETED,
                   OrderStatus.CANCELLED, OrderStatus.IN_PROGRESS]:
        assert store.service_orders.change_status(order.id, status).status == status


def test_order_created_as_completed_is_stamped(store, maria, uno):
    created = store.service_orders.create(ServiceOrderCreate(
        client_id=maria.id, car_id=uno.id, status=OrderStatus.COMPLETED))
    assert created.completed_at == created.created_at


def test_completion_stamp_rules():
    now = object()
    assert lifecycle.completion_stamp(OrderStatus.PENDING, OrderStatus.COMPLETED, None, now) is now
    assert lifecycle.completion_stamp(OrderStatus.COMPLETED, OrderStatus.CANCELLED, "t", now) == "t"
    assert lifecycle.completion_stamp(OrderStatus.COMPLETED, OrderStatus.COMPLETED, None, now) is None
    assert lifecycle.completion_stamp(OrderStatus.PENDING, OrderStatus.IN_PROGRESS, None, now) is None
    assert lifecycle.completion_stamp(OrderStatus.CANCELLED, OrderStatus.COMPLETED, "t", now) is now


def test_orders_listed_newest_date_first(store, maria, uno):
    old = store.service_orders.create(ServiceOrderCreate(
        client_id=maria.id, car_id=uno.id, date=date(2026, 1, 10)))
    new = store.service_orders.create(ServiceOrderCreate(
        client_id=maria.id, car_id=uno.id, date=date(2026, 9, 1)))
    assert [o.id for o in store.service_orders.list()] == [new.id, old.id]


def test_order_ids_are_unique(store, maria, uno):
    ids = {
        store.service_orders.create(ServiceOrderCreate(client_id=maria.id, car_id=uno.id)).id
        for _ in range(20)
    }
    assert len(ids) == 20


def test_filter_by_status_and_plate(store, order, maria, uno):
    store.service_orders.change_status(order.id, OrderStatus.IN_PROGRESS)
    other = store.service_orders.create(ServiceOrderCreate(client_id=maria.id, car_id=uno.id))

    assert [o.id for o in store.service_orders.filter(status=OrderStatus.PENDING)] == [other.id]
    assert len(store.service_orders.filter("abc1234")) == 2
    assert [o.id for o in store.service_orders.filter(order.id.lower())] == [order.id]


def test_order_references_must_exist_and_match(store, order, maria, uno):
    pedro = store.clients.create(ClientCreate(name="Pedro", phone="1133334444", tax_id="111"))
    gol = store.cars.create(CarCreate(client_id=pedro.id, plate="def5678", model="Gol",
                                      brand="VW", year=2010))

    for client_id, car_id in [("nao-existe", uno.id), (maria.id, "nao-existe"), (maria.id, gol.id)]:
        with pytest.raises(InvalidReferenceError):
            store.service_orders.create(ServiceOrderCreate(client_id=client_id, car_id=car_id))
    with pytest.raises(InvalidReferenceError):
        store.service_orders.update(order.id, ServiceOrderUpdate(car_id=gol.id))

    moved = store.service_orders.update(order.id, ServiceOrderUpdate(client_id=pedro.id, car_id=gol.id))
    assert (moved.client_id, moved.car_id) == (pedro.id, gol.id)
    assert [o.id for o in store.service_orders.list()] == [order.id]


def test_order_date_defaults_to_store_clock(store, clock, order):
    assert order.date == clock.current.date()
    assert order.date == date(2026, 10, 1)
