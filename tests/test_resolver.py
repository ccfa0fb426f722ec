import logging

from oficina.models.employee import EmployeeCreate
from oficina.models.service_order import ServiceOrderCreate
from oficina.resolver import CAR_NOT_FOUND, CLIENT_NOT_FOUND, NOT_ASSIGNED


def test_resolves_existing_references(store, maria, uno):
    resolver = store.resolver
    assert resolver.resolve_client_name(maria.id) == "Maria Silva"
    assert resolver.resolve_car_summary(uno.id) == "ABC1234 - Fiat Uno"


def test_missing_car_returns_placeholder(store, caplog):
    with caplog.at_level(logging.WARNING):
        assert store.resolver.resolve_car_summary("nao-existe") == CAR_NOT_FOUND
    assert "nao-existe" in caplog.text


def test_deleted_client_degrades_to_placeholder(store, maria, uno):
    store.clients.delete(maria.id)
    car = store.cars.get(uno.id)
    assert store.resolver.resolve_client_name(car.client_id) == CLIENT_NOT_FOUND


def test_employee_name_or_not_assigned(store):
    carlos = store.employees.create(EmployeeCreate(name="Carlos", role="Pintor"))
    assert store.resolver.resolve_employee_name(carlos.id) == "Carlos"
    assert store.resolver.resolve_employee_name(None) == NOT_ASSIGNED
    assert store.resolver.resolve_employee_name("demitido") == NOT_ASSIGNED


def test_print_view(store, maria, uno, para_choque):
    order = store.service_orders.create(ServiceOrderCreate(
        client_id=maria.id, car_id=uno.id, observations="Entregar sexta"))
    order = store.service_orders.add_item(order.id, para_choque.id, 2)

    view = store.resolver.print_view(order)
    assert view["clientName"] == "Maria Silva"
    assert view["carSummary"] == "ABC1234 - Fiat Uno"
    assert view["statusLabel"] == "Pendente"
    assert view["items"] == [{
        "description": "Troca de para-choque",
        "quantity": 2,
        "unitValue": "450.00",
        "totalValue": "900.00",
    }]
    assert view["totalValue"] == "900.00"
    assert view["observations"] == "Entregar sexta"
