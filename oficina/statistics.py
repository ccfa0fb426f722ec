"""
Estatísticas do painel.

Funções puras sobre listas de registros, recalculadas a cada chamada.
``now`` pode ser injetado; por padrão é o relógio atual (faturamento do
mês corrente).
"""

from datetime import datetime
from decimal import Decimal
from typing import Iterable, List, Optional

from pydantic import BaseModel

from oficina.models.base import OficinaModel, utcnow
from oficina.models.car import Car
from oficina.models.client import Client
from oficina.models.employee import Employee
from oficina.models.service import Service
from oficina.models.service_order import OrderStatus, ServiceOrder

OPEN_STATUSES = (OrderStatus.PENDING, OrderStatus.IN_PROGRESS)


class DashboardStats(OficinaModel):
    total_clients: int
    total_cars: int
    total_services: int
    pending_orders: int
    completed_orders: int
    monthly_revenue: Decimal


class ActivityStats(OficinaModel):
    total: int
    active: int
    inactive: int


class ServiceStats(ActivityStats):
    average_value: Decimal
    average_estimated_time_hours: float


class ClientStats(OficinaModel):
    total: int
    with_phone: int
    with_email: int


class CarStats(OficinaModel):
    total: int
    clients_with_cars: int
    average_year: int


class OrderStats(OficinaModel):
    total: int
    pending: int
    completed: int
    monthly_revenue: Decimal


def count_open(orders: Iterable[ServiceOrder]) -> int:
    """Ordens pendentes ou em andamento."""
    return sum(1 for order in orders if order.status in OPEN_STATUSES)


def count_completed(orders: Iterable[ServiceOrder]) -> int:
    return sum(1 for order in orders if order.status == OrderStatus.COMPLETED)


def monthly_revenue(orders: Iterable[ServiceOrder], now: Optional[datetime] = None) -> Decimal:
    """Soma das ordens concluídas cuja data cai no mês/ano corrente."""
    now = now or utcnow()
    return sum(
        (order.total_value for order in orders
         if order.status == OrderStatus.COMPLETED
         and order.date.year == now.year and order.date.month == now.month),
        Decimal("0"),
    )


def activity_split(records: List[BaseModel]) -> ActivityStats:
    active = sum(1 for r in records if r.is_active)
    return ActivityStats(total=len(records), active=active, inactive=len(records) - active)


def dashboard_stats(clients: List[Client], cars: List[Car], services: List[Service],
                    orders: List[ServiceOrder], now: Optional[datetime] = None) -> DashboardStats:
    return DashboardStats(
        total_clients=len(clients),
        total_cars=len(cars),
        total_services=len(services),
        pending_orders=count_open(orders),
        completed_orders=count_completed(orders),
        monthly_revenue=monthly_revenue(orders, now),
    )


def service_stats(services: List[Service]) -> ServiceStats:
    split = activity_split(services)
    if services:
        average_value = sum((s.value for s in services), Decimal("0")) / len(services)
        average_time = sum(s.estimated_time_hours for s in services) / len(services)
    else:
        average_value, average_time = Decimal("0"), 0.0
    return ServiceStats(
        **split.model_dump(),
        average_value=average_value,
        average_estimated_time_hours=average_time,
    )


def employee_stats(employees: List[Employee]) -> ActivityStats:
    return activity_split(employees)


def client_stats(clients: List[Client]) -> ClientStats:
    return ClientStats(
        total=len(clients),
        with_phone=sum(1 for c in clients if c.phone),
        with_email=sum(1 for c in clients if c.email),
    )


def car_stats(cars: List[Car]) -> CarStats:
    average_year = round(sum(car.year for car in cars) / len(cars)) if cars else 0
    return CarStats(
        total=len(cars),
        clients_with_cars=len({car.client_id for car in cars}),
        average_year=average_year,
    )


def order_stats(orders: List[ServiceOrder], now: Optional[datetime] = None) -> OrderStats:
    return OrderStats(
        total=len(orders),
        pending=count_open(orders),
        completed=count_completed(orders),
        monthly_revenue=monthly_revenue(orders, now),
    )
