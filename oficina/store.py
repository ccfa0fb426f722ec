"""
Ponto único de montagem do armazenamento da oficina.

``OficinaStore`` cria o armazenamento chave-valor, injeta-o nos
repositórios e oferece o resolvedor de referências e as estatísticas.
Cada instância é independente (um banco por loja), o que permite testar
com um arquivo temporário por caso de teste.
"""

import logging
from datetime import datetime
from typing import Optional

from oficina import statistics
from oficina.config import settings
from oficina.database import make_engine, make_session_factory
from oficina.repositories.cars import CarRepository
from oficina.repositories.clients import ClientRepository
from oficina.repositories.employees import EmployeeRepository
from oficina.repositories.service_orders import ServiceOrderRepository
from oficina.repositories.services import ServiceRepository
from oficina.resolver import ReferenceResolver
from oficina.storage import SqlBackingStore

logger = logging.getLogger(__name__)


class OficinaStore:
    def __init__(self, backing: SqlBackingStore, clock=None, order_ids=None):
        self.backing = backing
        kwargs = {"clock": clock} if clock is not None else {}

        self.clients = ClientRepository(backing, **kwargs)
        self.cars = CarRepository(backing, clients=self.clients, **kwargs)
        self.employees = EmployeeRepository(backing, **kwargs)
        self.services = ServiceRepository(backing, employees=self.employees, **kwargs)

        order_kwargs = dict(kwargs)
        if order_ids is not None:
            order_kwargs["id_strategy"] = order_ids
        self.service_orders = ServiceOrderRepository(
            backing, services=self.services, clients=self.clients, cars=self.cars, **order_kwargs)

        self.resolver = ReferenceResolver(self.clients, self.cars, self.employees, self.services)

    @classmethod
    def from_url(cls, database_url: str = settings.database_url, **kwargs) -> "OficinaStore":
        engine = make_engine(database_url)
        backing = SqlBackingStore(make_session_factory(engine), engine=engine)
        return cls(backing, **kwargs)

    @property
    def repositories(self):
        return [self.clients, self.cars, self.employees, self.services, self.service_orders]

    def initialize(self) -> "OficinaStore":
        """Cria a tabela e grava coleções vazias onde ainda não existem."""
        self.backing.create_schema()
        for repository in self.repositories:
            repository.collection.seed()
        logger.info("Armazenamento inicializado")
        return self

    # --- Estatísticas (sempre recalculadas) ---

    def dashboard(self, now: Optional[datetime] = None) -> statistics.DashboardStats:
        return statistics.dashboard_stats(
            self.clients.list(), self.cars.list(), self.services.list(),
            self.service_orders.list(), now=now or self.service_orders.clock())

    def service_stats(self) -> statistics.ServiceStats:
        return statistics.service_stats(self.services.list())

    def employee_stats(self) -> statistics.ActivityStats:
        return statistics.employee_stats(self.employees.list())

    def client_stats(self) -> statistics.ClientStats:
        return statistics.client_stats(self.clients.list())

    def car_stats(self) -> statistics.CarStats:
        return statistics.car_stats(self.cars.list())

    def order_stats(self, now: Optional[datetime] = None) -> statistics.OrderStats:
        return statistics.order_stats(self.service_orders.list(), now=now or self.service_orders.clock())
