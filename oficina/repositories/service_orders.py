import logging
from typing import List, Optional

from oficina import lifecycle
from oficina.config import settings
from oficina.exceptions import InactiveServiceError, InvalidReferenceError
from oficina.identifiers import TimestampPrefixedId
from oficina.models.service_order import OrderStatus, ServiceOrder, ServiceOrderCreate, ServiceOrderUpdate
from oficina.repositories.base import Repository
from oficina.repositories.cars import CarRepository
from oficina.repositories.clients import ClientRepository
from oficina.repositories.services import ServiceRepository

logger = logging.getLogger(__name__)


class ServiceOrderRepository(Repository[ServiceOrder]):
    """
    Ordens de serviço.

    Toda gravação passa pelo ciclo de vida: os totais são recalculados a
    partir dos itens e ``completed_at`` é carimbado na entrada em
    ``completed``.
    """
    collection_name = "service_orders"
    entity_name = "Ordem de serviço"
    model = ServiceOrder

    def __init__(self, backing, services: ServiceRepository,
                 clients: Optional[ClientRepository] = None,
                 cars: Optional[CarRepository] = None, **kwargs):
        kwargs.setdefault("id_strategy", TimestampPrefixedId(settings.order_prefix))
        super().__init__(backing, **kwargs)
        self.services = services
        self.clients = clients
        self.cars = cars

    def list(self) -> List[ServiceOrder]:
        """Ordens da mais recente para a mais antiga (pela data da OS)."""
        return sorted(self.collection.all(), key=lambda order: order.date, reverse=True)

    def create(self, draft: ServiceOrderCreate) -> ServiceOrder:
        # Sem data explícita, a OS é do dia do relógio da loja
        if "date" not in draft.model_fields_set:
            draft = draft.model_copy(update={"date": self.clock().date()})
        return super().create(draft)

    def prepare_new(self, record):
        self._check_references(record)
        record = lifecycle.recompute_totals(record, self.services.catalog())
        return record.model_copy(update={
            "completed_at": lifecycle.completion_stamp(None, record.status, None, record.created_at),
        })

    def prepare_update(self, current, updated, patch):
        if patch.model_fields_set & {"client_id", "car_id"}:
            self._check_references(updated)
        updated = lifecycle.recompute_totals(updated, self.services.catalog())
        return updated.model_copy(update={
            "completed_at": lifecycle.completion_stamp(
                current.status, updated.status, current.completed_at, updated.updated_at),
        })

    def change_status(self, order_id: str, status: OrderStatus) -> ServiceOrder:
        return self.update(order_id, ServiceOrderUpdate(status=status))

    def add_item(self, order_id: str, service_id: str, quantity: int = 1) -> ServiceOrder:
        service = self.services.get(service_id)
        if not service.is_active:
            raise InactiveServiceError(service_id)
        return self._change_items(
            order_id, lambda order, catalog: lifecycle.add_item(order, service, quantity, catalog))

    def remove_item(self, order_id: str, service_id: str) -> ServiceOrder:
        return self._change_items(
            order_id, lambda order, catalog: lifecycle.remove_item(order, service_id, catalog))

    def filter(self, term: str = "", status: Optional[OrderStatus] = None) -> List[ServiceOrder]:
        found = self.search(term)
        if status:
            found = [order for order in found if order.status == status]
        return found

    def search_fields(self, record):
        fields = [record.id]
        client = self.clients.find(record.client_id) if self.clients else None
        if client is not None:
            fields.append(client.name)
        car = self.cars.find(record.car_id) if self.cars else None
        if car is not None:
            fields.append(car.plate)
        return fields

    def _check_references(self, order: ServiceOrder) -> None:
        """Cliente e veículo precisam existir, e o veículo ser desse cliente."""
        if self.clients is not None and self.clients.find(order.client_id) is None:
            raise InvalidReferenceError(f"Cliente não encontrado: {order.client_id}")
        if self.cars is None:
            return
        car = self.cars.find(order.car_id)
        if car is None:
            raise InvalidReferenceError(f"Veículo não encontrado: {order.car_id}")
        if car.client_id != order.client_id:
            raise InvalidReferenceError(
                f"Veículo {car.plate} não pertence ao cliente {order.client_id}")

    def _change_items(self, order_id, change) -> ServiceOrder:
        records = self.collection.all()
        index = self._index_of(records, order_id)
        order = change(records[index], self.services.catalog())
        records[index] = order.model_copy(update={"updated_at": self.clock()})
        self.collection.replace(records)
        logger.info("Itens da %s alterados: %s (total %s)",
                    self.entity_name, order_id, records[index].total_value)
        return records[index]
