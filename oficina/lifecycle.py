"""
Ciclo de vida da ordem de serviço.

Funções puras sobre rascunhos (``ServiceOrderCreate``) ou ordens gravadas
(``ServiceOrder``): inclusão e remoção de itens, recálculo de totais e
transição de status. Os totais são sempre recalculados do zero sobre
todos os itens, nunca ajustados incrementalmente.
"""

from datetime import datetime
from decimal import Decimal
from typing import Mapping, Optional, TypeVar

from oficina.models.service import Service
from oficina.models.service_order import OrderStatus, ServiceOrderCreate, ServiceOrderItem

OrderT = TypeVar("OrderT", bound=ServiceOrderCreate)


def item_total(quantity: int, unit_value: Decimal) -> Decimal:
    return Decimal(quantity) * Decimal(unit_value)


def item_hours(item: ServiceOrderItem, catalog: Optional[Mapping[str, Service]] = None) -> float:
    """Horas de um item: snapshot do item ou, para registros antigos, o catálogo atual."""
    if item.unit_estimated_time_hours is not None:
        unit_hours = item.unit_estimated_time_hours
    else:
        service = (catalog or {}).get(item.service_id)
        unit_hours = service.estimated_time_hours if service else 0
    return unit_hours * item.quantity


def recompute_totals(order: OrderT, catalog: Optional[Mapping[str, Service]] = None) -> OrderT:
    """Recalcula o total de cada item e os totais da ordem."""
    items = [
        item.model_copy(update={"total_value": item_total(item.quantity, item.unit_value)})
        for item in order.items
    ]
    total_value = sum((item.total_value for item in items), Decimal("0"))
    estimated_time = sum((item_hours(item, catalog) for item in items), 0.0)
    return order.model_copy(update={
        "items": items,
        "total_value": total_value,
        "estimated_time_hours": estimated_time,
    })


def add_item(order: OrderT, service: Service, quantity: int = 1,
             catalog: Optional[Mapping[str, Service]] = None) -> OrderT:
    """
    Inclui um serviço na ordem.

    Se o serviço já tem um item, soma a quantidade e usa o preço atual do
    catálogo; senão, cria um item novo copiando preço, descrição e horas.
    """
    if quantity < 1:
        raise ValueError("A quantidade deve ser pelo menos 1.")

    items = [item.model_copy() for item in order.items]
    for index, item in enumerate(items):
        if item.service_id == service.id:
            items[index] = item.model_copy(update={
                "quantity": item.quantity + quantity,
                "unit_value": service.value,
            })
            break
    else:
        items.append(ServiceOrderItem(
            service_id=service.id,
            quantity=quantity,
            unit_value=service.value,
            description=service.description,
            unit_estimated_time_hours=service.estimated_time_hours,
        ))
    return recompute_totals(order.model_copy(update={"items": items}), catalog)


def remove_item(order: OrderT, service_id: str,
                catalog: Optional[Mapping[str, Service]] = None) -> OrderT:
    """Remove o item inteiro (não existe remoção parcial de quantidade)."""
    items = [item for item in order.items if item.service_id != service_id]
    return recompute_totals(order.model_copy(update={"items": items}), catalog)


def completion_stamp(previous: Optional[OrderStatus], new: OrderStatus,
                     completed_at: Optional[datetime], now: datetime) -> Optional[datetime]:
    """
    Valor de ``completed_at`` depois de uma transição.

    Toda entrada em ``completed`` (vindo de outro estado, ou na criação)
    carimba o instante atual. Sair de ``completed`` nunca apaga o valor.
    """
    entering = new == OrderStatus.COMPLETED and previous != OrderStatus.COMPLETED
    if entering:
        return now
    return completed_at
