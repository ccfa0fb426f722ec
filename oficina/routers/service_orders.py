from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Response
from starlette import status as status_codes

from oficina.dependencies import get_store
from oficina.models.service_order import (
    AddItemRequest,
    OrderStatus,
    ServiceOrder,
    ServiceOrderCreate,
    ServiceOrderUpdate,
    ServiceOrderView,
)
from oficina.store import OficinaStore

router = APIRouter(prefix="/service-orders", tags=["service-orders"])


def to_view(store: OficinaStore, order: ServiceOrder) -> ServiceOrderView:
    return ServiceOrderView(
        **order.model_dump(),
        client_name=store.resolver.resolve_client_name(order.client_id),
        car_summary=store.resolver.resolve_car_summary(order.car_id),
        status_label=order.status.label,
    )


# Rota 1: Listar OS (mais recentes primeiro), com busca e filtro de status
@router.get("/", name="list_service_orders", response_model=List[ServiceOrderView])
def list_service_orders(
    q: Optional[str] = None,
    status: Optional[OrderStatus] = None,
    store: OficinaStore = Depends(get_store),
):
    return [to_view(store, order) for order in store.service_orders.filter(q or "", status)]


# Rota 2: Abrir OS (status inicial 'pending' se não informado)
@router.post("/", name="create_service_order", response_model=ServiceOrderView,
             status_code=status_codes.HTTP_201_CREATED)
def create_service_order(draft: ServiceOrderCreate, store: OficinaStore = Depends(get_store)):
    return to_view(store, store.service_orders.create(draft))


@router.get("/{order_id}", name="show_service_order", response_model=ServiceOrderView)
def show_service_order(order_id: str, store: OficinaStore = Depends(get_store)):
    return to_view(store, store.service_orders.get(order_id))


# Rota 3: Atualizar OS (inclusive status; concluir carimba completedAt)
@router.patch("/{order_id}", name="update_service_order", response_model=ServiceOrderView)
def update_service_order(order_id: str, patch: ServiceOrderUpdate,
                         store: OficinaStore = Depends(get_store)):
    return to_view(store, store.service_orders.update(order_id, patch))


# Rota 4: Incluir serviço do catálogo na OS
@router.post("/{order_id}/items", name="add_service_order_item", response_model=ServiceOrderView)
def add_service_order_item(order_id: str, item: AddItemRequest,
                           store: OficinaStore = Depends(get_store)):
    order = store.service_orders.add_item(order_id, item.service_id, item.quantity)
    return to_view(store, order)


# Rota 5: Remover item da OS (o item inteiro)
@router.delete("/{order_id}/items/{service_id}", name="remove_service_order_item",
               response_model=ServiceOrderView)
def remove_service_order_item(order_id: str, service_id: str,
                              store: OficinaStore = Depends(get_store)):
    return to_view(store, store.service_orders.remove_item(order_id, service_id))


# Rota 6: Dados para impressão da OS
@router.get("/{order_id}/print", name="print_service_order", response_model=Dict[str, Any])
def print_service_order(order_id: str, store: OficinaStore = Depends(get_store)):
    return store.resolver.print_view(store.service_orders.get(order_id))


@router.delete("/{order_id}", name="delete_service_order",
               status_code=status_codes.HTTP_204_NO_CONTENT)
def delete_service_order(order_id: str, store: OficinaStore = Depends(get_store)):
    store.service_orders.delete(order_id)
    return Response(status_code=status_codes.HTTP_204_NO_CONTENT)
