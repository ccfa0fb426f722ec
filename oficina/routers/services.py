from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from starlette import status as status_codes

from oficina.dependencies import get_store
from oficina.models.service import (
    SERVICE_CATEGORIES,
    Service,
    ServiceCreate,
    ServiceUpdate,
    ServiceView,
)
from oficina.store import OficinaStore

router = APIRouter(prefix="/services", tags=["services"])


def to_view(store: OficinaStore, service: Service) -> ServiceView:
    return ServiceView(
        **service.model_dump(),
        responsible_employee_name=store.resolver.resolve_employee_name(service.responsible_employee_id),
    )


# Rota 1: Catálogo de serviços (busca por descrição/categoria)
@router.get("/", name="list_services", response_model=List[ServiceView])
def list_services(
    q: Optional[str] = None,
    category: Optional[str] = None,
    active: Optional[bool] = None,
    store: OficinaStore = Depends(get_store),
):
    services = store.services.filter(q or "", category)
    if active is not None:
        services = [s for s in services if s.is_active == active]
    return [to_view(store, s) for s in services]


# Rota 2: Categorias disponíveis para o formulário
# (declarada antes de /{service_id} para não ser capturada por ela)
@router.get("/categories", name="list_service_categories", response_model=List[str])
def list_service_categories():
    return SERVICE_CATEGORIES


@router.post("/", name="create_service", response_model=ServiceView,
             status_code=status_codes.HTTP_201_CREATED)
def create_service(draft: ServiceCreate, store: OficinaStore = Depends(get_store)):
    return to_view(store, store.services.create(draft))


@router.get("/{service_id}", name="show_service", response_model=ServiceView)
def show_service(service_id: str, store: OficinaStore = Depends(get_store)):
    return to_view(store, store.services.get(service_id))


# Alterar o preço no catálogo não muda os itens de ordens já existentes
@router.patch("/{service_id}", name="update_service", response_model=ServiceView)
def update_service(service_id: str, patch: ServiceUpdate, store: OficinaStore = Depends(get_store)):
    return to_view(store, store.services.update(service_id, patch))


@router.post("/{service_id}/toggle-active", name="toggle_service", response_model=ServiceView)
def toggle_service(service_id: str, store: OficinaStore = Depends(get_store)):
    return to_view(store, store.services.toggle_active(service_id))


@router.delete("/{service_id}", name="delete_service", status_code=status_codes.HTTP_204_NO_CONTENT)
def delete_service(service_id: str, store: OficinaStore = Depends(get_store)):
    store.services.delete(service_id)
    return Response(status_code=status_codes.HTTP_204_NO_CONTENT)
