from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from starlette import status

from oficina.dependencies import get_store
from oficina.models.car import Car, CarCreate, CarUpdate, CarView
from oficina.store import OficinaStore

router = APIRouter(prefix="/cars", tags=["cars"])


def to_view(store: OficinaStore, car: Car) -> CarView:
    return CarView(**car.model_dump(), client_name=store.resolver.resolve_client_name(car.client_id))


@router.get("/", name="list_cars", response_model=List[CarView])
def list_cars(
    q: Optional[str] = None,
    client_id: Optional[str] = None,
    store: OficinaStore = Depends(get_store),
):
    # Com client_id: só os veículos do cliente (usado ao abrir uma OS)
    cars = store.cars.list_by_client(client_id) if client_id else store.cars.search(q or "")
    return [to_view(store, car) for car in cars]


@router.post("/", name="create_car", response_model=CarView, status_code=status.HTTP_201_CREATED)
def create_car(draft: CarCreate, store: OficinaStore = Depends(get_store)):
    # A placa já chega padronizada em caixa alta pelo modelo
    return to_view(store, store.cars.create(draft))


@router.get("/{car_id}", name="show_car", response_model=CarView)
def show_car(car_id: str, store: OficinaStore = Depends(get_store)):
    return to_view(store, store.cars.get(car_id))


@router.patch("/{car_id}", name="update_car", response_model=CarView)
def update_car(car_id: str, patch: CarUpdate, store: OficinaStore = Depends(get_store)):
    return to_view(store, store.cars.update(car_id, patch))


@router.delete("/{car_id}", name="delete_car", status_code=status.HTTP_204_NO_CONTENT)
def delete_car(car_id: str, store: OficinaStore = Depends(get_store)):
    store.cars.delete(car_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
