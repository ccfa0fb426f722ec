from fastapi import APIRouter, Depends

from oficina.dependencies import get_store
from oficina.statistics import (
    ActivityStats,
    CarStats,
    ClientStats,
    DashboardStats,
    OrderStats,
    ServiceStats,
)
from oficina.store import OficinaStore

# Todos os números são recalculados a cada requisição
router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/", name="dashboard", response_model=DashboardStats)
def dashboard(store: OficinaStore = Depends(get_store)):
    return store.dashboard()


@router.get("/services", name="service_stats", response_model=ServiceStats)
def service_stats(store: OficinaStore = Depends(get_store)):
    return store.service_stats()


@router.get("/employees", name="employee_stats", response_model=ActivityStats)
def employee_stats(store: OficinaStore = Depends(get_store)):
    return store.employee_stats()


@router.get("/clients", name="client_stats", response_model=ClientStats)
def client_stats(store: OficinaStore = Depends(get_store)):
    return store.client_stats()


@router.get("/cars", name="car_stats", response_model=CarStats)
def car_stats(store: OficinaStore = Depends(get_store)):
    return store.car_stats()


@router.get("/orders", name="order_stats", response_model=OrderStats)
def order_stats(store: OficinaStore = Depends(get_store)):
    return store.order_stats()
