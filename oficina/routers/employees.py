from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from starlette import status

from oficina.dependencies import get_store
from oficina.models.employee import Employee, EmployeeCreate, EmployeeUpdate
from oficina.store import OficinaStore

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("/", name="list_employees", response_model=List[Employee])
def list_employees(
    q: Optional[str] = None,
    active: Optional[bool] = None,
    store: OficinaStore = Depends(get_store),
):
    employees = store.employees.search(q or "")
    if active is not None:
        employees = [e for e in employees if e.is_active == active]
    return employees


@router.post("/", name="create_employee", response_model=Employee, status_code=status.HTTP_201_CREATED)
def create_employee(draft: EmployeeCreate, store: OficinaStore = Depends(get_store)):
    return store.employees.create(draft)


@router.get("/{employee_id}", name="show_employee", response_model=Employee)
def show_employee(employee_id: str, store: OficinaStore = Depends(get_store)):
    return store.employees.get(employee_id)


@router.patch("/{employee_id}", name="update_employee", response_model=Employee)
def update_employee(employee_id: str, patch: EmployeeUpdate, store: OficinaStore = Depends(get_store)):
    return store.employees.update(employee_id, patch)


@router.post("/{employee_id}/toggle-active", name="toggle_employee", response_model=Employee)
def toggle_employee(employee_id: str, store: OficinaStore = Depends(get_store)):
    return store.employees.toggle_active(employee_id)


@router.delete("/{employee_id}", name="delete_employee", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(employee_id: str, store: OficinaStore = Depends(get_store)):
    store.employees.delete(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
