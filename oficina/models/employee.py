from typing import Optional

from pydantic import Field

from oficina.models.base import OficinaModel, Record


class EmployeeCreate(OficinaModel):
    name: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1, description="Função (ex: Pintor, Funileiro).")
    phone: Optional[str] = None
    is_active: bool = True


class EmployeeUpdate(OficinaModel):
    name: Optional[str] = Field(None, min_length=1)
    role: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = None
    is_active: Optional[bool] = None


class Employee(EmployeeCreate, Record):
    pass
