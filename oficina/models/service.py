from decimal import Decimal
from typing import Optional

from pydantic import Field

from oficina.models.base import OficinaModel, Record

# ----------------------------------------------------
# Categorias do catálogo de serviços.
# A categoria é texto livre; esta lista alimenta os formulários.
# ----------------------------------------------------
SERVICE_CATEGORIES = [
    "Pintura",
    "Funilaria",
    "Soldas",
    "Polimento",
    "Mecânica Geral",
    "Elétrica",
    "Outros",
]


# ----------------------------------------------------
# Entrada do catálogo de serviços.
# ----------------------------------------------------
class ServiceCreate(OficinaModel):
    """
    Serviço oferecido pela oficina (item do catálogo).
    """
    description: str = Field(..., min_length=1, description="Descrição do serviço.")

    # Preço unitário cobrado pelo serviço.
    value: Decimal = Field(..., ge=0, description="Valor unitário do serviço.")

    estimated_time_hours: float = Field(..., ge=0, description="Tempo estimado em horas.")
    category: str = Field(..., min_length=1)

    # Referência fraca ao funcionário responsável (pode não existir mais).
    responsible_employee_id: Optional[str] = None

    is_active: bool = True


class ServiceUpdate(OficinaModel):
    description: Optional[str] = Field(None, min_length=1)
    value: Optional[Decimal] = Field(None, ge=0)
    estimated_time_hours: Optional[float] = Field(None, ge=0)
    category: Optional[str] = Field(None, min_length=1)
    responsible_employee_id: Optional[str] = None
    is_active: Optional[bool] = None


class Service(ServiceCreate, Record):
    pass


class ServiceView(Service):
    responsible_employee_name: str
