from datetime import date as date_type, datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import Field

from oficina.models.base import OficinaModel, Record, utcnow


# ----------------------------------------------------
# 1. ENUMERADOR DE STATUS
# Estados possíveis de uma ordem de serviço.
# ----------------------------------------------------
class OrderStatus(str, Enum):
    """
    Status de uma ordem de serviço. Qualquer transição é permitida;
    só a entrada em COMPLETED tem efeito colateral (carimba completed_at).
    """
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


STATUS_LABELS = {
    OrderStatus.PENDING: "Pendente",
    OrderStatus.IN_PROGRESS: "Em Andamento",
    OrderStatus.COMPLETED: "Concluída",
    OrderStatus.CANCELLED: "Cancelada",
}


# ----------------------------------------------------
# 2. ITEM DA ORDEM (embutido, não é uma coleção própria)
# ----------------------------------------------------
class ServiceOrderItem(OficinaModel):
    service_id: str
    quantity: int = Field(1, ge=1)

    # Preço copiado do catálogo no momento da inclusão
    unit_value: Decimal = Field(..., ge=0)
    total_value: Decimal = Field(Decimal("0"), ge=0)
    description: Optional[str] = None

    # Horas estimadas do serviço no momento da inclusão
    unit_estimated_time_hours: Optional[float] = Field(None, ge=0)


# ----------------------------------------------------
# 3. ORDEM DE SERVIÇO
# ----------------------------------------------------
class ServiceOrderCreate(OficinaModel):
    """
    Rascunho de uma ordem de serviço. Os totais são sempre recalculados
    a partir dos itens; os valores enviados aqui são ignorados.
    """
    client_id: str
    car_id: str
    date: date_type = Field(default_factory=lambda: utcnow().date())
    status: OrderStatus = OrderStatus.PENDING
    items: List[ServiceOrderItem] = Field(default_factory=list)
    total_value: Decimal = Decimal("0")
    estimated_time_hours: float = 0
    observations: Optional[str] = None


class ServiceOrderUpdate(OficinaModel):
    client_id: Optional[str] = None
    car_id: Optional[str] = None
    date: Optional[date_type] = None
    status: Optional[OrderStatus] = None
    items: Optional[List[ServiceOrderItem]] = None
    observations: Optional[str] = None


class ServiceOrder(ServiceOrderCreate, Record):
    completed_at: Optional[datetime] = None


class AddItemRequest(OficinaModel):
    service_id: str
    quantity: int = Field(1, ge=1)


class ServiceOrderView(ServiceOrder):
    """Ordem com cliente e veículo resolvidos para a listagem."""
    client_name: str
    car_summary: str
    status_label: str
