"""
Resolução de referências entre coleções (cliente, veículo, funcionário,
serviço) para exibição.

As referências são fracas: nada impede excluir um cliente que ainda tem
veículos ou ordens. Uma referência quebrada vira um texto fixo e um
aviso no log, nunca uma exceção.
"""

import logging
from typing import Any, Dict, Optional

from oficina.models.service_order import ServiceOrder
from oficina.repositories.cars import CarRepository
from oficina.repositories.clients import ClientRepository
from oficina.repositories.employees import EmployeeRepository
from oficina.repositories.services import ServiceRepository

logger = logging.getLogger(__name__)

CLIENT_NOT_FOUND = "Cliente não encontrado"
CAR_NOT_FOUND = "Veículo não encontrado"
SERVICE_NOT_FOUND = "Serviço não encontrado"
NOT_ASSIGNED = "Não atribuído"


class ReferenceResolver:
    def __init__(self, clients: ClientRepository, cars: CarRepository,
                 employees: EmployeeRepository, services: ServiceRepository):
        self.clients = clients
        self.cars = cars
        self.employees = employees
        self.services = services

    def resolve_client_name(self, client_id: Optional[str]) -> str:
        client = self.clients.find(client_id)
        if client is None:
            logger.warning("Referência quebrada: cliente %s", client_id)
            return CLIENT_NOT_FOUND
        return client.name

    def resolve_car_summary(self, car_id: Optional[str]) -> str:
        """Resumo do veículo: 'PLACA - Marca Modelo'."""
        car = self.cars.find(car_id)
        if car is None:
            logger.warning("Referência quebrada: veículo %s", car_id)
            return CAR_NOT_FOUND
        return f"{car.plate} - {car.brand} {car.model}"

    def resolve_employee_name(self, employee_id: Optional[str] = None) -> str:
        if not employee_id:
            return NOT_ASSIGNED
        employee = self.employees.find(employee_id)
        if employee is None:
            logger.warning("Referência quebrada: funcionário %s", employee_id)
            return NOT_ASSIGNED
        return employee.name

    def resolve_service_description(self, service_id: Optional[str]) -> str:
        service = self.services.find(service_id)
        if service is None:
            logger.warning("Referência quebrada: serviço %s", service_id)
            return SERVICE_NOT_FOUND
        return service.description

    def print_view(self, order: ServiceOrder) -> Dict[str, Any]:
        """Dados para a impressão da OS (a renderização fica na apresentação)."""
        return {
            "id": order.id,
            "date": order.date.isoformat(),
            "status": order.status.value,
            "statusLabel": order.status.label,
            "clientName": self.resolve_client_name(order.client_id),
            "carSummary": self.resolve_car_summary(order.car_id),
            "items": [
                {
                    "description": item.description or self.resolve_service_description(item.service_id),
                    "quantity": item.quantity,
                    "unitValue": str(item.unit_value),
                    "totalValue": str(item.total_value),
                }
                for item in order.items
            ],
            "totalValue": str(order.total_value),
            "estimatedTimeHours": order.estimated_time_hours,
            "observations": order.observations,
        }
