from typing import Dict, List, Optional

from oficina.exceptions import InvalidReferenceError
from oficina.models.service import Service
from oficina.repositories.base import ActivatableMixin, Repository
from oficina.repositories.employees import EmployeeRepository


class ServiceRepository(ActivatableMixin, Repository[Service]):
    collection_name = "services"
    entity_name = "Serviço"
    model = Service

    def __init__(self, backing, employees: Optional[EmployeeRepository] = None, **kwargs):
        super().__init__(backing, **kwargs)
        self.employees = employees

    def prepare_new(self, record):
        self._check_responsible(record.responsible_employee_id)
        return record

    def prepare_update(self, current, updated, patch):
        if "responsible_employee_id" in patch.model_fields_set:
            self._check_responsible(updated.responsible_employee_id)
        return updated

    def search_fields(self, record):
        return [record.description, record.category]

    def filter(self, term: str = "", category: Optional[str] = None) -> List[Service]:
        """Busca por descrição/categoria, com filtro opcional de categoria exata."""
        found = self.search(term)
        if category:
            found = [s for s in found if s.category == category]
        return found

    def catalog(self) -> Dict[str, Service]:
        return {service.id: service for service in self.list()}

    def _check_responsible(self, employee_id: Optional[str]) -> None:
        # Só funcionários ativos podem ser responsáveis; None desatribui
        if not employee_id or self.employees is None:
            return
        employee = self.employees.find(employee_id)
        if employee is None:
            raise InvalidReferenceError(f"Funcionário não encontrado: {employee_id}")
        if not employee.is_active:
            raise InvalidReferenceError(f"Funcionário inativo: {employee_id}")
