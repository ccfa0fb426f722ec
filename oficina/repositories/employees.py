from oficina.models.employee import Employee
from oficina.repositories.base import ActivatableMixin, Repository


class EmployeeRepository(ActivatableMixin, Repository[Employee]):
    collection_name = "employees"
    entity_name = "Funcionário"
    model = Employee

    def search_fields(self, record):
        return [record.name, record.role, record.phone or ""]
