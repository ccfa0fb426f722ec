from typing import List, Optional

from oficina.exceptions import InvalidReferenceError
from oficina.models.car import Car
from oficina.repositories.base import Repository
from oficina.repositories.clients import ClientRepository


class CarRepository(Repository[Car]):
    """
    Veículos. ``client_id`` precisa existir ao cadastrar ou trocar o dono,
    mas continua sendo uma referência fraca: o cliente pode ser excluído
    depois sem apagar o veículo.
    """
    collection_name = "cars"
    entity_name = "Veículo"
    model = Car

    def __init__(self, backing, clients: Optional[ClientRepository] = None, **kwargs):
        super().__init__(backing, **kwargs)
        self.clients = clients

    def list_by_client(self, client_id: str) -> List[Car]:
        return [car for car in self.list() if car.client_id == client_id]

    def prepare_new(self, record):
        self._check_owner(record.client_id)
        return record

    def prepare_update(self, current, updated, patch):
        if "client_id" in patch.model_fields_set:
            self._check_owner(updated.client_id)
        return updated

    def search_fields(self, record):
        fields = [record.plate, record.model, record.brand, str(record.year)]
        owner = self.clients.find(record.client_id) if self.clients else None
        if owner is not None:
            fields.append(owner.name)
        return fields

    def _check_owner(self, client_id: str) -> None:
        if self.clients is not None and self.clients.find(client_id) is None:
            raise InvalidReferenceError(f"Cliente não encontrado: {client_id}")
