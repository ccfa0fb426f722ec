from oficina.models.client import Client
from oficina.repositories.base import Repository


class ClientRepository(Repository[Client]):
    collection_name = "clients"
    entity_name = "Cliente"
    model = Client

    def search_fields(self, record):
        return [record.name, record.phone, record.email, record.tax_id]
