class OficinaError(Exception):
    """Erro base do domínio da oficina."""


class NotFoundError(OficinaError):
    """Registro não encontrado na coleção."""

    def __init__(self, entity: str, record_id: str):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} não encontrado: {record_id}")


class InactiveServiceError(OficinaError):
    """Serviço inativo não pode ser incluído em uma ordem de serviço."""

    def __init__(self, service_id: str):
        self.service_id = service_id
        super().__init__(f"Serviço inativo: {service_id}")


class InvalidReferenceError(OficinaError):
    """Referência a um registro pai inexistente (ou inativo) ao gravar."""
