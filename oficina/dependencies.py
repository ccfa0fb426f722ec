from fastapi import Request

from oficina.store import OficinaStore


def get_store(request: Request) -> OficinaStore:
    """Loja da aplicação (criada em ``main.create_app``)."""
    return request.app.state.store
