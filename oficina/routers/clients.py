from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from starlette import status

from oficina.dependencies import get_store
from oficina.models.client import Client, ClientCreate, ClientUpdate
from oficina.store import OficinaStore

router = APIRouter(prefix="/clients", tags=["clients"])


# Rota 1: Listar Clientes (com busca por nome, telefone, email ou CPF)
@router.get("/", name="list_clients", response_model=List[Client])
def list_clients(q: Optional[str] = None, store: OficinaStore = Depends(get_store)):
    return store.clients.search(q or "")


# Rota 2: Cadastrar Cliente
@router.post("/", name="create_client", response_model=Client, status_code=status.HTTP_201_CREATED)
def create_client(draft: ClientCreate, store: OficinaStore = Depends(get_store)):
    return store.clients.create(draft)


# Rota 3: Detalhes de um Cliente
@router.get("/{client_id}", name="show_client", response_model=Client)
def show_client(client_id: str, store: OficinaStore = Depends(get_store)):
    return store.clients.get(client_id)


# Rota 4: Atualizar Cliente
@router.patch("/{client_id}", name="update_client", response_model=Client)
def update_client(client_id: str, patch: ClientUpdate, store: OficinaStore = Depends(get_store)):
    return store.clients.update(client_id, patch)


# Rota 5: Excluir Cliente
# Veículos e ordens do cliente NÃO são apagados (referência fraca).
@router.delete("/{client_id}", name="delete_client", status_code=status.HTTP_204_NO_CONTENT)
def delete_client(client_id: str, store: OficinaStore = Depends(get_store)):
    store.clients.delete(client_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
