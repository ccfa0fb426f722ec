from typing import Optional

from pydantic import Field

from oficina.models.base import OficinaModel, Record


class ClientCreate(OficinaModel):
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    email: str = ""
    tax_id: str = Field(..., min_length=1, description="CPF/CNPJ em texto livre.")
    address: Optional[str] = None


class ClientUpdate(OficinaModel):
    name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = None
    tax_id: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = None


class Client(ClientCreate, Record):
    pass
