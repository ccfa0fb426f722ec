from datetime import datetime, timezone
from typing import Any, Dict, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OficinaModel(BaseModel):
    """
    Base dos modelos: atributos em snake_case no Python e camelCase
    no JSON gravado (taxId, clientId, createdAt...).
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Record(OficinaModel):
    """Campos carimbados pelo próprio repositório."""
    id: str = Field(..., description="Identificador único dentro da coleção.")
    created_at: datetime = Field(..., description="Instante de criação (imutável).")
    updated_at: datetime = Field(..., description="Instante da última alteração.")


RecordT = TypeVar("RecordT", bound=Record)

# Campos que nenhum patch pode alterar
IMMUTABLE_FIELDS = ("id", "created_at")


def merge_patch(record: RecordT, patch: OficinaModel, **stamped: Any) -> RecordT:
    """
    Aplica no registro apenas os campos enviados no patch.

    ``id`` e ``created_at`` são preservados; o resultado é validado de novo,
    então um patch que apague um campo obrigatório gera ``ValidationError``.
    """
    changes: Dict[str, Any] = {
        key: value
        for key, value in patch.model_dump(exclude_unset=True).items()
        if key not in IMMUTABLE_FIELDS
    }
    data = record.model_dump()
    data.update(changes)
    data.update(stamped)
    for key in IMMUTABLE_FIELDS:
        data[key] = getattr(record, key)
    return type(record).model_validate(data)
