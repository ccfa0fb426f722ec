"""
Repositório base: CRUD sobre uma coleção tipada.

Cada operação de escrita lê a coleção inteira, altera em memória e grava
a coleção inteira de volta (último a gravar vence; há um único escritor).
"""

import logging
from datetime import datetime
from typing import Callable, Generic, List, Optional, Type, TypeVar

from oficina.exceptions import NotFoundError
from oficina.identifiers import RandomId
from oficina.models.base import OficinaModel, Record, merge_patch, utcnow
from oficina.storage import Collection, SqlBackingStore

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)


class Repository(Generic[RecordT]):
    collection_name: str = ""
    entity_name: str = "Registro"
    model: Type[RecordT]

    def __init__(self, backing: SqlBackingStore, id_strategy=None,
                 clock: Callable[[], datetime] = utcnow):
        self.collection = Collection(backing, self.collection_name, self.model)
        self.id_strategy = id_strategy or RandomId()
        self.clock = clock

    def list(self) -> List[RecordT]:
        return self.collection.all()

    def get(self, record_id: str) -> RecordT:
        record = self.find(record_id)
        if record is None:
            raise NotFoundError(self.entity_name, record_id)
        return record

    def find(self, record_id: Optional[str]) -> Optional[RecordT]:
        """Busca linear; devolve None se não existir."""
        if not record_id:
            return None
        return next((r for r in self.collection.all() if r.id == record_id), None)

    def create(self, draft: OficinaModel) -> RecordT:
        records = self.collection.all()
        now = self.clock()
        data = draft.model_dump()
        data.update(
            id=self.id_strategy.next_id(r.id for r in records),
            created_at=now,
            updated_at=now,
        )
        record = self.prepare_new(self.model.model_validate(data))
        records.append(record)
        self.collection.replace(records)
        logger.info("%s criado: %s", self.entity_name, record.id)
        return record

    def update(self, record_id: str, patch: OficinaModel) -> RecordT:
        records = self.collection.all()
        index = self._index_of(records, record_id)
        current = records[index]
        updated = merge_patch(current, patch, updated_at=self.clock())
        updated = self.prepare_update(current, updated, patch)
        records[index] = updated
        self.collection.replace(records)
        logger.info("%s atualizado: %s", self.entity_name, record_id)
        return updated

    def delete(self, record_id: str) -> None:
        records = self.collection.all()
        index = self._index_of(records, record_id)
        del records[index]
        self.collection.replace(records)
        logger.info("%s excluído: %s", self.entity_name, record_id)

    def search(self, term: str = "") -> List[RecordT]:
        term = (term or "").strip().lower()
        records = self.list()
        if not term:
            return records
        return [r for r in records if any(term in value.lower() for value in self.search_fields(r))]

    # --- Ganchos para as subclasses ---

    def prepare_new(self, record: RecordT) -> RecordT:
        return record

    def prepare_update(self, current: RecordT, updated: RecordT, patch: OficinaModel) -> RecordT:
        return updated

    def search_fields(self, record: RecordT) -> List[str]:
        return []

    # -----------------------------------

    def _index_of(self, records: List[RecordT], record_id: str) -> int:
        for index, record in enumerate(records):
            if record.id == record_id:
                return index
        raise NotFoundError(self.entity_name, record_id)


class ActivatableMixin:
    """toggle_active para entidades com ``is_active`` (funcionários, serviços)."""

    def toggle_active(self, record_id: str):
        records = self.collection.all()
        index = self._index_of(records, record_id)
        record = records[index]
        records[index] = record.model_copy(update={
            "is_active": not record.is_active,
            "updated_at": self.clock(),
        })
        self.collection.replace(records)
        logger.info("%s %s: %s", self.entity_name,
                    "ativado" if records[index].is_active else "desativado", record_id)
        return records[index]

    def list_active(self):
        return [r for r in self.list() if r.is_active]
