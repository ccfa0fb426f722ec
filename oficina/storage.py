"""
Armazenamento das coleções.

``SqlBackingStore`` é o armazenamento chave-valor durável: cada coleção é
uma linha da tabela ``collection_slots`` com o array JSON completo.
``Collection`` envolve uma dessas chaves para um modelo pydantic e mantém
em memória o valor atual.
"""

import json
import logging
from typing import Any, Callable, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from oficina.database import Base
from oficina.database_models import CollectionSlot

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class SqlBackingStore:
    """Armazenamento chave-valor sobre SQLAlchemy."""

    def __init__(self, session_factory, engine=None):
        self.session_factory = session_factory
        self.engine = engine

    def create_schema(self) -> None:
        if self.engine is not None:
            Base.metadata.create_all(bind=self.engine)

    def get(self, name: str, default: Optional[Callable[[], Any]] = None) -> Any:
        """Lê a coleção ``name``; se nunca foi gravada, devolve ``default()``."""
        db = self.session_factory()
        try:
            slot = db.query(CollectionSlot).filter(CollectionSlot.name == name).first()
            if slot is None:
                return default() if default is not None else None
            return json.loads(slot.payload)
        finally:
            db.close()

    def set(self, name: str, value: Any) -> None:
        """Substitui a coleção inteira em uma única transação."""
        payload = json.dumps(value, ensure_ascii=False)
        db = self.session_factory()
        try:
            slot = db.query(CollectionSlot).filter(CollectionSlot.name == name).first()
            if slot is None:
                db.add(CollectionSlot(name=name, payload=payload))
            else:
                slot.payload = payload
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Erro ao gravar a coleção %s", name)
            raise
        finally:
            db.close()

    def has(self, name: str) -> bool:
        db = self.session_factory()
        try:
            return db.query(CollectionSlot.name).filter(CollectionSlot.name == name).first() is not None
        finally:
            db.close()


class Collection(Generic[ModelT]):
    """Acesso tipado a uma coleção: leitura, substituição e cache."""

    def __init__(self, backing: SqlBackingStore, name: str, model: Type[ModelT]):
        self.backing = backing
        self.name = name
        self.model = model
        self._cache: Optional[List[ModelT]] = None

    def load(self) -> List[dict]:
        return self.backing.get(self.name, default=list)

    def save(self, records: List[dict]) -> None:
        self.backing.set(self.name, records)

    def all(self) -> List[ModelT]:
        """Cópia do valor atual (alterá-la não altera a coleção)."""
        if self._cache is None:
            self.reload()
        return [record.model_copy(deep=True) for record in self._cache]

    def replace(self, records: List[ModelT]) -> None:
        self.save([r.model_dump(mode="json", by_alias=True, exclude_none=True) for r in records])
        self._cache = [record.model_copy(deep=True) for record in records]

    def reload(self) -> None:
        self._cache = [self.model.model_validate(raw) for raw in self.load()]

    def seed(self) -> None:
        """Grava uma coleção vazia se a chave ainda não existe."""
        if not self.backing.has(self.name):
            self.save([])
        self._cache = None
