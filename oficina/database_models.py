from datetime import datetime, timezone

from sqlalchemy import Column, String, TEXT, DateTime

from .database import Base


def _utcnow():
    return datetime.now(timezone.utc)


# Cada coleção (clients, cars, ...) ocupa uma linha: o nome é a chave e
# o payload é o array JSON completo com os registros.
class CollectionSlot(Base):
    __tablename__ = "collection_slots"
    name = Column(String(100), primary_key=True)
    payload = Column(TEXT, nullable=False, default="[]")
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)
