from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from oficina.config import settings


def make_engine(database_url: str = settings.database_url):
    """Cria o engine de conexão para a URL informada."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # 'check_same_thread' é necessário apenas para SQLite
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


def make_session_factory(engine):
    """Fábrica de sessões ligada ao engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Base Declarativa: as tabelas em 'database_models.py' herdam desta
Base = declarative_base()
