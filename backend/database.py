# backend/database.py
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from config import settings


def build_engine(url: str):
    # SQLite precisa liberar o uso da conexão entre threads do servidor
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


engine = build_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db(bind=None):
    # Cria as tabelas
    import models  # noqa: F401  registra os modelos no Base.metadata

    Base.metadata.create_all(bind=bind or engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def unit_of_work(db):
    """Commit no sucesso, rollback de tudo se qualquer passo falhar."""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
