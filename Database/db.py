from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from Models.base import Base
from config import DATABASE_URL, SQL_ECHO


def _connect_args(url: str) -> dict:
    # SQLite só aceita a conexão na thread que a criou
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(DATABASE_URL, echo=SQL_ECHO, connect_args=_connect_args(DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Abre uma sessão por requisição e fecha ao final"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# cria todas as tabelas baseadas nos models
def init_db(bind=None):
    Base.metadata.create_all(bind=bind or engine)
