# salon/db.py

from sqlmodel import SQLModel, create_engine, Session

from .config import get_settings


def build_engine(database_url: str, echo: bool = False):
    connect_args = {}
    if database_url.startswith("sqlite"):
        # required for SQLite + FastAPI
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=echo, connect_args=connect_args)


settings = get_settings()

# Engine = connection to the database
engine = build_engine(settings.database_url, echo=settings.sql_echo)


def create_db_and_tables(bind=None):
    from . import models  # noqa: F401  (registers the tables)

    SQLModel.metadata.create_all(bind or engine)


# Dependency: one session per request
def get_session():
    with Session(engine) as session:
        yield session
