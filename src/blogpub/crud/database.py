"""Engine creation and schema initialization for the conversion ledger"""

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

from blogpub.crud import models  # noqa: F401  (registers tables on SQLModel.metadata)


def make_engine(db_url: str) -> Engine:
    """Return an Engine for db_url; SQLite connections may be shared across threads."""
    connect_args = {"check_same_thread": False} if db_url.startswith("sqlite") else {}
    return create_engine(db_url, echo=False, connect_args=connect_args)


def init_db(engine: Engine) -> None:
    """Create all ledger tables that do not exist yet."""
    SQLModel.metadata.create_all(engine)
