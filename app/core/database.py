# app/core/database.py

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.core.config import DATABASE_URL

logger = logging.getLogger(__name__)

# Execution option set by begin_write(); read by the SQLite "begin" hook
WRITE_OPTION = "write_transaction"

# ---------------------------------------------------
# ENGINE SETUP
# ---------------------------------------------------

def _enable_sqlite_transactions(engine: Engine) -> None:
    """
    pysqlite issues its own BEGIN lazily and knows nothing about SAVEPOINT.
    Take over transaction control so that:
      * foreign keys (and their ON DELETE CASCADE) are enforced,
      * transactions opened through begin_write() start with BEGIN IMMEDIATE
        and queue up on the busy timeout, while reads stay DEFERRED,
      * begin_nested() savepoints work.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        if conn.get_execution_options().get(WRITE_OPTION):
            conn.exec_driver_sql("BEGIN IMMEDIATE")
        else:
            conn.exec_driver_sql("BEGIN")


def begin_write(session: Session) -> None:
    """
    Open the session's next transaction as a write transaction.

    Call it before the first query of a unit of work that writes. A read
    transaction still open on the session is committed first. On SQLite the
    write lock is taken up front; a deferred reader upgrading to a writer
    gets "database is locked" instead of waiting. Other backends ignore the
    option.
    """
    if session.in_transaction():
        session.commit()
    session.connection(execution_options={WRITE_OPTION: True})


def make_engine(url: str) -> Engine:
    """Create an engine for ``url`` with the pool settings used by the API."""
    if url.startswith("sqlite"):
        engine = create_engine(url, connect_args={"check_same_thread": False, "timeout": 30})
        _enable_sqlite_transactions(engine)
        logger.warning("Using SQLite database (local development only)")
        return engine

    return create_engine(
        url,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


engine = make_engine(DATABASE_URL)

# ---------------------------------------------------
# SESSION FACTORY & BASE CLASS
# ---------------------------------------------------

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

Base = declarative_base()

# ---------------------------------------------------
# FASTAPI DEPENDENCY
# ---------------------------------------------------

def get_db():
    """
    FastAPI dependency to yield a SQLAlchemy session.
    Use in your route functions as:
        def some_route(..., db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
