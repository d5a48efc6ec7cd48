"""
Database engine, session management, and base model.

All books (ledgers, vouchers and their entries, products and
trade documents) live in one database, partitioned by owner_id.

Referential rules:
- ledger_entries.voucher_id is a foreign key; deleting a voucher
  deletes its lines.
- ledger_entries.ledger_id is deliberately NOT a foreign key.
  Ledgers can be deleted while vouchers still post to them, and
  reports then show those lines under "Unknown". For that to hold,
  ledger ids are never reused (see Ledger.__table_args__).
"""

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from erp_accounting.config import get_settings

settings = get_settings()

IS_SQLITE = settings.DATABASE_URL.startswith("sqlite")

# One SQLite connection may serve several FastAPI worker threads.
connect_args = {"check_same_thread": False} if IS_SQLITE else {}

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=connect_args,
)


if IS_SQLITE:
    @event.listens_for(engine, "connect")
    def enable_sqlite_foreign_keys(dbapi_conn, connection_record):
        """SQLite ignores ON DELETE CASCADE unless foreign keys are on."""
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# A voucher and all of its entries are committed together by the
# router, or not at all. Services only flush.
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    pass


def get_db():
    """One session per request, closed when the request ends."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
