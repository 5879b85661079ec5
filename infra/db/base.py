# infra/db/base.py
from __future__ import annotations
from decimal import Decimal
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy import create_engine, String
from sqlalchemy.engine import Engine
from sqlalchemy.types import TypeDecorator
import logging

logger = logging.getLogger(__name__)

Base = declarative_base()


class DecimalText(TypeDecorator):
    """Decimal stored as its canonical string.

    SQLite has no fixed-point type, so ``Numeric`` columns round-trip through
    binary floats there. Text keeps every digit the caller entered.
    """

    impl = String(40)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, Decimal):
            value = Decimal(str(value))
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


def create_db_engine(db_url: str, *, echo: bool = False) -> Engine:
    logger.info("Using database at: %s", db_url)
    return create_engine(
        db_url,
        echo=echo,
        future=True,
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


__all__ = ["Base", "DecimalText", "create_db_engine", "create_session_factory"]
