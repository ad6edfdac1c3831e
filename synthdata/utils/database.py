# utils/database.py
from contextlib import contextmanager
from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from synthdata.config import settings


def build_engine(db_url: str, echo: bool = False) -> Engine:
    # FastAPI runs sync endpoints on a threadpool, so SQLite must allow cross-thread use
    connect_args = {"check_same_thread": False} if db_url.startswith("sqlite") else {}
    return create_engine(db_url, echo=echo, connect_args=connect_args)


class DatabaseUtils:
    """Engine, session factory and declarative base shared by the API."""

    engine = build_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base = declarative_base()

    @classmethod
    def bind(cls, engine: Engine) -> None:
        """Points the session factory at another engine."""
        cls.engine = engine
        cls.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    @classmethod
    def _open(cls):
        db: Session = cls.SessionLocal()
        try:
            yield db
        except SQLAlchemyError as e:
            logger.error(f"Database session error: {e}")
            db.rollback()
            raise
        finally:
            db.close()

    @classmethod
    def get_db(cls):
        """FastAPI dependency yielding one session per request."""
        yield from cls._open()

    @classmethod
    @contextmanager
    def db_session(cls):
        yield from cls._open()

    @classmethod
    def init_db(cls) -> None:
        """Creates every table registered on `Base`."""
        import synthdata.models  # noqa: F401

        cls.Base.metadata.create_all(bind=cls.engine)
        logger.info(f"Database ready: {', '.join(sorted(cls.Base.metadata.tables))}")
