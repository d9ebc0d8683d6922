"""
Recurso de banco de dados: engine e fábrica de sessões com ciclo de vida explícito.

O engine não é criado no import. A aplicação constrói um `Database` no
lifespan, guarda em `app.state.database` e chama `dispose()` no shutdown.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.config import Settings

logger = logging.getLogger(__name__)

# Base para os models
Base = declarative_base()


class Database:
    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = sessionmaker(
            bind=engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Cria o engine do SQLAlchemy a partir das configurações"""
        engine = create_engine(
            settings.DATABASE_URL,
            pool_pre_ping=True,
            echo=settings.DEBUG,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
        )
        logger.info(f"Database engine created (pool_size={settings.DB_POOL_SIZE})")
        return cls(engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Sessão com escopo: commit ao final, rollback em caso de erro e
        fechamento sempre.
        """
        session: Session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def ping(self) -> bool:
        with self.engine.connect() as conn:
            row = conn.execute(text("SELECT 1")).fetchone()
        return bool(row and row[0] == 1)

    def dispose(self) -> None:
        """Fecha todas as conexões do pool"""
        self.engine.dispose()
        logger.info("Database engine disposed")
