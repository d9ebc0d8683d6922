"""
Dependências do FastAPI
"""
from typing import Iterator
from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session
import logging

from app.database import Database
from app.services.product_service import ProductService

logger = logging.getLogger(__name__)


def get_database(request: Request) -> Database:
    """Recurso de banco criado no lifespan da aplicação"""
    database = getattr(request.app.state, "database", None)
    if database is None:
        logger.error("Database not initialized on app.state")
        raise HTTPException(status_code=503, detail="Banco de dados não inicializado")
    return database


def get_db(database: Database = Depends(get_database)) -> Iterator[Session]:
    """Sessão por requisição: commit/rollback e close ficam no Database"""
    with database.session() as session:
        yield session


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)
