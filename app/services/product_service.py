"""
Serviço de acesso a dados de produtos:
- Listagem paginada com busca opcional (full-text + ILIKE)
- Busca sem paginação
- Criação, atualização parcial e remoção por código de barras
"""
import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import Select, delete, func, or_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from app.models.branch import Branch
from app.models.product import FTS_CONFIG, Product
from app.schemas.product import ProductCreate, ProductUpdate
from app.utils.pagination import build_pagination, page_offset

logger = logging.getLogger(__name__)


class ProductServiceError(Exception):
    """Exceção genérica do serviço de produtos"""
    pass


class EmptyUpdateError(ProductServiceError):
    """Exceção para atualização sem nenhum campo"""
    pass


class ProductNotFoundError(ProductServiceError):
    """Exceção para quando o produto a atualizar não existe"""

    def __init__(self, barcode: str):
        super().__init__(f"Product with barcode {barcode} not found")
        self.barcode = barcode


def search_filter(q: Optional[str]) -> Optional[ColumnElement]:
    """
    Predicado de busca: full-text no nome OU nome contém q OU barcode contém q
    (sem diferenciar maiúsculas).

    Retorna None quando q está ausente ou em branco.
    """
    # q só com espaços não filtra (não vira ILIKE '%   %')
    if q is None or not q.strip():
        return None

    pattern = f"%{q}%"
    return or_(
        func.to_tsvector(FTS_CONFIG, Product.name).bool_op("@@")(
            func.plainto_tsquery(FTS_CONFIG, q)
        ),
        Product.name.ilike(pattern),
        Product.barcode.ilike(pattern),
    )


def product_listing(q: Optional[str] = None) -> Select:
    """
    Produtos com o nome da filial, já filtrados pela busca.

    A mesma seleção alimenta a contagem e a página, então as duas usam
    sempre o mesmo WHERE.
    """
    stmt = (
        select(*Product.__table__.columns, Branch.name.label("branch_name"))
        .select_from(Product)
        .join(Branch, Branch.id == Product.branch_id)
    )
    criteria = search_filter(q)
    if criteria is not None:
        stmt = stmt.where(criteria)
    return stmt


def to_pg_array(values: Optional[Iterable[Any]]) -> Optional[List[Any]]:
    """Lista vazia ou ausente é gravada como NULL"""
    if not values:
        return None
    return [v.value if isinstance(v, Enum) else v for v in values]


def product_update_values(data: ProductUpdate) -> Dict[str, Any]:
    """
    Colunas a gravar numa atualização parcial: só os campos enviados.
    `imageUrls` vai para a coluna `image`.
    """
    values = data.model_dump(exclude_unset=True)
    if "image_urls" in values:
        values["image"] = to_pg_array(values.pop("image_urls"))
    if "tegs" in values:
        values["tegs"] = to_pg_array(values["tegs"])
    return values


class ProductService:
    def __init__(self, db: Session):
        self.db = db

    def get_products(self, page: int, page_size: int, q: Optional[str] = None) -> Dict[str, Any]:
        """
        Lista produtos paginados, do mais recente para o mais antigo
        (updated_at DESC), com busca opcional.

        Contagem e página são duas consultas separadas e podem enxergar
        snapshots diferentes sob escrita concorrente.
        """
        listing = product_listing(q)
        offset = page_offset(page, page_size)
        logger.debug(f"Listing products: page={page} page_size={page_size} q={q!r}")

        total_records = self.db.execute(
            select(func.count()).select_from(listing.subquery())
        ).scalar_one()

        rows = self.db.execute(
            listing.order_by(Product.updated_at.desc()).limit(page_size).offset(offset)
        ).all()

        return {
            "data": [dict(row._mapping) for row in rows],
            "pagination": build_pagination(int(total_records), page, page_size),
        }

    def select_all_products(self, page: int, page_size: int) -> Dict[str, Any]:
        """Listagem paginada sem filtro de busca"""
        return self.get_products(page, page_size)

    def select_by_id_product(self, barcode: str) -> Optional[Product]:
        """Retorna o produto pelo código de barras, ou None"""
        stmt = select(Product).where(Product.barcode == barcode)
        return self.db.execute(stmt).scalars().first()

    def search_product(self, q: str) -> List[Dict[str, Any]]:
        """Busca sem paginação e sem ordem garantida"""
        rows = self.db.execute(product_listing(q)).all()
        return [dict(row._mapping) for row in rows]

    def create_product(self, data: ProductCreate) -> Product:
        product = Product(
            **data.model_dump(exclude={"tegs", "image_urls"}),
            tegs=to_pg_array(data.tegs),
            image=to_pg_array(data.image_urls),
        )
        self.db.add(product)
        self._commit(f"creating product {data.barcode}")
        self.db.refresh(product)

        logger.info(f"Product created: barcode={product.barcode} id={product.id}")
        return product

    def update_product(self, barcode: str, data: ProductUpdate) -> Product:
        """
        Atualiza apenas os campos enviados no payload.

        Raises:
            EmptyUpdateError: nenhum campo enviado
            ProductNotFoundError: nenhum produto com esse barcode
        """
        values = product_update_values(data)
        if not values:
            raise EmptyUpdateError("Nenhum campo enviado para atualização")

        stmt = (
            update(Product)
            .where(Product.barcode == barcode)
            .values(**values)
            .returning(Product)
        )
        try:
            product = self.db.execute(stmt).scalars().first()
        except SQLAlchemyError:
            self.db.rollback()
            logger.error(f"Error updating product {barcode}", exc_info=True)
            raise

        if product is None:
            self.db.rollback()
            raise ProductNotFoundError(barcode)

        self._commit(f"updating product {barcode}")
        logger.info(f"Product updated: barcode={barcode} fields={sorted(values)}")
        return product

    def delete_product(self, barcode: str) -> Optional[Product]:
        """Remove o produto e o retorna, ou None se não existir"""
        stmt = delete(Product).where(Product.barcode == barcode).returning(Product)
        try:
            product = self.db.execute(stmt).scalars().first()
        except SQLAlchemyError:
            self.db.rollback()
            logger.error(f"Error deleting product {barcode}", exc_info=True)
            raise

        self._commit(f"deleting product {barcode}")
        if product is not None:
            logger.info(f"Product deleted: barcode={barcode}")
        return product

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.error(f"Error {action}", exc_info=True)
            raise
