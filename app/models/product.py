from sqlalchemy import Column, Integer, String, Text, Numeric, DateTime, ForeignKey, Index, CheckConstraint
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func, literal_column
from app.database import Base

# Configuração de text search do PostgreSQL (sem stemming nem stopwords).
# Literal SQL: o índice e as consultas precisam da mesma expressão.
FTS_CONFIG = literal_column("'simple'")


class Product(Base):
    __tablename__ = "product"

    id = Column(Integer, primary_key=True, index=True)
    barcode = Column(String(64), nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=False)
    branch_id = Column(Integer, ForeignKey("branch.id"), nullable=False, index=True)
    price = Column(Numeric(12, 2), nullable=False)
    real_price = Column(Numeric(12, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    category_id = Column(Integer, ForeignKey("category.id"), nullable=False, index=True)
    description = Column(Text, nullable=True)
    tegs = Column(ARRAY(Text), nullable=True)  # elementos: new | hit | sale
    image = Column(ARRAY(Text), nullable=True)  # URLs, na ordem recebida
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), index=True)

    # Relationships
    branch = relationship("Branch", back_populates="products")
    category = relationship("Category", backref="products")

    __table_args__ = (
        CheckConstraint("tegs <@ ARRAY['new', 'hit', 'sale']::text[]", name="ck_product_tegs"),
        Index(
            "ix_product_name_fts",
            func.to_tsvector(FTS_CONFIG, name),
            postgresql_using="gin",
        ),
    )
