from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional


class Tag(str, Enum):
    NEW = "new"
    HIT = "hit"
    SALE = "sale"


class ProductBase(BaseModel):
    barcode: str
    name: str
    branch_id: int
    price: Decimal
    real_price: Decimal
    stock: int
    category_id: int
    description: Optional[str] = None


class ProductCreate(ProductBase):
    tegs: List[Tag] = []
    image_urls: Optional[List[str]] = Field(default=None, alias="imageUrls")

    model_config = ConfigDict(populate_by_name=True)


class ProductUpdate(BaseModel):
    """Atualização parcial: apenas os campos enviados são gravados"""
    barcode: Optional[str] = None
    name: Optional[str] = None
    branch_id: Optional[int] = None
    price: Optional[Decimal] = None
    real_price: Optional[Decimal] = None
    stock: Optional[int] = None
    category_id: Optional[int] = None
    description: Optional[str] = None
    tegs: Optional[List[Tag]] = None
    image_urls: Optional[List[str]] = Field(default=None, alias="imageUrls")

    model_config = ConfigDict(populate_by_name=True)


class ProductResponse(ProductBase):
    id: int
    tegs: Optional[List[Tag]] = None
    image: Optional[List[str]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ProductWithBranchResponse(ProductResponse):
    branch_name: Optional[str] = None


class Pagination(BaseModel):
    total_records: int
    current_page: int
    total_pages: int
    next_page: Optional[int] = None
    prev_page: Optional[int] = None


class ProductPage(BaseModel):
    data: List[ProductWithBranchResponse]
    pagination: Pagination