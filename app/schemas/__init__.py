from app.schemas.product import (
    Tag,
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductWithBranchResponse,
    Pagination,
    ProductPage,
)

__all__ = [
    "Tag",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "ProductWithBranchResponse",
    "Pagination",
    "ProductPage",
]
