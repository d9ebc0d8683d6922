from app.database import Base
from app.models.branch import Branch
from app.models.category import Category
from app.models.product import Product
from app.models.admin import Admin

__all__ = [
    "Base",
    "Branch",
    "Category",
    "Product",
    "Admin",
]
