"""
Aritmética de paginação (páginas começam em 1)
"""
import math
from typing import Any, Dict


def page_offset(page: int, page_size: int) -> int:
    """Offset do primeiro registro da página"""
    return (page - 1) * page_size


def build_pagination(total_records: int, page: int, page_size: int) -> Dict[str, Any]:
    """
    Monta o bloco de paginação.

    Páginas fora do intervalo não são ajustadas: `current_page` pode ser
    maior que `total_pages`, e nesse caso `next_page` é None.
    """
    total_pages = math.ceil(total_records / page_size)
    return {
        "total_records": total_records,
        "current_page": page,
        "total_pages": total_pages,
        "next_page": page + 1 if page < total_pages else None,
        "prev_page": page - 1 if page > 1 else None,
    }
