import math
from typing import Any, List

from pydantic import BaseModel


class PageableResponse(BaseModel):
    """Respuesta paginada genérica"""
    content: List[Any]
    page: int
    size: int
    total_elements: int
    total_pages: int

    @classmethod
    def from_page(cls, content: List[Any], page: int, size: int, total_elements: int) -> "PageableResponse":
        return cls(
            content=content,
            page=page,
            size=size,
            total_elements=total_elements,
            total_pages=math.ceil(total_elements / size) if size else 0
        )
