"""Pagination — offset and page-count arithmetic for blog listings.

Invariants:
    - pages = ceil(total / limit); zero items means zero pages
    - page and limit are >= 1 (enforced at the API boundary)
    - A page past the last one is valid and simply yields no items
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PageRequest:
    page: int = 1
    limit: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)


def build_pagination(total: int, request: PageRequest) -> dict:
    """Pagination block of the response envelope."""
    return {
        "total": total,
        "pages": total_pages(total, request.limit),
        "currentPage": request.page,
        "limit": request.limit,
    }
