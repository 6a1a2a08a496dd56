from __future__ import annotations

import math
from dataclasses import dataclass

from app.domain.entities.dress import CatalogItem


@dataclass(frozen=True)
class SearchCriteria:
    dress_type: str | None = None  # None matches every type
    size: int = 0  # 0 means unconstrained
    min_price: float = 0
    max_price: float = math.inf

    def matches(self, item: CatalogItem) -> bool:
        if item.price is None or not (self.min_price <= item.price <= self.max_price):
            return False
        if self.dress_type is not None:
            if item.type is None or item.type.lower() != self.dress_type.lower():
                return False
        if self.size and self.size not in item.size_available:
            return False
        return item.in_stock
