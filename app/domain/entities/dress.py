from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CatalogItem:
    name: str
    price: float | None
    description: str = ""
    image_url: str = ""
    type: str | None = None
    size_available: frozenset[int] = field(default_factory=frozenset)
    in_stock: bool = False

    @staticmethod
    def from_document(data: dict[str, Any]) -> "CatalogItem":
        price = data.get("price")
        if isinstance(price, bool) or not isinstance(price, (int, float)) or math.isnan(price):
            price = None

        dress_type = data.get("type")
        sizes = data.get("size_available") or []
        if not isinstance(sizes, (list, tuple, set, frozenset)):
            sizes = []

        return CatalogItem(
            name=str(data.get("name") or ""),
            price=price,
            description=str(data.get("description") or ""),
            image_url=str(data.get("image_url") or ""),
            type=dress_type if isinstance(dress_type, str) else None,
            size_available=frozenset(
                int(s) for s in sizes
                if isinstance(s, (int, float)) and not isinstance(s, bool) and float(s).is_integer()
            ),
            in_stock=bool(data.get("in_stock")),
        )

    def to_view(self) -> "DressView":
        return DressView(
            name=self.name,
            price=self.price if self.price is not None else 0,
            description=self.description,
            image_url=self.image_url,
        )


@dataclass(frozen=True)
class DressView:
    """Projection of a catalog item carried through session parameters."""

    name: str
    price: float
    description: str
    image_url: str

    @staticmethod
    def from_payload(data: dict[str, Any]) -> "DressView":
        """Rebuild a view from session parameters; raises ValueError on an unusable price."""
        price = data.get("price")
        if isinstance(price, bool) or price is None:
            raise ValueError(f"Dress price is missing or not a number: {price!r}")
        if not isinstance(price, (int, float)):
            try:
                price = float(price)
            except (TypeError, ValueError):
                raise ValueError(f"Dress price is not a number: {price!r}") from None
        if not math.isfinite(price) or price < 0:
            raise ValueError(f"Dress price is out of range: {price!r}")
        return DressView(
            name=str(data.get("name") or ""),
            price=price,
            description=str(data.get("description") or ""),
            image_url=str(data.get("image_url") or ""),
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "price": self.price,
            "description": self.description,
            "image_url": self.image_url,
        }
