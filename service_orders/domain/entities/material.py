from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..value_objects import Money, parse_timestamp


@dataclass
class Material:
    """Catalog material. All prices are in cents."""

    uuid: str
    name: str
    stock: int
    cost_price: int
    sale_price: int
    internal_use_price: int
    sku: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_persisted(cls, data: dict[str, Any]) -> 'Material':
        return cls(
            uuid=data["uuid"],
            name=data["name"],
            stock=int(data.get("stock", 0)),
            cost_price=int(data.get("cost_price", 0)),
            sale_price=int(data.get("sale_price", 0)),
            internal_use_price=int(data["internal_use_price"]),
            sku=data.get("sku"),
            description=data.get("description"),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at"))
        )

    def to_persisted(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "name": self.name,
            "sku": self.sku,
            "description": self.description,
            "stock": self.stock,
            "cost_price": self.cost_price,
            "sale_price": self.sale_price,
            "internal_use_price": self.internal_use_price,
            "created_at": self.created_at,
            "updated_at": self.updated_at
        }

    def get_internal_use_price(self) -> Money:
        return Money.from_cents(self.internal_use_price)
