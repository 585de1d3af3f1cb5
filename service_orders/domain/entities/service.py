from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..value_objects import Money, parse_timestamp


@dataclass
class Service:
    """Catalog service; ``price`` is in cents."""

    uuid: str
    name: str
    price: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_persisted(cls, data: dict[str, Any]) -> 'Service':
        return cls(
            uuid=data["uuid"],
            name=data["name"],
            price=int(data["price"]),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at"))
        )

    def to_persisted(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "name": self.name,
            "price": self.price,
            "created_at": self.created_at,
            "updated_at": self.updated_at
        }

    def get_price(self) -> Money:
        return Money.from_cents(self.price)
