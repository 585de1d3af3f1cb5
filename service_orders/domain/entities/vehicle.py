from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..value_objects import parse_timestamp


@dataclass
class Vehicle:
    uuid: str
    brand: str
    model: str
    plate: str
    year: int
    client_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_persisted(cls, data: dict[str, Any]) -> 'Vehicle':
        return cls(
            uuid=data["uuid"],
            brand=data["brand"],
            model=data["model"],
            plate=data["plate"],
            year=int(data["year"]),
            client_id=int(data["client_id"]),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at"))
        )

    def to_persisted(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "brand": self.brand,
            "model": self.model,
            "plate": self.plate,
            "year": self.year,
            "client_id": self.client_id,
            "created_at": self.created_at,
            "updated_at": self.updated_at
        }

    def to_external(self) -> dict[str, Any]:
        return {
            "id": self.uuid,
            "brand": self.brand,
            "model": self.model,
            "plate": self.plate,
            "year": self.year
        }
