from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..value_objects import CLIENT_TIMESTAMP_FORMAT, format_timestamp, parse_timestamp


@dataclass
class Client:
    uuid: str
    name: str
    document: str
    email: str
    phone: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_persisted(cls, data: dict[str, Any]) -> 'Client':
        return cls(
            uuid=data["uuid"],
            name=data["name"],
            document=data["document"],
            email=data["email"],
            phone=data["phone"],
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at"))
        )

    def to_persisted(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "name": self.name,
            "document": self.document,
            "email": self.email,
            "phone": self.phone,
            "created_at": self.created_at,
            "updated_at": self.updated_at
        }

    def to_external(self) -> dict[str, Any]:
        return {
            "id": self.uuid,
            "name": self.name,
            "document": self.document,
            "email": self.email,
            "phone": self.phone,
            "created_at": format_timestamp(self.created_at, CLIENT_TIMESTAMP_FORMAT),
            "updated_at": format_timestamp(self.updated_at, CLIENT_TIMESTAMP_FORMAT)
        }
