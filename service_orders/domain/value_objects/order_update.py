from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..enums import OrderStatus


@dataclass(frozen=True)
class OrderUpdate:
    """Partial update of an order; only fields that are not None are applied."""

    description: Optional[str] = None
    status: Optional[OrderStatus] = None
    finished_at: Optional[datetime] = None

    def is_empty(self) -> bool:
        return not self.as_fields()

    def as_fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        if self.description is not None:
            fields["description"] = self.description
        if self.status is not None:
            fields["status"] = OrderStatus(self.status).value
        if self.finished_at is not None:
            fields["finished_at"] = self.finished_at
        return fields
