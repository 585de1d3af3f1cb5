from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from ..enums import OrderStatus
from ..value_objects import Money, OrderUpdate, format_timestamp, parse_timestamp
from .client import Client
from .vehicle import Vehicle
from .service import Service
from .material import Material


@dataclass
class WorkOrder:
    """Service order binding a client, a vehicle and the billable items linked to it.

    ``services`` and ``materials`` hold the catalog items currently linked to
    the order, so totals follow the catalog prices known at load time.
    """

    uuid: str
    client: Client
    vehicle: Vehicle
    opened_at: datetime
    description: Optional[str] = None
    status: OrderStatus = OrderStatus.RECEIVED
    services: list[Service] = field(default_factory=list)
    materials: list[Material] = field(default_factory=list)
    finished_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        self.status = OrderStatus(self.status)

    @classmethod
    def from_persisted(cls, data: dict[str, Any]) -> 'WorkOrder':
        return cls(
            uuid=data["uuid"],
            client=Client.from_persisted(data["client"]),
            vehicle=Vehicle.from_persisted(data["vehicle"]),
            description=data.get("description"),
            status=OrderStatus(data["status"]),
            opened_at=parse_timestamp(data["opened_at"]),
            finished_at=parse_timestamp(data.get("finished_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
            services=[Service.from_persisted(s) for s in data.get("services") or []],
            materials=[Material.from_persisted(m) for m in data.get("materials") or []]
        )

    def is_finished(self) -> bool:
        return self.status == OrderStatus.FINISHED

    def close(self, timestamp: Optional[datetime] = None) -> None:
        # Aggregate-level finish; production flows finish through the gateway's
        # update_status, which stamps finished_at the same way.
        now = timestamp or datetime.now()
        self.status = OrderStatus.FINISHED
        self.finished_at = now
        self.updated_at = now

    def apply_update(self, update: OrderUpdate, timestamp: Optional[datetime] = None) -> None:
        if update.description is not None:
            self.description = update.description
        if update.status is not None:
            self.status = OrderStatus(update.status)
        if update.finished_at is not None:
            self.finished_at = update.finished_at
        self.updated_at = timestamp or datetime.now()

    def get_services_total(self) -> Money:
        total = Money.zero()
        for service in self.services:
            total = total.add(service.get_price())
        return total

    def get_materials_total(self) -> Money:
        total = Money.zero()
        for material in self.materials:
            total = total.add(material.get_internal_use_price())
        return total

    def get_overall_total(self) -> Money:
        return self.get_services_total().add(self.get_materials_total())

    def to_external(self) -> dict[str, Any]:
        return {
            "id": self.uuid,
            "client": self.client.to_external(),
            "vehicle": self.vehicle.to_external(),
            "description": self.description,
            "status": self.status.value,
            "services": [
                {"id": s.uuid, "name": s.name, "value": s.get_price().to_major()}
                for s in self.services
            ],
            "materials": [
                {"id": m.uuid, "name": m.name, "value": m.get_internal_use_price().to_major()}
                for m in self.materials
            ],
            "opened_at": format_timestamp(self.opened_at),
            "finished_at": format_timestamp(self.finished_at),
            "updated_at": format_timestamp(self.updated_at),
            "total_services": self.get_services_total().to_major(),
            "total_materials": self.get_materials_total().to_major(),
            "total_overall": self.get_overall_total().to_major()
        }
