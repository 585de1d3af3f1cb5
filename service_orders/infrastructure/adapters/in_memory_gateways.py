import logging
import uuid as uuid_lib
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Generic, Optional, TypeVar

from ...domain import (
    Client,
    ClientGateway,
    DomainError,
    ErrorCode,
    Material,
    MaterialGateway,
    OrderGateway,
    OrderMaterialLink,
    OrderServiceLink,
    OrderStatus,
    PersistenceFailureException,
    Service,
    ServiceGateway,
    Severity,
    ValidationException,
    Vehicle,
    VehicleGateway,
    WorkOrder
)

logger = logging.getLogger(__name__)

E = TypeVar("E")

UNLISTABLE_STATUSES = (OrderStatus.FINISHED.value, OrderStatus.DELIVERED.value)


def _persistence_failure(operation: str, message: str, resource_id: Optional[str] = None) -> PersistenceFailureException:
    return PersistenceFailureException(DomainError(
        operation=operation,
        code=ErrorCode.PERSISTENCE_FAILURE,
        severity=Severity.SERVER_ERROR,
        message=message,
        resource_id=resource_id
    ))


class InMemoryGateway(Generic[E]):
    """Dict-backed table keyed by a numeric id, addressed from outside by uuid."""

    entity_cls: Any = None

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._clock = clock
        self._rows: dict[int, dict[str, Any]] = {}
        self._next_id = 1

    def _present(self, row: dict[str, Any]) -> dict[str, Any]:
        return dict(row)

    def _find_row(self, identifier: str | int, id_field: str = "uuid") -> Optional[dict[str, Any]]:
        if id_field == "id":
            if not str(identifier).isdigit():
                return None
            return self._rows.get(int(identifier))
        for row in self._rows.values():
            if row.get(id_field) == identifier:
                return row
        return None

    def _require_row(self, identifier: str, operation: str) -> dict[str, Any]:
        row = self._find_row(identifier)
        if row is None:
            raise _persistence_failure(operation, f"No record for identifier {identifier}", identifier)
        return row

    def add(self, entity: Any) -> int:
        row = entity.to_persisted()
        row["id"] = self._next_id
        self._rows[self._next_id] = row
        self._next_id += 1
        return row["id"]

    def find_by_unique_id(self, identifier: str, id_field: str = "uuid") -> Optional[E]:
        if not identifier:
            return None
        row = self._find_row(identifier, id_field)
        if row is None:
            return None
        return self.entity_cls.from_persisted(self._present(row))

    def create(self, fields: dict[str, Any]) -> dict[str, Any]:
        now = self._clock()
        row = {"created_at": now, "updated_at": now, **fields}
        row["id"] = self._next_id
        row["uuid"] = fields.get("uuid") or str(uuid_lib.uuid4())
        self._rows[self._next_id] = row
        self._next_id += 1
        return self._present(row)

    def update(self, identifier: str, fields: dict[str, Any]) -> dict[str, Any]:
        row = self._require_row(identifier, "UPDATE")
        row.update(fields)
        row["updated_at"] = self._clock()
        return self._present(row)

    def delete(self, identifier: str) -> bool:
        row = self._find_row(identifier)
        if row is None:
            return False
        del self._rows[row["id"]]
        logger.debug("Deleted %s %s", type(self).__name__, identifier)
        return True

    def find_all(self, filters: Optional[dict[str, Any]] = None) -> list[dict[str, Any]]:
        filters = {key: value for key, value in (filters or {}).items() if value not in (None, "")}
        return [
            self._present(row)
            for row in self._rows.values()
            if all(row.get(key) == value for key, value in filters.items())
        ]

    def numeric_id(self, identifier: str) -> int:
        row = self._find_row(identifier)
        if row is None:
            return -1
        return row["id"]

    def clear(self) -> None:
        self._rows.clear()
        self._next_id = 1


class InMemoryClientGateway(InMemoryGateway[Client], ClientGateway):
    entity_cls = Client


class InMemoryVehicleGateway(InMemoryGateway[Vehicle], VehicleGateway):
    entity_cls = Vehicle


class InMemoryServiceGateway(InMemoryGateway[Service], ServiceGateway):
    entity_cls = Service


class InMemoryMaterialGateway(InMemoryGateway[Material], MaterialGateway):
    entity_cls = Material


class InMemoryOrderGateway(InMemoryGateway[WorkOrder], OrderGateway):
    """Orders reference clients, vehicles and catalog items by numeric id."""

    entity_cls = WorkOrder

    def __init__(
        self,
        clients: InMemoryClientGateway,
        vehicles: InMemoryVehicleGateway,
        services: InMemoryServiceGateway,
        materials: InMemoryMaterialGateway,
        clock: Callable[[], datetime] = datetime.now
    ):
        super().__init__(clock)
        self._clients = clients
        self._vehicles = vehicles
        self._services = services
        self._materials = materials
        self._service_links: list[OrderServiceLink] = []
        self._material_links: list[OrderMaterialLink] = []

    def _present(self, row: dict[str, Any]) -> dict[str, Any]:
        services = [
            self._services._rows[link.service_id]
            for link in self._service_links
            if link.order_id == row["id"] and link.service_id in self._services._rows
        ]
        materials = [
            self._materials._rows[link.material_id]
            for link in self._material_links
            if link.order_id == row["id"] and link.material_id in self._materials._rows
        ]
        return {
            "uuid": row["uuid"],
            "description": row.get("description"),
            "status": row["status"],
            "opened_at": row["opened_at"],
            "finished_at": row.get("finished_at"),
            "updated_at": row.get("updated_at"),
            "client": dict(self._clients._rows[row["client_id"]]),
            "vehicle": dict(self._vehicles._rows[row["vehicle_id"]]),
            "services": [dict(s) for s in services],
            "materials": [dict(m) for m in materials]
        }

    def _status_side_effects(self, fields: dict[str, Any]) -> dict[str, Any]:
        if "status" not in fields or "finished_at" in fields:
            return fields
        finished_at = self._clock() if fields["status"] == OrderStatus.FINISHED.value else None
        return {**fields, "finished_at": finished_at}

    def _touch(self, order_id: int) -> None:
        self._rows[order_id]["updated_at"] = self._clock()

    def create(self, fields: dict[str, Any]) -> dict[str, Any]:
        client_id = self._clients.numeric_id(fields["client_id"])
        vehicle_id = self._vehicles.numeric_id(fields["vehicle_id"])
        if client_id < 0 or vehicle_id < 0:
            raise _persistence_failure("CREATE_ORDER", "Client or vehicle is not registered")

        row = {
            "uuid": str(uuid_lib.uuid4()),
            "client_id": client_id,
            "vehicle_id": vehicle_id,
            "description": fields.get("description"),
            "status": fields.get("status", OrderStatus.RECEIVED.value),
            "opened_at": fields.get("opened_at") or self._clock(),
            "finished_at": None,
            "updated_at": None,
            "id": self._next_id
        }
        self._rows[self._next_id] = row
        self._next_id += 1
        return self._present(row)

    def update(self, identifier: str, fields: dict[str, Any]) -> dict[str, Any]:
        return super().update(identifier, self._status_side_effects(fields))

    def update_status(self, identifier: str, new_status: str) -> dict[str, Any]:
        return self.update(identifier, {"status": new_status})

    def delete(self, identifier: str) -> bool:
        row = self._find_row(identifier)
        if row is None:
            return False
        self._service_links = [link for link in self._service_links if link.order_id != row["id"]]
        self._material_links = [link for link in self._material_links if link.order_id != row["id"]]
        return super().delete(identifier)

    def find_all(self, filters: Optional[dict[str, Any]] = None) -> list[dict[str, Any]]:
        filters = dict(filters or {})
        status = filters.pop("status", None)
        if status in UNLISTABLE_STATUSES:
            raise ValidationException(DomainError(
                operation="LIST_ORDERS",
                code=ErrorCode.VALIDATION,
                severity=Severity.CLIENT_ERROR,
                message="Cannot list orders with the given status"
            ))

        rows = [
            row for row in self._rows.values()
            if (row["status"] == status if status else row["status"] not in UNLISTABLE_STATUSES)
            and all(row.get(key) == value for key, value in filters.items() if value not in (None, ""))
        ]
        rows.sort(key=lambda row: row["opened_at"], reverse=True)
        return [self._present(row) for row in rows]

    def orders_of_client_with_status(self, client_id: str, status: str) -> list[dict[str, Any]]:
        numeric = self._clients.numeric_id(client_id)
        return [
            self._present(row) for row in self._rows.values()
            if row["client_id"] == numeric and row["status"] == status
        ]

    def orders_of_client_with_status_not(self, client_id: str, status: str) -> list[dict[str, Any]]:
        numeric = self._clients.numeric_id(client_id)
        return [
            self._present(row) for row in self._rows.values()
            if row["client_id"] == numeric and row["status"] != status
        ]

    def finished_orders(self) -> list[dict[str, Any]]:
        return [
            self._present(row) for row in self._rows.values()
            if row["status"] == OrderStatus.FINISHED.value
            and row.get("opened_at") is not None
            and row.get("finished_at") is not None
        ]

    def link_service(self, order_id: str, service_id: str) -> str:
        order_key = self.numeric_id(order_id)
        service_key = self._services.numeric_id(service_id)
        if order_key < 0 or service_key < 0:
            raise _persistence_failure("ADD_SERVICE", "Error while adding service", order_id)

        link = OrderServiceLink(uuid=str(uuid_lib.uuid4()), order_id=order_key, service_id=service_key)
        self._service_links.append(link)
        self._touch(order_key)
        logger.debug("Linked service %s to order %s", service_id, order_id)
        return link.uuid

    def unlink_service(self, order_id: str, service_id: str) -> int:
        order_key = self.numeric_id(order_id)
        service_key = self._services.numeric_id(service_id)
        kept = [
            link for link in self._service_links
            if not (link.order_id == order_key and link.service_id == service_key)
        ]
        removed = len(self._service_links) - len(kept)
        if not removed:
            raise _persistence_failure("REMOVE_SERVICE", "Error while removing service", order_id)

        self._service_links = kept
        self._touch(order_key)
        logger.debug("Unlinked service %s from order %s", service_id, order_id)
        return removed

    def link_material(self, order_id: str, material_id: str) -> str:
        order_key = self.numeric_id(order_id)
        material_key = self._materials.numeric_id(material_id)
        if order_key < 0 or material_key < 0:
            raise _persistence_failure("ADD_MATERIAL", "Error while adding material", order_id)

        link = OrderMaterialLink(uuid=str(uuid_lib.uuid4()), order_id=order_key, material_id=material_key)
        self._material_links.append(link)
        self._touch(order_key)
        logger.debug("Linked material %s to order %s", material_id, order_id)
        return link.uuid

    def unlink_material(self, order_id: str, material_id: str) -> int:
        order_key = self.numeric_id(order_id)
        material_key = self._materials.numeric_id(material_id)
        kept = [
            link for link in self._material_links
            if not (link.order_id == order_key and link.material_id == material_key)
        ]
        removed = len(self._material_links) - len(kept)
        if not removed:
            raise _persistence_failure("REMOVE_MATERIAL", "Error while removing material", order_id)

        self._material_links = kept
        self._touch(order_key)
        logger.debug("Unlinked material %s from order %s", material_id, order_id)
        return removed

    def clear(self) -> None:
        super().clear()
        self._service_links.clear()
        self._material_links.clear()


@dataclass
class InMemoryGateways:
    clients: InMemoryClientGateway
    vehicles: InMemoryVehicleGateway
    services: InMemoryServiceGateway
    materials: InMemoryMaterialGateway
    orders: InMemoryOrderGateway

    @classmethod
    def create(cls, clock: Callable[[], datetime] = datetime.now) -> 'InMemoryGateways':
        clients = InMemoryClientGateway(clock)
        vehicles = InMemoryVehicleGateway(clock)
        services = InMemoryServiceGateway(clock)
        materials = InMemoryMaterialGateway(clock)
        orders = InMemoryOrderGateway(clients, vehicles, services, materials, clock)
        return cls(clients, vehicles, services, materials, orders)

    def clear(self) -> None:
        self.orders.clear()
        self.clients.clear()
        self.vehicles.clear()
        self.services.clear()
        self.materials.clear()
