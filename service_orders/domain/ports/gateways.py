from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from ..entities import Client, Vehicle, Service, Material, WorkOrder

E = TypeVar("E")


class Gateway(ABC, Generic[E]):
    """Persistence boundary. Identifiers are UUID strings; money is in cents."""

    @abstractmethod
    def find_by_unique_id(self, identifier: str, id_field: str = "uuid") -> Optional[E]:
        pass

    @abstractmethod
    def create(self, fields: dict[str, Any]) -> dict[str, Any]:
        pass

    @abstractmethod
    def update(self, identifier: str, fields: dict[str, Any]) -> dict[str, Any]:
        pass

    @abstractmethod
    def delete(self, identifier: str) -> bool:
        pass

    @abstractmethod
    def find_all(self, filters: Optional[dict[str, Any]] = None) -> list[dict[str, Any]]:
        pass


class ClientGateway(Gateway[Client]):
    pass


class VehicleGateway(Gateway[Vehicle]):
    pass


class ServiceGateway(Gateway[Service]):
    pass


class MaterialGateway(Gateway[Material]):
    pass


class OrderGateway(Gateway[WorkOrder]):
    @abstractmethod
    def update_status(self, identifier: str, new_status: str) -> dict[str, Any]:
        """Persist a new status; stamps finished_at when the status is FINISHED."""

    @abstractmethod
    def link_service(self, order_id: str, service_id: str) -> str:
        pass

    @abstractmethod
    def unlink_service(self, order_id: str, service_id: str) -> int:
        pass

    @abstractmethod
    def link_material(self, order_id: str, material_id: str) -> str:
        pass

    @abstractmethod
    def unlink_material(self, order_id: str, material_id: str) -> int:
        pass

    @abstractmethod
    def orders_of_client_with_status(self, client_id: str, status: str) -> list[dict[str, Any]]:
        pass

    @abstractmethod
    def orders_of_client_with_status_not(self, client_id: str, status: str) -> list[dict[str, Any]]:
        pass

    @abstractmethod
    def finished_orders(self) -> list[dict[str, Any]]:
        """FINISHED orders carrying both opened_at and finished_at."""

    @abstractmethod
    def numeric_id(self, identifier: str) -> int:
        """Internal numeric key for a UUID, or -1 when unknown."""
