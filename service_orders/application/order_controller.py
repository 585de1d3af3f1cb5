from typing import Any, Optional

from ..domain import (
    ClientGateway,
    MaterialGateway,
    OrderGateway,
    OrderUpdate,
    ServiceGateway,
    VehicleGateway
)
from .use_cases import (
    AddMaterialUseCase,
    AddServiceUseCase,
    ApproveOrderUseCase,
    AverageExecutionTimeUseCase,
    CreateOrderUseCase,
    DeleteOrderUseCase,
    DisapproveOrderUseCase,
    ReadOneOrderUseCase,
    ReadOrdersUseCase,
    RemoveMaterialUseCase,
    RemoveServiceUseCase,
    UpdateOrderStatusUseCase,
    UpdateOrderUseCase
)


class OrderController:
    """Wires gateways into use cases and renders results as external maps."""

    def __init__(
        self,
        order_gateway: OrderGateway,
        client_gateway: ClientGateway,
        vehicle_gateway: VehicleGateway,
        service_gateway: ServiceGateway,
        material_gateway: MaterialGateway
    ):
        self._order_gateway = order_gateway
        self._client_gateway = client_gateway
        self._vehicle_gateway = vehicle_gateway
        self._service_gateway = service_gateway
        self._material_gateway = material_gateway

    def create(self, client_id: str, vehicle_id: str, description: Optional[str] = None) -> dict[str, Any]:
        use_case = CreateOrderUseCase(self._order_gateway, self._client_gateway, self._vehicle_gateway)
        return use_case.execute(client_id, vehicle_id, description).to_external()

    def list_orders(self, filters: Optional[dict[str, Any]] = None) -> list[dict[str, Any]]:
        return ReadOrdersUseCase(self._order_gateway).execute(filters)

    def get(self, identifier: str) -> Optional[dict[str, Any]]:
        return ReadOneOrderUseCase(self._order_gateway).execute(identifier)

    def update(self, identifier: str, update: OrderUpdate) -> dict[str, Any]:
        return UpdateOrderUseCase(self._order_gateway).execute(identifier, update).to_external()

    def update_status(self, identifier: str, new_status: str) -> dict[str, Any]:
        return UpdateOrderStatusUseCase(self._order_gateway).execute(identifier, new_status).to_external()

    def approve(self, identifier: str) -> dict[str, Any]:
        return ApproveOrderUseCase(self._order_gateway).execute(identifier).to_external()

    def disapprove(self, identifier: str) -> dict[str, Any]:
        return DisapproveOrderUseCase(self._order_gateway).execute(identifier).to_external()

    def delete(self, identifier: str) -> bool:
        return DeleteOrderUseCase(self._order_gateway).execute(identifier)

    def add_service(self, order_id: str, service_id: str) -> str:
        return AddServiceUseCase(self._order_gateway, self._service_gateway).execute(order_id, service_id)

    def remove_service(self, order_id: str, service_id: str) -> bool:
        return RemoveServiceUseCase(self._order_gateway).execute(order_id, service_id) >= 1

    def add_material(self, order_id: str, material_id: str) -> str:
        return AddMaterialUseCase(self._order_gateway, self._material_gateway).execute(order_id, material_id)

    def remove_material(self, order_id: str, material_id: str) -> bool:
        return RemoveMaterialUseCase(self._order_gateway).execute(order_id, material_id) >= 1

    def average_execution_time(self) -> dict[str, Any]:
        return AverageExecutionTimeUseCase(self._order_gateway).execute()
