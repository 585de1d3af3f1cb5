from typing import Any, Optional

from ...domain import OrderGateway, WorkOrder


class ReadOrdersUseCase:
    """List orders as external maps; filter validity is left to the gateway."""

    def __init__(self, order_gateway: OrderGateway):
        self._order_gateway = order_gateway

    def execute(self, filters: Optional[dict[str, Any]] = None) -> list[dict[str, Any]]:
        rows = self._order_gateway.find_all(filters or {})
        return [WorkOrder.from_persisted(row).to_external() for row in rows]


class ReadOneOrderUseCase:
    def __init__(self, order_gateway: OrderGateway):
        self._order_gateway = order_gateway

    def execute(self, identifier: str) -> Optional[dict[str, Any]]:
        if not identifier:
            return None

        order = self._order_gateway.find_by_unique_id(identifier, "uuid")
        if order is None:
            return None
        return order.to_external()
