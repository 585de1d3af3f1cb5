import logging
from typing import Optional

from ...domain import (
    ClientGateway,
    ConflictException,
    ErrorCode,
    NotFoundException,
    OrderGateway,
    OrderStatus,
    PersistenceFailureException,
    Severity,
    VehicleGateway,
    WorkOrder
)
from ...domain.value_objects import parse_timestamp
from ._base import OrderUseCase

logger = logging.getLogger(__name__)


class CreateOrderUseCase(OrderUseCase):
    operation = "CREATE_ORDER"

    def __init__(
        self,
        order_gateway: OrderGateway,
        client_gateway: ClientGateway,
        vehicle_gateway: VehicleGateway
    ):
        super().__init__(order_gateway)
        self._client_gateway = client_gateway
        self._vehicle_gateway = vehicle_gateway

    def execute(self, client_id: str, vehicle_id: str, description: Optional[str] = None) -> WorkOrder:
        """Open a new order in RECEIVED status.

        A client may hold a single unfinished order; the check runs here only,
        so concurrent creations must be serialized by the persistence layer.
        """
        client = self._client_gateway.find_by_unique_id(client_id, "uuid")
        if client is None:
            raise self._error(
                NotFoundException, ErrorCode.NOT_FOUND, Severity.NOT_FOUND, "Client not found", client_id
            )

        vehicle = self._vehicle_gateway.find_by_unique_id(vehicle_id, "uuid")
        if vehicle is None:
            raise self._error(
                NotFoundException, ErrorCode.NOT_FOUND, Severity.NOT_FOUND, "Vehicle not found", vehicle_id
            )

        unfinished = self._order_gateway.orders_of_client_with_status_not(
            client.uuid, OrderStatus.FINISHED.value
        )
        if unfinished:
            raise self._error(
                ConflictException,
                ErrorCode.CONFLICT,
                Severity.CLIENT_ERROR,
                f"Client has {len(unfinished)} unfinished order(s)",
                client_id
            )

        persisted = self._order_gateway.create({
            "client_id": client.uuid,
            "vehicle_id": vehicle.uuid,
            "description": description,
            "status": OrderStatus.RECEIVED.value
        })
        if not isinstance(persisted, dict):
            raise self._error(
                PersistenceFailureException,
                ErrorCode.PERSISTENCE_FAILURE,
                Severity.SERVER_ERROR,
                "Error while creating the order"
            )

        order = WorkOrder(
            uuid=persisted["uuid"],
            client=client,
            vehicle=vehicle,
            description=persisted.get("description"),
            status=OrderStatus(persisted["status"]),
            opened_at=parse_timestamp(persisted["opened_at"])
        )
        logger.info("Order %s opened for client %s", order.uuid, client.uuid)
        return order
