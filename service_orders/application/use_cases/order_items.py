import logging

from ...domain import (
    ErrorCode,
    GuardViolationException,
    MaterialGateway,
    NotFoundException,
    OrderGateway,
    OrderStatus,
    PersistenceFailureException,
    ServiceGateway,
    Severity
)
from ._base import OrderUseCase

logger = logging.getLogger(__name__)

CLOSED_STATUSES = frozenset({
    OrderStatus.FINISHED,
    OrderStatus.CANCELLED,
    OrderStatus.REJECTED,
    OrderStatus.DELIVERED
})
REMOVABLE_STATUSES = frozenset({
    OrderStatus.RECEIVED,
    OrderStatus.AWAITING_APPROVAL
})


class AddServiceUseCase(OrderUseCase):
    operation = "ADD_SERVICE"

    def __init__(self, order_gateway: OrderGateway, service_gateway: ServiceGateway):
        super().__init__(order_gateway)
        self._service_gateway = service_gateway

    def execute(self, order_id: str, service_id: str) -> str:
        order = self._get_order(order_id, "Order does not exist")

        if order.status in CLOSED_STATUSES:
            raise self._error(
                GuardViolationException,
                ErrorCode.GUARD_VIOLATION,
                Severity.CLIENT_ERROR,
                "Order can no longer receive services",
                order_id
            )

        if self._service_gateway.find_by_unique_id(service_id, "uuid") is None:
            raise self._error(
                NotFoundException, ErrorCode.NOT_FOUND, Severity.NOT_FOUND, "Service not found", service_id
            )

        link_id = self._order_gateway.link_service(order_id, service_id)
        if not isinstance(link_id, str) or not link_id:
            raise self._error(
                PersistenceFailureException,
                ErrorCode.PERSISTENCE_FAILURE,
                Severity.SERVER_ERROR,
                "Error while adding service",
                order_id
            )

        logger.info("Service %s linked to order %s as %s", service_id, order_id, link_id)
        return link_id


class RemoveServiceUseCase(OrderUseCase):
    operation = "REMOVE_SERVICE"

    def execute(self, order_id: str, service_id: str) -> int:
        order = self._get_order(order_id, "Order does not exist")

        if order.status not in REMOVABLE_STATUSES:
            raise self._error(
                GuardViolationException,
                ErrorCode.GUARD_VIOLATION,
                Severity.CLIENT_ERROR,
                "Only received or awaiting-approval orders may have services removed",
                order_id
            )

        removed = self._order_gateway.unlink_service(order_id, service_id)
        logger.info("Service %s unlinked from order %s (%d row(s))", service_id, order_id, removed)
        return removed


class AddMaterialUseCase(OrderUseCase):
    operation = "ADD_MATERIAL"

    def __init__(self, order_gateway: OrderGateway, material_gateway: MaterialGateway):
        super().__init__(order_gateway)
        self._material_gateway = material_gateway

    def execute(self, order_id: str, material_id: str) -> str:
        order = self._get_order(order_id, "Order does not exist")

        if order.status in CLOSED_STATUSES:
            raise self._error(
                GuardViolationException,
                ErrorCode.GUARD_VIOLATION,
                Severity.CLIENT_ERROR,
                "Order can no longer receive materials",
                order_id
            )

        if self._material_gateway.find_by_unique_id(material_id, "uuid") is None:
            raise self._error(
                NotFoundException, ErrorCode.NOT_FOUND, Severity.NOT_FOUND, "Material not found", material_id
            )

        link_id = self._order_gateway.link_material(order_id, material_id)
        if not isinstance(link_id, str) or not link_id:
            raise self._error(
                PersistenceFailureException,
                ErrorCode.PERSISTENCE_FAILURE,
                Severity.SERVER_ERROR,
                "Error while adding material",
                order_id
            )

        logger.info("Material %s linked to order %s as %s", material_id, order_id, link_id)
        return link_id


class RemoveMaterialUseCase(OrderUseCase):
    operation = "REMOVE_MATERIAL"

    def execute(self, order_id: str, material_id: str) -> int:
        order = self._get_order(order_id, "Order does not exist")

        if order.status not in REMOVABLE_STATUSES:
            raise self._error(
                GuardViolationException,
                ErrorCode.GUARD_VIOLATION,
                Severity.CLIENT_ERROR,
                "Only received or awaiting-approval orders may have materials removed",
                order_id
            )

        removed = self._order_gateway.unlink_material(order_id, material_id)
        logger.info("Material %s unlinked from order %s (%d row(s))", material_id, order_id, removed)
        return removed
