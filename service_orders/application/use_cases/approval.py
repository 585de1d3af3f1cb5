import logging

from ...domain import (
    ErrorCode,
    GuardViolationException,
    OrderStatus,
    PersistenceFailureException,
    Severity,
    WorkOrder
)
from ._base import OrderUseCase

logger = logging.getLogger(__name__)


class _ApprovalDecisionUseCase(OrderUseCase):
    target_status: OrderStatus
    already_message: str
    verb: str

    def execute(self, identifier: str) -> WorkOrder:
        self._require_identifier(identifier, "Order not properly specified")
        order = self._get_order(identifier, "Not found")

        if order.status == self.target_status:
            raise self._error(
                GuardViolationException,
                ErrorCode.GUARD_VIOLATION,
                Severity.CLIENT_ERROR,
                self.already_message,
                identifier
            )

        if order.status != OrderStatus.AWAITING_APPROVAL:
            raise self._error(
                GuardViolationException,
                ErrorCode.GUARD_VIOLATION,
                Severity.NOT_FOUND,
                f"Order can no longer be {self.verb}, current status is: {order.status.value}",
                identifier
            )

        persisted = self._order_gateway.update_status(identifier, self.target_status.value)
        if not isinstance(persisted, dict):
            raise self._error(
                PersistenceFailureException,
                ErrorCode.PERSISTENCE_FAILURE,
                Severity.SERVER_ERROR,
                "Error while updating",
                identifier
            )

        logger.info("Order %s %s", identifier, self.verb)
        return WorkOrder.from_persisted(persisted)


class ApproveOrderUseCase(_ApprovalDecisionUseCase):
    operation = "APPROVE_ORDER"
    target_status = OrderStatus.APPROVED
    already_message = "Order is already approved"
    verb = "approved"


class DisapproveOrderUseCase(_ApprovalDecisionUseCase):
    operation = "DISAPPROVE_ORDER"
    target_status = OrderStatus.REJECTED
    already_message = "Order is already rejected"
    verb = "rejected"
