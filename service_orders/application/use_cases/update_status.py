import logging

from ...domain import (
    ErrorCode,
    OrderStatus,
    PersistenceFailureException,
    Severity,
    ValidationException,
    WorkOrder
)
from ._base import OrderUseCase

logger = logging.getLogger(__name__)


class UpdateOrderStatusUseCase(OrderUseCase):
    """Move an order to any of the known statuses.

    Unlike approval, no rule is applied to the current status.
    """

    operation = "UPDATE_STATUS"

    def execute(self, identifier: str, new_status: str) -> WorkOrder:
        self._require_identifier(identifier, "Unique identifier not provided")
        self._get_order(identifier, "Not found")

        if not OrderStatus.is_valid(new_status):
            raise self._error(
                ValidationException,
                ErrorCode.VALIDATION,
                Severity.CLIENT_ERROR,
                "Available status options: " + ", ".join(OrderStatus.values()),
                identifier
            )

        persisted = self._order_gateway.update_status(identifier, new_status)
        if not isinstance(persisted, dict):
            raise self._error(
                PersistenceFailureException,
                ErrorCode.PERSISTENCE_FAILURE,
                Severity.SERVER_ERROR,
                "Error while updating",
                identifier
            )

        logger.info("Order %s moved to %s", identifier, new_status)
        return WorkOrder.from_persisted(persisted)
