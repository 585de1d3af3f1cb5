import logging

from ...domain import (
    ErrorCode,
    OrderStatus,
    OrderUpdate,
    PersistenceFailureException,
    Severity,
    ValidationException,
    WorkOrder
)
from ._base import OrderUseCase

logger = logging.getLogger(__name__)


class UpdateOrderUseCase(OrderUseCase):
    operation = "UPDATE_ORDER"

    def execute(self, identifier: str, update: OrderUpdate) -> WorkOrder:
        self._require_identifier(identifier, "Unique identifier not provided")
        self._get_order(identifier, "Not found")

        if update.status is not None and not OrderStatus.is_valid(update.status):
            raise self._error(
                ValidationException,
                ErrorCode.VALIDATION,
                Severity.CLIENT_ERROR,
                "Available status options: " + ", ".join(OrderStatus.values()),
                identifier
            )

        persisted = self._order_gateway.update(identifier, update.as_fields())
        if not isinstance(persisted, dict):
            raise self._error(
                PersistenceFailureException,
                ErrorCode.PERSISTENCE_FAILURE,
                Severity.SERVER_ERROR,
                "Error while updating",
                identifier
            )

        logger.info("Order %s updated: %s", identifier, sorted(update.as_fields()))
        return WorkOrder.from_persisted(persisted)
