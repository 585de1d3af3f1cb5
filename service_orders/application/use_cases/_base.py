import logging
from typing import Optional

from ...domain import (
    DomainError,
    DomainException,
    ErrorCode,
    NotFoundException,
    OrderGateway,
    Severity,
    ValidationException,
    WorkOrder
)

logger = logging.getLogger(__name__)


class OrderUseCase:
    operation = "ORDER"

    def __init__(self, order_gateway: OrderGateway):
        self._order_gateway = order_gateway

    def _error(
        self,
        exception_cls: type[DomainException],
        code: ErrorCode,
        severity: Severity,
        message: str,
        resource_id: Optional[str] = None
    ) -> DomainException:
        logger.warning("%s rejected for %s: %s", self.operation, resource_id, message)
        return exception_cls(DomainError(
            operation=self.operation,
            code=code,
            severity=severity,
            message=message,
            resource_id=resource_id
        ))

    def _require_identifier(self, identifier: str, message: str) -> None:
        if not identifier:
            raise self._error(
                ValidationException,
                ErrorCode.VALIDATION,
                Severity.CLIENT_ERROR,
                message,
                identifier
            )

    def _get_order(
        self,
        identifier: str,
        message: str,
        severity: Severity = Severity.NOT_FOUND
    ) -> WorkOrder:
        order = self._order_gateway.find_by_unique_id(identifier, "uuid")
        if order is None:
            raise self._error(NotFoundException, ErrorCode.NOT_FOUND, severity, message, identifier)
        return order
