import logging

from ...domain import Severity
from ._base import OrderUseCase

logger = logging.getLogger(__name__)


class DeleteOrderUseCase(OrderUseCase):
    operation = "DELETE_ORDER"

    def execute(self, identifier: str) -> bool:
        self._get_order(identifier, "Not found by given identifier", Severity.CLIENT_ERROR)

        deleted = self._order_gateway.delete(identifier)
        logger.info("Order %s delete requested, deleted=%s", identifier, deleted)
        return deleted
