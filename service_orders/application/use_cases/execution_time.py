import logging
import math
from typing import Any

from ...domain import OrderGateway, WorkOrder

logger = logging.getLogger(__name__)

SECONDS_PER_HOUR = 3600
HOURS_PER_DAY = 24


class AverageExecutionTimeUseCase:
    """Average time between opening and finishing, over finished orders.

    Orders missing either timestamp are left out by the gateway.
    """

    def __init__(self, order_gateway: OrderGateway):
        self._order_gateway = order_gateway

    def execute(self) -> dict[str, Any]:
        orders = [WorkOrder.from_persisted(row) for row in self._order_gateway.finished_orders()]
        if not orders:
            return {
                "finished_orders": 0,
                "average_hours": 0,
                "average_days": 0,
                "average_formatted": "0 days, 0 hours"
            }

        total_seconds = sum((order.finished_at - order.opened_at).total_seconds() for order in orders)
        average_hours = total_seconds / len(orders) / SECONDS_PER_HOUR
        average_days = average_hours / HOURS_PER_DAY

        days = math.floor(average_days)
        hours = math.floor(average_hours % HOURS_PER_DAY)

        logger.debug("Average execution time over %d order(s): %.2fh", len(orders), average_hours)
        return {
            "finished_orders": len(orders),
            "average_hours": round(average_hours, 2),
            "average_days": round(average_days, 2),
            "average_formatted": f"{days} days, {hours} hours"
        }
