from .create_order import CreateOrderUseCase
from .read_orders import ReadOrdersUseCase, ReadOneOrderUseCase
from .update_order import UpdateOrderUseCase
from .update_status import UpdateOrderStatusUseCase
from .approval import ApproveOrderUseCase, DisapproveOrderUseCase
from .delete_order import DeleteOrderUseCase
from .execution_time import AverageExecutionTimeUseCase
from .order_items import (
    AddServiceUseCase,
    RemoveServiceUseCase,
    AddMaterialUseCase,
    RemoveMaterialUseCase
)

__all__ = [
    "CreateOrderUseCase",
    "ReadOrdersUseCase",
    "ReadOneOrderUseCase",
    "UpdateOrderUseCase",
    "UpdateOrderStatusUseCase",
    "ApproveOrderUseCase",
    "DisapproveOrderUseCase",
    "DeleteOrderUseCase",
    "AverageExecutionTimeUseCase",
    "AddServiceUseCase",
    "RemoveServiceUseCase",
    "AddMaterialUseCase",
    "RemoveMaterialUseCase"
]
