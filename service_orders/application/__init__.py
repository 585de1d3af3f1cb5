from .order_controller import OrderController
from .dtos import (
    CreateOrderRequest,
    UpdateOrderRequest,
    UpdateStatusRequest,
    ServiceLinkRequest,
    MaterialLinkRequest,
    OrderResponse,
    MessageResponse
)

__all__ = [
    "OrderController",
    "CreateOrderRequest",
    "UpdateOrderRequest",
    "UpdateStatusRequest",
    "ServiceLinkRequest",
    "MaterialLinkRequest",
    "OrderResponse",
    "MessageResponse"
]
