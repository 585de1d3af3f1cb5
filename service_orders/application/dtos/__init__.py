from .commands import (
    CreateOrderRequest,
    UpdateOrderRequest,
    UpdateStatusRequest,
    ServiceLinkRequest,
    MaterialLinkRequest
)
from .responses import (
    ClientResponse,
    VehicleResponse,
    LineItemResponse,
    OrderResponse,
    LinkResponse,
    RemovalResponse,
    DeletionResponse,
    ExecutionTimeResponse,
    MessageResponse
)

__all__ = [
    "CreateOrderRequest",
    "UpdateOrderRequest",
    "UpdateStatusRequest",
    "ServiceLinkRequest",
    "MaterialLinkRequest",
    "ClientResponse",
    "VehicleResponse",
    "LineItemResponse",
    "OrderResponse",
    "LinkResponse",
    "RemovalResponse",
    "DeletionResponse",
    "ExecutionTimeResponse",
    "MessageResponse"
]
