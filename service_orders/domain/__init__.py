from .entities import (
    Client,
    Vehicle,
    Service,
    Material,
    OrderServiceLink,
    OrderMaterialLink,
    WorkOrder
)
from .value_objects import Money, OrderUpdate
from .enums import OrderStatus, ErrorCode, Severity
from .exceptions import (
    DomainError,
    DomainException,
    ValidationException,
    NotFoundException,
    GuardViolationException,
    ConflictException,
    PersistenceFailureException
)
from .ports import (
    Gateway,
    ClientGateway,
    VehicleGateway,
    ServiceGateway,
    MaterialGateway,
    OrderGateway
)

__all__ = [
    "Client",
    "Vehicle",
    "Service",
    "Material",
    "OrderServiceLink",
    "OrderMaterialLink",
    "WorkOrder",
    "Money",
    "OrderUpdate",
    "OrderStatus",
    "ErrorCode",
    "Severity",
    "DomainError",
    "DomainException",
    "ValidationException",
    "NotFoundException",
    "GuardViolationException",
    "ConflictException",
    "PersistenceFailureException",
    "Gateway",
    "ClientGateway",
    "VehicleGateway",
    "ServiceGateway",
    "MaterialGateway",
    "OrderGateway"
]
