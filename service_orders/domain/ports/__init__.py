from .gateways import (
    Gateway,
    ClientGateway,
    VehicleGateway,
    ServiceGateway,
    MaterialGateway,
    OrderGateway
)

__all__ = [
    "Gateway",
    "ClientGateway",
    "VehicleGateway",
    "ServiceGateway",
    "MaterialGateway",
    "OrderGateway"
]
