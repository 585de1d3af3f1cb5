from .in_memory_gateways import (
    InMemoryGateway,
    InMemoryClientGateway,
    InMemoryVehicleGateway,
    InMemoryServiceGateway,
    InMemoryMaterialGateway,
    InMemoryOrderGateway,
    InMemoryGateways
)

__all__ = [
    "InMemoryGateway",
    "InMemoryClientGateway",
    "InMemoryVehicleGateway",
    "InMemoryServiceGateway",
    "InMemoryMaterialGateway",
    "InMemoryOrderGateway",
    "InMemoryGateways"
]
