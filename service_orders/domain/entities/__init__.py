from .client import Client
from .vehicle import Vehicle
from .service import Service
from .material import Material
from .links import OrderServiceLink, OrderMaterialLink
from .work_order import WorkOrder

__all__ = [
    "Client",
    "Vehicle",
    "Service",
    "Material",
    "OrderServiceLink",
    "OrderMaterialLink",
    "WorkOrder"
]
