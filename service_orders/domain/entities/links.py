from dataclasses import dataclass


@dataclass(frozen=True)
class OrderServiceLink:
    uuid: str
    order_id: int
    service_id: int


@dataclass(frozen=True)
class OrderMaterialLink:
    uuid: str
    order_id: int
    material_id: int
