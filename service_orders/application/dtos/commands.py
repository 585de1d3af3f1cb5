from pydantic import BaseModel, Field
from typing import Optional


class CreateOrderRequest(BaseModel):
    client_id: str = Field(min_length=1)
    vehicle_id: str = Field(min_length=1)
    description: Optional[str] = None


class UpdateOrderRequest(BaseModel):
    description: Optional[str] = None


class UpdateStatusRequest(BaseModel):
    status: str = Field(min_length=1)


class ServiceLinkRequest(BaseModel):
    order_id: str = Field(min_length=1)
    service_id: str = Field(min_length=1)


class MaterialLinkRequest(BaseModel):
    order_id: str = Field(min_length=1)
    material_id: str = Field(min_length=1)
