from pydantic import BaseModel
from typing import Optional


class ClientResponse(BaseModel):
    id: str
    name: str
    document: str
    email: str
    phone: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class VehicleResponse(BaseModel):
    id: str
    brand: str
    model: str
    plate: str
    year: int


class LineItemResponse(BaseModel):
    id: str
    name: str
    value: float


class OrderResponse(BaseModel):
    id: str
    client: ClientResponse
    vehicle: VehicleResponse
    description: Optional[str] = None
    status: str
    services: list[LineItemResponse]
    materials: list[LineItemResponse]
    opened_at: str
    finished_at: Optional[str] = None
    updated_at: Optional[str] = None
    total_services: float
    total_materials: float
    total_overall: float


class LinkResponse(BaseModel):
    id: str


class RemovalResponse(BaseModel):
    removed: bool


class DeletionResponse(BaseModel):
    deleted: bool


class MessageResponse(BaseModel):
    err: bool
    msg: str
    code: Optional[str] = None


class ExecutionTimeResponse(BaseModel):
    finished_orders: int
    average_hours: float
    average_days: float
    average_formatted: str
