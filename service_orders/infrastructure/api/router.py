import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, FastAPI, Query, Request, status
from fastapi.responses import JSONResponse

from ...application import (
    CreateOrderRequest,
    MaterialLinkRequest,
    MessageResponse,
    OrderController,
    OrderResponse,
    ServiceLinkRequest,
    UpdateOrderRequest,
    UpdateStatusRequest
)
from ...application.dtos import DeletionResponse, ExecutionTimeResponse, LinkResponse, RemovalResponse
from ...domain import DomainException, OrderUpdate, Severity
from ..adapters import InMemoryGateways

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["service-orders"])

_gateways = InMemoryGateways.create()

STATUS_BY_SEVERITY = {
    Severity.CLIENT_ERROR: status.HTTP_400_BAD_REQUEST,
    Severity.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    Severity.SERVER_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR
}


def get_gateways() -> InMemoryGateways:
    return _gateways


def get_controller(gateways: InMemoryGateways = Depends(get_gateways)) -> OrderController:
    return OrderController(
        order_gateway=gateways.orders,
        client_gateway=gateways.clients,
        vehicle_gateway=gateways.vehicles,
        service_gateway=gateways.services,
        material_gateway=gateways.materials
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(DomainException)
    async def handle_domain_exception(request: Request, exc: DomainException) -> JSONResponse:
        status_code = STATUS_BY_SEVERITY.get(exc.severity, status.HTTP_500_INTERNAL_SERVER_ERROR)
        logger.info("%s %s -> %d %s", request.method, request.url.path, status_code, exc.error.to_dict())
        body = MessageResponse(err=True, msg=str(exc), code=exc.code.value)
        return JSONResponse(status_code=status_code, content=body.model_dump())


@router.post("/orders/services", response_model=LinkResponse, status_code=status.HTTP_201_CREATED)
async def add_service(
    request: ServiceLinkRequest,
    controller: OrderController = Depends(get_controller)
) -> LinkResponse:
    return LinkResponse(id=controller.add_service(request.order_id, request.service_id))


@router.delete("/orders/services", response_model=RemovalResponse)
async def remove_service(
    request: ServiceLinkRequest,
    controller: OrderController = Depends(get_controller)
) -> RemovalResponse:
    return RemovalResponse(removed=controller.remove_service(request.order_id, request.service_id))


@router.post("/orders/materials", response_model=LinkResponse, status_code=status.HTTP_201_CREATED)
async def add_material(
    request: MaterialLinkRequest,
    controller: OrderController = Depends(get_controller)
) -> LinkResponse:
    return LinkResponse(id=controller.add_material(request.order_id, request.material_id))


@router.delete("/orders/materials", response_model=RemovalResponse)
async def remove_material(
    request: MaterialLinkRequest,
    controller: OrderController = Depends(get_controller)
) -> RemovalResponse:
    return RemovalResponse(removed=controller.remove_material(request.order_id, request.material_id))


@router.post("/orders", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    request: CreateOrderRequest,
    controller: OrderController = Depends(get_controller)
) -> dict[str, Any]:
    return controller.create(request.client_id, request.vehicle_id, request.description)


@router.get("/orders", response_model=list[OrderResponse])
async def list_orders(
    order_status: Optional[str] = Query(None, alias="status"),
    controller: OrderController = Depends(get_controller)
) -> list[dict[str, Any]]:
    return controller.list_orders({"status": order_status} if order_status else {})


@router.get("/orders/average-execution-time", response_model=ExecutionTimeResponse)
async def average_execution_time(controller: OrderController = Depends(get_controller)) -> dict[str, Any]:
    return controller.average_execution_time()


@router.get("/orders/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, controller: OrderController = Depends(get_controller)) -> Any:
    order = controller.get(order_id)
    if order is None:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={})
    return order


@router.put("/orders/{order_id}", response_model=None)
async def update_order(
    order_id: str,
    request: UpdateOrderRequest,
    controller: OrderController = Depends(get_controller)
) -> dict[str, Any]:
    if not request.description:
        return MessageResponse(err=False, msg="Nothing to update").model_dump(exclude_none=True)
    return controller.update(order_id, OrderUpdate(description=request.description))


@router.put("/orders/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: str,
    request: UpdateStatusRequest,
    controller: OrderController = Depends(get_controller)
) -> dict[str, Any]:
    return controller.update_status(order_id, request.status)


@router.api_route("/orders/{order_id}/approval", methods=["GET", "PUT"], response_model=OrderResponse)
async def approve_order(order_id: str, controller: OrderController = Depends(get_controller)) -> dict[str, Any]:
    return controller.approve(order_id)


@router.api_route("/orders/{order_id}/rejection", methods=["GET", "PUT"], response_model=OrderResponse)
async def disapprove_order(order_id: str, controller: OrderController = Depends(get_controller)) -> dict[str, Any]:
    return controller.disapprove(order_id)


@router.delete("/orders/{order_id}", response_model=DeletionResponse)
async def delete_order(order_id: str, controller: OrderController = Depends(get_controller)) -> DeletionResponse:
    return DeletionResponse(deleted=controller.delete(order_id))


@router.post("/reset")
async def reset_gateways(gateways: InMemoryGateways = Depends(get_gateways)) -> dict[str, str]:
    gateways.clear()
    return {"status": "ok", "message": "Gateways cleared"}
