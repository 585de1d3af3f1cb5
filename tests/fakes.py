"""Seeded in-memory gateways shared by the test modules."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Optional

from service_orders.domain import Client, Material, OrderStatus, Service, Vehicle
from service_orders.infrastructure.adapters import InMemoryGateways, InMemoryOrderGateway


class FixedClock:
    def __init__(self, start: datetime = datetime(2025, 3, 1, 9, 0, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, minutes: int = 1) -> datetime:
        self.now = self.now + timedelta(minutes=minutes)
        return self.now


class RecordingOrderGateway(InMemoryOrderGateway):
    """Order gateway that records every call made through the contract."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls: list[tuple[str, tuple]] = []

    def called(self, name: str) -> int:
        return sum(1 for call_name, _ in self.calls if call_name == name)

    def find_by_unique_id(self, identifier, id_field="uuid"):
        self.calls.append(("find_by_unique_id", (identifier, id_field)))
        return super().find_by_unique_id(identifier, id_field)

    def update(self, identifier, fields):
        self.calls.append(("update", (identifier, fields)))
        return super().update(identifier, fields)

    def update_status(self, identifier, new_status):
        self.calls.append(("update_status", (identifier, new_status)))
        return super().update_status(identifier, new_status)

    def delete(self, identifier):
        self.calls.append(("delete", (identifier,)))
        return super().delete(identifier)

    def link_service(self, order_id, service_id):
        self.calls.append(("link_service", (order_id, service_id)))
        return super().link_service(order_id, service_id)

    def unlink_service(self, order_id, service_id):
        self.calls.append(("unlink_service", (order_id, service_id)))
        return super().unlink_service(order_id, service_id)

    def link_material(self, order_id, material_id):
        self.calls.append(("link_material", (order_id, material_id)))
        return super().link_material(order_id, material_id)

    def unlink_material(self, order_id, material_id):
        self.calls.append(("unlink_material", (order_id, material_id)))
        return super().unlink_material(order_id, material_id)


@dataclass
class Workshop:
    gateways: InMemoryGateways
    clock: FixedClock
    client: Client
    vehicle: Vehicle
    services: list[Service] = field(default_factory=list)
    materials: list[Material] = field(default_factory=list)

    @property
    def orders(self) -> RecordingOrderGateway:
        return self.gateways.orders

    def add_client(self, uuid: str, name: str = "Maria Souza") -> tuple[Client, Vehicle]:
        client = Client(
            uuid=uuid,
            name=name,
            document="12345678901",
            email=f"{uuid}@example.com",
            phone="11999999999",
            created_at=self.clock.now,
            updated_at=self.clock.now
        )
        client_id = self.gateways.clients.add(client)
        vehicle = Vehicle(
            uuid=f"{uuid}-vehicle",
            brand="Toyota",
            model="Corolla",
            plate="ABC1D23",
            year=2020,
            client_id=client_id,
            created_at=self.clock.now,
            updated_at=self.clock.now
        )
        self.gateways.vehicles.add(vehicle)
        return client, vehicle

    def open_order(
        self,
        status: OrderStatus = OrderStatus.RECEIVED,
        client: Optional[Client] = None,
        vehicle: Optional[Vehicle] = None,
        description: Optional[str] = "Brake noise"
    ) -> dict[str, Any]:
        persisted = self.orders.create({
            "client_id": (client or self.client).uuid,
            "vehicle_id": (vehicle or self.vehicle).uuid,
            "description": description,
            "status": OrderStatus.RECEIVED.value,
            "opened_at": self.clock.advance()
        })
        if status != OrderStatus.RECEIVED:
            persisted = self.orders.update_status(persisted["uuid"], status.value)
        self.orders.calls.clear()
        return persisted


def build_workshop() -> Workshop:
    clock = FixedClock()
    gateways = InMemoryGateways.create(clock)
    gateways.orders = RecordingOrderGateway(
        gateways.clients, gateways.vehicles, gateways.services, gateways.materials, clock
    )

    services = [
        Service(uuid="svc-alignment", name="Wheel alignment", price=15000),
        Service(uuid="svc-oil", name="Oil change", price=8000)
    ]
    materials = [
        Material(
            uuid="mat-pads", name="Brake pads", sku="BP-01", stock=10,
            cost_price=9000, sale_price=15000, internal_use_price=12000
        ),
        Material(
            uuid="mat-oil", name="Engine oil 1L", stock=40,
            cost_price=2000, sale_price=4500, internal_use_price=3500
        )
    ]
    for service in services:
        gateways.services.add(service)
    for material in materials:
        gateways.materials.add(material)

    workshop = Workshop(
        gateways=gateways,
        clock=clock,
        client=None,
        vehicle=None,
        services=services,
        materials=materials
    )
    workshop.client, workshop.vehicle = workshop.add_client("client-1")
    return workshop
