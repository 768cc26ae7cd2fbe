"""Entry and exit gates of the parking lot."""

from __future__ import annotations

from typing import Optional

from .manager import ParkingSpotManager
from .spot import ParkingSpot, Ticket
from .strategy import PricingStrategy
from .vehicle import Vehicle, VehicleType


class EntryGate:
    """Finds spots for arriving vehicles and issues tickets."""

    def __init__(
        self,
        two_wheeler_manager: ParkingSpotManager,
        four_wheeler_manager: ParkingSpotManager,
    ) -> None:
        self.two_wheeler_manager = two_wheeler_manager
        self.four_wheeler_manager = four_wheeler_manager

    def get_parking_spot_manager(self, vehicle_type: VehicleType) -> ParkingSpotManager:
        if vehicle_type is VehicleType.CAR:
            return self.four_wheeler_manager
        if vehicle_type is VehicleType.BIKE:
            return self.two_wheeler_manager
        raise ValueError(f"no spot manager for vehicle type {vehicle_type!r}")

    def find_parking_spot(self, vehicle_type: VehicleType) -> Optional[ParkingSpot]:
        """A free spot for ``vehicle_type``, or None when the lot is full."""
        return self.get_parking_spot_manager(vehicle_type).find_parking_spot()

    def update_parking_spot(self, vehicle: Vehicle, spot: ParkingSpot) -> bool:
        spot.park_vehicle(vehicle)
        return True

    def generate_ticket(self, vehicle: Vehicle, spot: ParkingSpot) -> Ticket:
        return Ticket(spot, vehicle)


class ExitGate:
    """Prices a stay, takes payment and frees the spot."""

    def __init__(self, pricing_strategy: Optional[PricingStrategy] = None) -> None:
        self.pricing_strategy = pricing_strategy

    def calculate_price(self, ticket: Ticket, time_taken: int) -> int:
        if self.pricing_strategy is None:
            raise RuntimeError("select the pricing strategy before calculating price")
        return self.pricing_strategy.calculate_price(ticket, time_taken)

    def update_parking_spot(self, spot: ParkingSpot) -> None:
        spot.unpark_vehicle()

    def make_payment(self, price: int) -> bool:
        print(" Payment is done!!!")
        return True

    def delete_ticket(self, ticket: Ticket) -> None:
        """Void ``ticket``; a ticket can be voided only once."""
        if not ticket.active:
            raise ValueError("ticket has already been deleted")
        ticket.active = False