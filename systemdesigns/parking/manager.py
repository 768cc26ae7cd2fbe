"""Managers that keep the spots of one size class."""

from __future__ import annotations

from typing import Optional

from .spot import ParkingSpot
from .strategy import DefaultParkingStrategy, ParkingStrategy
from .vehicle import VehicleType


class ParkingSpotManager:
    """Holds a set of spots and finds free ones with a parking strategy."""

    def __init__(self, strategy: Optional[ParkingStrategy] = None) -> None:
        self.strategy = strategy if strategy is not None else DefaultParkingStrategy()
        self._spots: list[ParkingSpot] = []

    @property
    def spots(self) -> tuple[ParkingSpot, ...]:
        return tuple(self._spots)

    def add_parking_spot(self, spot: ParkingSpot) -> None:
        self._spots.append(spot)

    def remove_parking_spot(self, spot: ParkingSpot) -> None:
        """Drop every occurrence of ``spot``; absent spots are ignored."""
        self._spots = [held for held in self._spots if held is not spot]

    def find_parking_spot(self) -> Optional[ParkingSpot]:
        return self.strategy.find_spot(self._spots)

    def display_parking_spots(self) -> None:
        for spot in self._spots:
            print(
                f"[ {spot.id} -> {{ Empty : {int(spot.is_empty)}, Price : {spot.price} }}]"
            )


class TwoWheelerSpotManager(ParkingSpotManager):
    """Manager for bike spots."""


class FourWheelerSpotManager(ParkingSpotManager):
    """Manager for car spots."""


def create_parking_spot_manager(vehicle_type: VehicleType) -> ParkingSpotManager:
    """Make the manager suited to ``vehicle_type``."""
    if vehicle_type is VehicleType.CAR:
        return FourWheelerSpotManager()
    if vehicle_type is VehicleType.BIKE:
        return TwoWheelerSpotManager()
    raise ValueError(f"no spot manager for vehicle type {vehicle_type!r}")