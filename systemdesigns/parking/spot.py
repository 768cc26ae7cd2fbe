"""Parking spots and the tickets issued for them."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .vehicle import Vehicle


class ParkingSpotType(Enum):
    """Size class of a parking spot."""

    FOUR_WHEELER = "FOUR_WHEELER"
    TWO_WHEELER = "TWO_WHEELER"


class ParkingSpot(ABC):
    """A single space that holds at most one vehicle."""

    _ids = itertools.count(1)

    def __init__(self, spot_type: ParkingSpotType, spot_id: Optional[int] = None) -> None:
        self.id = next(ParkingSpot._ids) if spot_id is None else spot_id
        self.spot_type = spot_type
        self.vehicle: Optional[Vehicle] = None

    @property
    def is_empty(self) -> bool:
        return self.vehicle is None

    @property
    @abstractmethod
    def price(self) -> int:
        """Price multiplier charged for this kind of spot."""

    def park_vehicle(self, vehicle: Vehicle) -> None:
        self.vehicle = vehicle

    def unpark_vehicle(self) -> None:
        self.vehicle = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, empty={self.is_empty})"


class ParkingSpot2Wheeler(ParkingSpot):
    """A spot for bikes."""

    def __init__(self, spot_id: Optional[int] = None) -> None:
        super().__init__(ParkingSpotType.TWO_WHEELER, spot_id)

    @property
    def price(self) -> int:
        return 1


class ParkingSpot4Wheeler(ParkingSpot):
    """A spot for cars."""

    def __init__(self, spot_id: Optional[int] = None) -> None:
        super().__init__(ParkingSpotType.FOUR_WHEELER, spot_id)

    @property
    def price(self) -> int:
        return 2


@dataclass(eq=False)
class Ticket:
    """Proof that a vehicle was parked in a given spot."""

    parking_spot: ParkingSpot
    vehicle: Vehicle
    active: bool = True