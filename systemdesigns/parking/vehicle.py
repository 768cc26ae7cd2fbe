"""Vehicles that can use the parking lot."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VehicleType(Enum):
    """Kinds of vehicle the lot knows about."""

    CAR = "CAR"
    BIKE = "BIKE"


@dataclass(frozen=True)
class Vehicle:
    """A vehicle identified by its registration number."""

    vehicle_no: str
    vehicle_type: VehicleType


class Bike(Vehicle):
    """A two-wheeled vehicle."""

    def __init__(self, vehicle_no: str) -> None:
        super().__init__(vehicle_no, VehicleType.BIKE)


class Car(Vehicle):
    """A four-wheeled vehicle."""

    def __init__(self, vehicle_no: str) -> None:
        super().__init__(vehicle_no, VehicleType.CAR)