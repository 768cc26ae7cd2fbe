"""Strategies for choosing a spot and for pricing a stay."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from .spot import ParkingSpot, Ticket


class ParkingStrategy(ABC):
    """Chooses a free spot from a collection of spots."""

    @abstractmethod
    def find_spot(self, spots: Iterable[ParkingSpot]) -> Optional[ParkingSpot]:
        """Return a free spot, or None when there is none."""


class DefaultParkingStrategy(ParkingStrategy):
    """Takes the first empty spot in order."""

    def find_spot(self, spots: Iterable[ParkingSpot]) -> Optional[ParkingSpot]:
        return next((spot for spot in spots if spot.is_empty), None)


class PricingStrategy(ABC):
    """Works out what a stay costs."""

    @abstractmethod
    def calculate_price(self, ticket: Ticket, time_taken: int) -> int:
        """Price of a stay of ``time_taken`` minutes on ``ticket``."""


class HourlyPricing(PricingStrategy):
    """Fifty per started hour, scaled by the spot's price."""

    RATE_PER_HOUR = 50

    def calculate_price(self, ticket: Ticket, time_taken: int) -> int:
        hours = math.ceil(time_taken / 60)
        return self.RATE_PER_HOUR * hours * ticket.parking_spot.price


class MinutePricing(PricingStrategy):
    """One unit per minute, scaled by the spot's price."""

    def calculate_price(self, ticket: Ticket, time_taken: int) -> int:
        return time_taken * ticket.parking_spot.price