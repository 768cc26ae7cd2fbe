"""The parking lot: its gates and the spots they share."""

from __future__ import annotations

from .gates import EntryGate, ExitGate
from .manager import FourWheelerSpotManager, TwoWheelerSpotManager
from .spot import ParkingSpot
from .strategy import PricingStrategy


class ParkingLot:
    """A lot with numbered entry and exit gates, numbered from 1."""

    def __init__(self, n_entry: int, n_exit: int) -> None:
        self.two_wheeler_manager = TwoWheelerSpotManager()
        self.four_wheeler_manager = FourWheelerSpotManager()
        self.entry_gates = {
            number: EntryGate(self.two_wheeler_manager, self.four_wheeler_manager)
            for number in range(1, n_entry + 1)
        }
        self.exit_gates = {number: ExitGate() for number in range(1, n_exit + 1)}

    def get_entry_gate(self, index: int) -> EntryGate:
        try:
            return self.entry_gates[index]
        except KeyError:
            raise KeyError(f"no entry gate {index}") from None

    def get_exit_gate(self, index: int) -> ExitGate:
        try:
            return self.exit_gates[index]
        except KeyError:
            raise KeyError(f"no exit gate {index}") from None

    def add_two_wheeler_spot(self, spot: ParkingSpot) -> None:
        self.two_wheeler_manager.add_parking_spot(spot)

    def add_four_wheeler_spot(self, spot: ParkingSpot) -> None:
        self.four_wheeler_manager.add_parking_spot(spot)

    def remove_two_wheeler_spot(self, spot: ParkingSpot) -> None:
        self.two_wheeler_manager.remove_parking_spot(spot)

    def remove_four_wheeler_spot(self, spot: ParkingSpot) -> None:
        self.four_wheeler_manager.remove_parking_spot(spot)

    def set_pricing_strategy_at_exit_gate(self, index: int, strategy: PricingStrategy) -> None:
        self.get_exit_gate(index).pricing_strategy = strategy

    def display_two_wheeler_spots(self) -> None:
        self.two_wheeler_manager.display_parking_spots()

    def display_four_wheeler_spots(self) -> None:
        self.four_wheeler_manager.display_parking_spots()