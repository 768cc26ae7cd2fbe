"""Park a bike, price its stay and let it leave."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .lot import ParkingLot
from .spot import ParkingSpot2Wheeler, ParkingSpot4Wheeler
from .strategy import HourlyPricing
from .vehicle import Bike, Car


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run a scripted parking lot scenario."
    )
    parser.parse_args(argv)

    lot = ParkingLot(1, 1)
    entry = lot.get_entry_gate(1)
    exit_gate = lot.get_exit_gate(1)

    for _ in range(3):
        lot.add_two_wheeler_spot(ParkingSpot2Wheeler())
    for _ in range(3):
        lot.add_four_wheeler_spot(ParkingSpot4Wheeler())

    print("2 Wheeler parkings")
    lot.display_two_wheeler_spots()
    print(" 4 wheeler parkings ")
    lot.display_four_wheeler_spots()

    bike = Bike("xyz1")
    Bike("xyz2")
    Car("car1")
    Car("car2")

    spot = entry.find_parking_spot(bike.vehicle_type)
    if spot is None:
        print("No parking is available")
        return 1
    ticket = entry.generate_ticket(bike, spot)
    entry.update_parking_spot(bike, spot)

    lot.set_pricing_strategy_at_exit_gate(1, HourlyPricing())
    price = exit_gate.calculate_price(ticket, 70)
    exit_gate.make_payment(price)

    exit_gate.update_parking_spot(ticket.parking_spot)
    exit_gate.delete_ticket(ticket)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())