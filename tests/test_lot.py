import pytest

from systemdesigns.parking.lot import ParkingLot
from systemdesigns.parking.spot import ParkingSpot2Wheeler, ParkingSpot4Wheeler, Ticket
from systemdesigns.parking.strategy import HourlyPricing
from systemdesigns.parking.vehicle import Bike, VehicleType


def test_gates_are_numbered_from_one():
    lot = ParkingLot(2, 3)
    assert sorted(lot.entry_gates) == [1, 2]
    assert sorted(lot.exit_gates) == [1, 2, 3]
    assert lot.get_entry_gate(2) is lot.entry_gates[2]


def test_missing_gates_raise():
    lot = ParkingLot(1, 1)
    with pytest.raises(KeyError):
        lot.get_entry_gate(2)
    with pytest.raises(KeyError):
        lot.get_exit_gate(0)
    with pytest.raises(KeyError):
        lot.set_pricing_strategy_at_exit_gate(5, HourlyPricing())


def test_entry_gates_share_spots():
    lot = ParkingLot(2, 1)
    spot = ParkingSpot2Wheeler()
    lot.add_two_wheeler_spot(spot)
    assert lot.get_entry_gate(1).find_parking_spot(VehicleType.BIKE) is spot
    assert lot.get_entry_gate(2).find_parking_spot(VehicleType.BIKE) is spot
    assert lot.get_entry_gate(1).find_parking_spot(VehicleType.CAR) is None


def test_remove_spots():
    lot = ParkingLot(1, 1)
    bike_spot, car_spot = ParkingSpot2Wheeler(), ParkingSpot4Wheeler()
    lot.add_two_wheeler_spot(bike_spot)
    lot.add_four_wheeler_spot(car_spot)
    lot.remove_two_wheeler_spot(bike_spot)
    lot.remove_four_wheeler_spot(car_spot)
    gate = lot.get_entry_gate(1)
    assert gate.find_parking_spot(VehicleType.BIKE) is None
    assert gate.find_parking_spot(VehicleType.CAR) is None


def test_pricing_strategy_set_at_exit_gate():
    lot = ParkingLot(1, 2)
    lot.set_pricing_strategy_at_exit_gate(2, HourlyPricing())
    ticket = Ticket(ParkingSpot2Wheeler(), Bike("xyz1"))
    assert lot.get_exit_gate(2).calculate_price(ticket, 60) == 50
    with pytest.raises(RuntimeError):
        lot.get_exit_gate(1).calculate_price(ticket, 60)


def test_display_lists_each_group(capsys):
    lot = ParkingLot(1, 1)
    lot.add_two_wheeler_spot(ParkingSpot2Wheeler(spot_id=1))
    lot.add_four_wheeler_spot(ParkingSpot4Wheeler(spot_id=4))
    lot.display_two_wheeler_spots()
    lot.display_four_wheeler_spots()
    assert capsys.readouterr().out.splitlines() == [
        "[ 1 -> { Empty : 1, Price : 1 }]",
        "[ 4 -> { Empty : 1, Price : 2 }]",
    ]