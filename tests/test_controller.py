import pytest

from systemdesigns.elevator.controller import LiftController, LiftCreator
from systemdesigns.elevator.lift import Direction


@pytest.fixture
def registry():
    creator = LiftCreator()
    creator.create_lifts(5, 2)
    return creator


def test_new_controller_has_nothing_pending():
    assert LiftController(5).has_pending_requests is False


def test_internal_request_is_served(capsys):
    controller = LiftController(5, lift_id=1)
    controller.submit_internal_request(4)
    assert controller.has_pending_requests is True
    controller.move_lift()
    assert controller.has_pending_requests is False
    assert controller.lift.current_floor == 3
    assert controller.lift.direction is Direction.DOWN


def test_external_request_below_while_going_up_is_served(capsys):
    controller = LiftController(5, lift_id=1)
    controller.lift.current_floor = 3
    controller.submit_external_request(1, Direction.UP)
    assert controller.has_pending_requests is True
    controller.move_lift()
    assert controller.has_pending_requests is False
    assert controller.lift.current_floor <= 3


def test_external_down_request_is_served(capsys):
    controller = LiftController(5, lift_id=2)
    controller.submit_external_request(4, Direction.DOWN)
    controller.move_lift()
    assert controller.has_pending_requests is False
    assert controller.lift.current_floor < 4


def test_move_lift_with_no_requests_prints_nothing(capsys):
    controller = LiftController(5, lift_id=1)
    controller.move_lift()
    assert capsys.readouterr().out == ""
    assert controller.lift.current_floor == 0


def test_create_lifts_numbers_from_one(registry):
    assert len(registry) == 2
    assert [c.lift.id for c in registry] == [1, 2]
    assert all(c.lift.number_of_floors == 5 for c in registry)


def test_create_lifts_continues_numbering(registry):
    registry.create_lifts(5, 1)
    assert registry[2].lift.id == 3


def test_delete_lifts_empties_registry(registry):
    registry.delete_lifts()
    assert len(registry) == 0
    assert list(registry) == []


def test_internal_button_routes_to_named_lift(registry):
    registry[0].lift.press_button(3, 2)
    assert registry[1].has_pending_requests is True
    assert registry[0].has_pending_requests is False