import pytest

from systemdesigns.elevator.lift import Direction, Display, Lift, LiftStatus


class _RecordingButtons:
    def __init__(self):
        self.presses = []

    def press_button(self, dest_floor, lift_id):
        self.presses.append((dest_floor, lift_id))


def test_display_defaults():
    display = Display()
    assert display.floor == 0
    assert display.direction is Direction.UP


def test_show_display_prints_floor_and_direction(capsys):
    display = Display()
    display.set_display(3, Direction.DOWN)
    display.show_display()
    assert capsys.readouterr().out == "3\nDOWN\n"


def test_lift_initial_state():
    lift = Lift(5, lift_id=7)
    assert lift.id == 7
    assert lift.current_floor == 0
    assert lift.number_of_floors == 5
    assert lift.status is LiftStatus.IDLE
    assert lift.direction is Direction.UP


def test_automatic_ids_increase():
    first = Lift(3)
    second = Lift(3)
    assert second.id == first.id + 1


def test_move_up_halts_below_destination(capsys):
    lift = Lift(5, lift_id=1)
    assert lift.move(4, Direction.UP) is False
    assert lift.current_floor == 3
    assert lift.display.floor == lift.current_floor
    lines = capsys.readouterr().out.split()
    assert lines[1::2] == ["UP"] * (len(lines) // 2)


def test_move_down_reaches_destination(capsys):
    lift = Lift(5, lift_id=1)
    lift.current_floor = 3
    lift.direction = Direction.DOWN
    assert lift.move(1, Direction.DOWN) is True
    assert lift.current_floor == 1
    assert capsys.readouterr().out.split() == ["3", "DOWN", "2", "DOWN", "1", "DOWN"]


def test_move_down_to_higher_floor_does_nothing(capsys):
    lift = Lift(5, lift_id=1)
    lift.current_floor = 1
    lift.direction = Direction.DOWN
    assert lift.move(3, Direction.DOWN) is False
    assert lift.current_floor == 1
    assert capsys.readouterr().out == ""


def test_move_follows_own_direction(capsys):
    lift = Lift(5, lift_id=1)
    lift.current_floor = 2
    lift.direction = Direction.DOWN
    assert lift.move(0, Direction.UP) is True
    assert lift.current_floor == 0


def test_press_button_without_buttons_raises():
    with pytest.raises(RuntimeError):
        Lift(5, lift_id=1).press_button(2, 1)


def test_press_button_delegates():
    buttons = _RecordingButtons()
    lift = Lift(5, lift_id=2, buttons=buttons)
    lift.press_button(4, 2)
    assert buttons.presses == [(4, 2)]