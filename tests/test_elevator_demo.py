import pytest

from systemdesigns.elevator.demo import main


def _run(capsys):
    status = main([])
    return status, capsys.readouterr().out.splitlines()


def test_demo_exits_cleanly(capsys):
    status, lines = _run(capsys)
    assert status == 0
    assert lines[:3] == [
        "Creating building with 5 floors",
        " creating 2 Lifts",
        "Pressing up button from 1 floor",
    ]


def test_demo_prints_display_pairs(capsys):
    _, lines = _run(capsys)
    marker = lines.index("Press internal button to 4")
    readings = lines[3:marker] + lines[marker + 1:]
    assert len(readings) % 2 == 0
    floors = readings[0::2]
    directions = readings[1::2]
    assert all(0 <= int(floor) < 5 for floor in floors)
    assert set(directions) <= {"UP", "DOWN"}


def test_first_call_shows_ground_floor(capsys):
    _, lines = _run(capsys)
    marker = lines.index("Press internal button to 4")
    assert lines[3:marker] == ["0", "UP"]


def test_demo_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])