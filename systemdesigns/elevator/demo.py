"""Walk a small building with two lifts through a few requests."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .building import Building
from .controller import LiftCreator
from .lift import Direction


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run a scripted elevator scenario and print the lift displays."
    )
    parser.parse_args(argv)

    print("Creating building with 5 floors")
    registry = LiftCreator()
    building = Building(5, registry)

    print(" creating 2 Lifts")
    registry.create_lifts(5, 2)
    floors = building.floors
    first, second = registry.controllers

    print("Pressing up button from 1 floor")
    floors[1].press_button(1, Direction.UP)
    first.move_lift()
    second.move_lift()

    print("Press internal button to 4")
    first.submit_internal_request(4)
    first.move_lift()
    second.move_lift()

    floors[4].press_button(4, Direction.DOWN)
    first.move_lift()
    second.move_lift()

    registry.delete_lifts()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())