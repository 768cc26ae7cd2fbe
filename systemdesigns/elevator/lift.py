"""Lift cars, their direction and status, and the in-car floor display."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol


class Direction(Enum):
    """Direction of travel of a lift or of a hall call."""

    UP = "UP"
    DOWN = "DOWN"


class LiftStatus(Enum):
    """Operational status of a lift."""

    MOVING = "MOVING"
    IDLE = "IDLE"
    UNDER_MAINTENANCE = "UNDER_MAINTENANCE"


class _Buttons(Protocol):
    def press_button(self, dest_floor: int, lift_id: int) -> None: ...


@dataclass
class Display:
    """Shows the floor a lift is on and the way it is heading."""

    floor: int = 0
    direction: Direction = Direction.UP

    def set_display(self, floor: int, direction: Direction) -> None:
        self.floor = floor
        self.direction = direction

    def show_display(self) -> str:
        """Print the floor and direction, one per line, and return the text."""
        text = f"{self.floor}\n{self.direction.value}"
        print(text)
        return text


class Lift:
    """A single lift car."""

    _ids = itertools.count(1)

    def __init__(
        self,
        floors: int,
        lift_id: Optional[int] = None,
        buttons: Optional[_Buttons] = None,
    ) -> None:
        self.id = next(Lift._ids) if lift_id is None else lift_id
        self.current_floor = 0
        self.number_of_floors = floors
        self.direction = Direction.UP
        self.status = LiftStatus.IDLE
        self.display = Display()
        self.buttons = buttons

    def set_display(self) -> None:
        """Copy the lift's current floor and direction onto its display."""
        self.display.set_display(self.current_floor, self.direction)

    def show_display(self) -> str:
        return self.display.show_display()

    def press_button(self, dest_floor: int, lift_id: int) -> None:
        """Press one of the buttons inside the car."""
        if self.buttons is None:
            raise RuntimeError(f"lift {self.id} has no internal buttons")
        self.buttons.press_button(dest_floor, lift_id)

    def move(self, dest_floor: int, direction: Direction) -> bool:
        """Step the car towards ``dest_floor``, showing each floor passed.

        The car travels in its own current direction; ``direction`` is
        accepted for the caller's intent only. Going up, the car halts one
        floor short of the destination and reports False. Going down, it
        reports True when it reaches the destination.
        """
        if self.direction is Direction.UP:
            steps = range(self.current_floor, dest_floor)
        else:
            steps = range(self.current_floor, dest_floor - 1, -1)
        for floor in steps:
            self.current_floor = floor
            self.set_display()
            self.show_display()
            if floor == dest_floor:
                return True
        return False