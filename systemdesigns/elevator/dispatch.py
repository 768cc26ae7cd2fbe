"""Routing of hall calls and in-car button presses to lift controllers."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .lift import Direction

if TYPE_CHECKING:
    from .controller import LiftCreator


def _remainder_mod2(value: int) -> int:
    """Remainder of division by two, keeping the sign of ``value``."""
    return int(math.fmod(value, 2))


class ExternalDispatcher(ABC):
    """Chooses which lifts should answer a hall call."""

    def __init__(self, registry: "LiftCreator") -> None:
        self.registry = registry

    @abstractmethod
    def submit_external_request(self, dest_floor: int, direction: Direction) -> None:
        """Hand a hall call to one or more lift controllers."""


class EvenOddExternalDispatcher(ExternalDispatcher):
    """Odd-numbered lifts serve odd floors, even-numbered lifts even floors."""

    def submit_external_request(self, dest_floor: int, direction: Direction) -> None:
        floor_parity = _remainder_mod2(dest_floor)
        for controller in self.registry.controllers:
            lift_parity = _remainder_mod2(controller.lift.id)
            if lift_parity == floor_parity and lift_parity in (0, 1):
                controller.submit_external_request(dest_floor, direction)


class InternalDispatcher:
    """Passes an in-car request to the controller of that lift."""

    def __init__(self, registry: "LiftCreator") -> None:
        self.registry = registry

    def submit_internal_request(self, dest_floor: int, lift_id: int) -> None:
        controllers = self.registry.controllers
        if not 1 <= lift_id <= len(controllers):
            raise IndexError(f"no lift with id {lift_id}")
        controllers[lift_id - 1].submit_internal_request(dest_floor)


class InternalButtons:
    """The button panel inside a lift car."""

    def __init__(self, floors: int, registry: "LiftCreator") -> None:
        self.max_button = floors
        self.dispatcher = InternalDispatcher(registry)

    def press_button(self, dest_floor: int, lift_id: int) -> None:
        if dest_floor > self.max_button:
            print("selected button is not in the available buttons")
        self.dispatcher.submit_internal_request(dest_floor, lift_id)