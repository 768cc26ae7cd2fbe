"""Floors with hall-call buttons, and the building that holds them."""

from __future__ import annotations

from typing import Optional

from .controller import LiftCreator
from .dispatch import EvenOddExternalDispatcher, ExternalDispatcher
from .lift import Direction


class Floor:
    """A floor whose call buttons hand requests to an external dispatcher."""

    def __init__(self, registry: LiftCreator, floor_id: int) -> None:
        self.id = floor_id
        self.dispatcher: Optional[ExternalDispatcher] = EvenOddExternalDispatcher(registry)

    def press_button(self, dest_floor: int, direction: Direction) -> None:
        if self.dispatcher is None:
            raise RuntimeError("set an external dispatcher first")
        self.dispatcher.submit_external_request(dest_floor, direction)

    def set_external_dispatcher(self, dispatcher: Optional[ExternalDispatcher]) -> None:
        self.dispatcher = dispatcher


class Building:
    """A building of numbered floors served by the lifts in ``registry``."""

    def __init__(self, num_floors: int, registry: LiftCreator) -> None:
        self.num_floors = num_floors
        self.floors = [Floor(registry, floor_id) for floor_id in range(1, num_floors + 1)]