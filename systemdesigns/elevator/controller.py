"""Scheduling of requests for one lift, and the registry of all lifts."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Iterator, Optional

from .dispatch import InternalButtons
from .lift import Direction, Lift


class LiftController:
    """Queues floor requests for one lift and drives it through them."""

    def __init__(
        self,
        floors: int,
        registry: Optional["LiftCreator"] = None,
        lift_id: Optional[int] = None,
    ) -> None:
        buttons = InternalButtons(floors, registry) if registry is not None else None
        self.lift = Lift(floors, lift_id=lift_id, buttons=buttons)
        self._up: list[int] = []
        self._down: list[int] = []  # negated floors, giving a max-heap
        self._waiting: deque[int] = deque()

    @property
    def has_pending_requests(self) -> bool:
        return bool(self._up or self._down or self._waiting)

    def _push_up(self, floor: int) -> None:
        heapq.heappush(self._up, floor)

    def _push_down(self, floor: int) -> None:
        heapq.heappush(self._down, -floor)

    def submit_external_request(self, dest_floor: int, direction: Direction) -> None:
        """Queue a hall call made from ``dest_floor`` wanting ``direction``."""
        current = self.lift.current_floor
        if self.lift.direction is Direction.UP:
            if direction is Direction.UP:
                if dest_floor < current:
                    self._waiting.append(dest_floor)
                else:
                    self._push_up(dest_floor)
            else:
                self._push_down(dest_floor)
        elif direction is Direction.DOWN:
            if dest_floor > current:
                self._waiting.append(dest_floor)
            else:
                self._push_down(dest_floor)
        else:
            self._push_up(dest_floor)

    def submit_internal_request(self, dest_floor: int) -> None:
        """Queue a request made from a button inside the car."""
        current = self.lift.current_floor
        if self.lift.direction is Direction.UP:
            if dest_floor < current:
                self._waiting.append(dest_floor)
            else:
                self._push_up(dest_floor)
        elif dest_floor > current:
            self._waiting.append(dest_floor)
        else:
            self._push_down(dest_floor)

    def move_lift(self) -> None:
        """Serve every queued request, sweeping up and down as needed."""
        lift = self.lift
        while self.has_pending_requests:
            if lift.direction is Direction.UP:
                while self._waiting:
                    self._push_down(self._waiting.popleft())
                while self._up:
                    lift.move(heapq.heappop(self._up), Direction.UP)
                if self._down and lift.current_floor < -self._down[0]:
                    lift.move(-self._down[0], Direction.UP)
                lift.direction = Direction.DOWN
            else:
                while self._waiting:
                    self._push_up(self._waiting.popleft())
                while self._down:
                    lift.move(-heapq.heappop(self._down), Direction.DOWN)
                if self._up and lift.current_floor > self._up[0]:
                    lift.move(self._up[0], Direction.DOWN)
                lift.direction = Direction.UP


class LiftCreator:
    """Registry of the lift controllers of one installation."""

    def __init__(self) -> None:
        self.controllers: list[LiftController] = []

    def create_lifts(self, num_of_floors: int, num_of_lifts: int) -> None:
        """Add ``num_of_lifts`` lifts, numbered on from the ones present."""
        for _ in range(num_of_lifts):
            lift_id = len(self.controllers) + 1
            self.controllers.append(
                LiftController(num_of_floors, registry=self, lift_id=lift_id)
            )

    def delete_lifts(self) -> None:
        self.controllers.clear()

    def __len__(self) -> int:
        return len(self.controllers)

    def __iter__(self) -> Iterator[LiftController]:
        return iter(self.controllers)

    def __getitem__(self, index: int) -> LiftController:
        return self.controllers[index]