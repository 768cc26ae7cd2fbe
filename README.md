# systemdesigns

Small object-oriented models of three classic designs.

- **Elevator system** (`systemdesigns.elevator`): a `Building` of `Floor`
  objects whose call buttons go through an `EvenOddExternalDispatcher`
  (odd-numbered lifts answer calls from odd floors, even-numbered lifts from
  even floors), and `LiftController` objects that queue requests in an
  up-heap, a down-heap and a waiting list and drive their `Lift` through them.
  Lifts are registered in a `LiftCreator`.
- **Parking lot** (`systemdesigns.parking`): a `ParkingLot` with numbered
  `EntryGate` and `ExitGate` objects, two- and four-wheeler spots kept by
  `ParkingSpotManager` objects, `Ticket`s, a `DefaultParkingStrategy` that
  takes the first empty spot, and the pricing strategies `HourlyPricing`
  (50 per started hour times the spot's price) and `MinutePricing`
  (minutes times the spot's price).
- **Tic-tac-toe** (`systemdesigns.tictactoe`): a `Board`, `PieceX`/`PieceO`
  pieces made by `create_piece`, `Player`s and a `Game` that detects wins on
  rows, columns and both diagonals.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

```
elevator-demo    # scripted scenario: a 5-floor building with 2 lifts, printing lift displays
parking-demo     # parks a bike, prices a 70-minute stay at the hourly rate and frees the spot
tictactoe        # two players on a 3x3 board; moves are read from stdin as "row col"
```

`tictactoe` prints the board before every move, asks again when a cell is
taken or off the board, and announces the winner or a tie. If input ends
before the game is over it stops with `EOFError`.

## Library use

### Parking lot

```python
from systemdesigns.parking.lot import ParkingLot
from systemdesigns.parking.spot import ParkingSpot2Wheeler
from systemdesigns.parking.vehicle import Bike
from systemdesigns.parking.strategy import HourlyPricing

lot = ParkingLot(1, 1)
lot.add_two_wheeler_spot(ParkingSpot2Wheeler())

entry = lot.get_entry_gate(1)
exit_gate = lot.get_exit_gate(1)

bike = Bike("TEST-0001")
spot = entry.find_parking_spot(bike.vehicle_type)   # None when no spot is free
ticket = entry.generate_ticket(bike, spot)
entry.update_parking_spot(bike, spot)

lot.set_pricing_strategy_at_exit_gate(1, HourlyPricing())
price = exit_gate.calculate_price(ticket, 70)   # 2 started hours * 50 * spot price 1 = 100
exit_gate.make_payment(price)
exit_gate.update_parking_spot(ticket.parking_spot)
exit_gate.delete_ticket(ticket)
```

`ExitGate.calculate_price` raises `RuntimeError` when no pricing strategy has
been set, `ExitGate.delete_ticket` raises `ValueError` for a ticket that was
already deleted, and `ParkingLot.get_entry_gate` / `get_exit_gate` raise
`KeyError` for an unknown gate number.

### Elevator

```python
from systemdesigns.elevator.building import Building
from systemdesigns.elevator.controller import LiftCreator
from systemdesigns.elevator.lift import Direction

registry = LiftCreator()
building = Building(5, registry)
registry.create_lifts(5, 2)          # lifts get ids 1 and 2

building.floors[1].press_button(1, Direction.UP)   # odd floor: goes to lift 1
registry[0].submit_internal_request(4)
registry[0].move_lift()              # prints the display at each floor passed
```

A lift always steps in its own current direction. Going up, `Lift.move`
halts one floor short of the requested floor; going down, it reaches it.

### Tic-tac-toe

```python
import io

from systemdesigns.tictactoe.board import Board
from systemdesigns.tictactoe.game import Game
from systemdesigns.tictactoe.pieces import PieceType, Player

board = Board(3)
board.set_piece(0, 0, PieceType.X)
board.display_board()

game = Game(3, Player("alice", PieceType.O), Player("bob", PieceType.X),
            input_stream=io.StringIO("0 0 1 0 0 1 1 1 0 2"))
winner = game.play()                 # the winning Player, or None for a tie
```

## What it does not do

These are in-memory models only. Nothing is stored between runs, tickets do
not record the time of entry (the length of a stay is passed to
`calculate_price` in minutes), payment always succeeds, lifts do not run on
their own clock or change their status, and there is no graphical or network
interface.