# cluedo

A pure-Python library for a Cluedo-style murder-mystery board game. It provides the
game state and the rules engine. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

- `cluedo.enums`: `Suspect`, `Weapon`, `RoomName` (with `NO_ROOM` as the "no room"
  marker), `LocationType`, `CardType` and the frozen `TripleClue` dataclass. A
  `TripleClue` holds a suspect, a weapon and a room, and serves as the envelope, a
  hypothesis or an accusation. `str()` of a suspect, weapon or room gives its readable
  name.
- `cluedo.cards`: `Card`, `SuspectCard`, `WeaponCard` and `RoomCard`.
  `value_as_string()` gives the readable name of what a card shows.
- `cluedo.locations`: `Location`, `Cell`, `Door` and `Room`.
  - A `Cell` holds at most one player.
  - A `Door` registers itself with its room when it is created.
  - A `Room` keeps its `doors` and an optional `secret_passage`.
- `cluedo.player`: `PlayerState`. It records a player's identity, location, cards,
  `previous_hypothesis_room` and `can_win`. `move_to()` leaves the old location and
  occupies the new one.
- `cluedo.board`: `Board`, built from a JSON map with `Board.from_file` or
  `Board.from_dict`. It provides:
  - `cell(x, y)` and `room(name)` lookups;
  - `neighbors_as_cells()` and `neighbor_types()`, each in the order up, down, left,
    right, where `neighbor_types()` treats off-board squares as `INACCESSIBLE`;
  - `display_map()`, a text rendering of the board.

  The nine rooms are always present. Secret passages join the living room with the
  bedroom, and the kitchen with the garage.
- `cluedo.game_state`: `GameState`. It holds the board, the players, the envelope and
  the accusation outcome. `starting_cell(suspect)` gives each character's start square.
- `cluedo.actions`: the `CommandId` and `Move` enumerations. The value of each member
  is its readable label.
- `cluedo.randomness`: `random_int(upper)` returns a value in `[0, upper - 1]`.
  `load_json(path)` parses a JSON file.
- `cluedo.engine`: `Engine`. It can:
  - deal the envelope and the cards (`deal_cards`);
  - assign characters and place them on their starting squares
    (`distribute_characters`);
  - roll the dice (`Engine.dice()`);
  - find the cards a player holds that match a clue (`possessed_cards`);
  - list the legal actions and moves (`possible_actions`, `possible_moves`);
  - give the location a move leads to (`move_to_location`);
  - queue commands and run them (`add_command`, `execute_commands`).
- `cluedo.commands`: `AccusationCommand`, `HypothesisCommand`, `MoveCommand` and
  `SecretPassageCommand`.
  - `MoveCommand` ignores an illegal step and leaves the player where they stand.
  - `SecretPassageCommand` raises `ValueError` when the player is not in a room, or
    when the room has no secret passage.

## Map format

A map file is a JSON object with `mapWidth`, `mapHeight` and a `map` list. Each entry in
the list describes one cell:

```json
{"x": 3, "y": 5, "LocationType": "DOOR", "RoomLink": "KITCHEN"}
```

`LocationType` is one of `INACCESSIBLE`, `CORRIDOR`, `DOOR` or `ROOM`. A door names the
room it opens into in `RoomLink`, using the room's upper-case name (`STUDY`, `HALL`,
`LIVING_ROOM`, and so on). Cells the file leaves out are `INACCESSIBLE`.

The board must be large enough to hold every character's starting square. The largest
coordinates used are x = 24 and y = 25.

## Example

```python
from cluedo.game_state import GameState
from cluedo.engine import Engine

state = GameState.from_file("map.json", player_count=3)
engine = Engine(state)
engine.distribute_characters()
engine.deal_cards()

player = engine.current_player
print(engine.possible_actions(player))
print(engine.possible_moves(player))
print(Engine.dice())
```

## What this package does not do

This is a library only. It has no computer opponents, no command to start a game, no
turn loop and no graphical or terminal screen. To play a game, write code that drives
the `Engine` and `GameState`.