"""Commands that change the game state when executed."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .actions import CommandId
from .enums import LocationType, TripleClue
from .locations import Cell, Door, Location, Room
from .player import PlayerState

if TYPE_CHECKING:
    from .engine import Engine

_WALKABLE = (LocationType.CORRIDOR, LocationType.DOOR)


class Command:
    """An action taken by a player, run later by the engine."""

    def __init__(self, engine: Engine, player: PlayerState, id: CommandId) -> None:
        self.engine = engine
        self.player = player
        self.id = id

    def execute(self) -> None:
        """Apply the command; a bare command changes nothing."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.player!r}, {self.id.name})"


class AccusationCommand(Command):
    """Compare an accusation with the envelope as it was when the command was made."""

    def __init__(self, engine: Engine, player: PlayerState, accusation: TripleClue) -> None:
        super().__init__(engine, player, CommandId.ACCUSATION)
        self.accusation = accusation
        self.envelope = engine.envelope

    def execute(self) -> None:
        if self.envelope is not None and self.accusation == self.envelope:
            self.player.can_win = True
            self.engine.state.accusation_success = True
        else:
            self.player.can_win = False


class HypothesisCommand(Command):
    """Bring the named suspect into the current room and remember the room."""

    def __init__(self, engine: Engine, player: PlayerState, hypothesis: TripleClue) -> None:
        super().__init__(engine, player, CommandId.HYPOTHESIS)
        self.hypothesis = hypothesis

    def execute(self) -> None:
        players = self.engine.players
        if not players or self.player is not self.engine.current_player:
            return
        room = self.player.location
        if not isinstance(room, Room) or room.name is not self.hypothesis.room:
            return
        suspect = next(
            (p for p in players if p.identity is self.hypothesis.suspect), None
        )
        if suspect is not None:
            suspect.move_to(room)
        self.player.previous_hypothesis_room = room.name


class MoveCommand(Command):
    """Move one step: between cells, into a room through a door, or out of it."""

    def __init__(self, engine: Engine, player: PlayerState, new_location: Location) -> None:
        super().__init__(engine, player, CommandId.MOVE_FROM_DICE)
        self.new_location = new_location

    def execute(self) -> None:
        """Move if the step is legal; illegal steps leave the player where they are."""
        current = self.player.location
        if current is None:
            raise ValueError("invalid player location type")
        target = self.new_location
        if current.type is LocationType.CORRIDOR and isinstance(current, Cell):
            self._step(current, target)
        elif current.type is LocationType.DOOR and isinstance(current, Door):
            self._step(current, target)
            if isinstance(target, Room):
                if (
                    target.name is not self.player.previous_hypothesis_room
                    and any(door is current for door in target.doors)
                ):
                    self.player.move_to(target)
        elif current.type is LocationType.ROOM and isinstance(current, Room):
            if (
                isinstance(target, Door)
                and not target.occupied()
                and any(door is target for door in current.doors)
            ):
                self.player.move_to(target)
        else:
            raise ValueError("invalid player location type")

    def _step(self, current: Cell, target: Location) -> None:
        if target.type not in _WALKABLE or not isinstance(target, Cell):
            return
        if target.occupied():
            return
        neighbours = self.engine.board.neighbors_as_cells(current.x, current.y)
        if any(cell is target for cell in neighbours):
            self.player.move_to(target)


class SecretPassageCommand(Command):
    """Take the secret passage out of the current room."""

    def __init__(self, engine: Engine, player: PlayerState) -> None:
        super().__init__(engine, player, CommandId.SECRET_PASSAGE)

    def execute(self) -> None:
        room = self.player.location
        if not isinstance(room, Room):
            raise ValueError("Invalid player's starting position")
        if room.secret_passage is None:
            raise ValueError(f"{room.name_as_string()} has no secret passage")
        self.player.move_to(room.secret_passage)