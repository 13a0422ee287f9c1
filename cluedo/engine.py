"""Game rules: dealing, turns, possible actions and moves."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import cycle
from typing import Any, Protocol

from .actions import CommandId, Move
from .board import Board
from .cards import Card, RoomCard, SuspectCard, WeaponCard
from .enums import LocationType, RoomName, Suspect, TripleClue, Weapon
from .game_state import GameState
from .locations import Cell, Door, Location, Room
from .player import PlayerState
from .randomness import random_int

_SUSPECT_DECK = (
    Suspect.VIOLET,
    Suspect.ROSE,
    Suspect.PERVENCHE,
    Suspect.LEBLANC,
    Suspect.OLIVE,
    Suspect.MOUTARDE,
)
_WEAPON_DECK = (
    Weapon.WRENCH,
    Weapon.CANDLESTICK,
    Weapon.PISTOL,
    Weapon.ROPE,
    Weapon.LEAD_PIPE,
    Weapon.KNIFE,
)
_ROOM_DECK = (
    RoomName.BEDROOM,
    RoomName.STUDY,
    RoomName.HALL,
    RoomName.LIVING_ROOM,
    RoomName.DINING_ROOM,
    RoomName.KITCHEN,
    RoomName.BATHROOM,
    RoomName.GARAGE,
    RoomName.GAME_ROOM,
)
_CHARACTER_ORDER = (
    Suspect.ROSE,
    Suspect.PERVENCHE,
    Suspect.LEBLANC,
    Suspect.OLIVE,
    Suspect.MOUTARDE,
    Suspect.VIOLET,
)
# Same order as Board.neighbors_as_cells: up, down, left, right.
_STEPS = (Move.MOVE_UP, Move.MOVE_DOWN, Move.MOVE_LEFT, Move.MOVE_RIGHT)
_WALKABLE = (LocationType.CORRIDOR, LocationType.DOOR)


class _Executable(Protocol):
    def execute(self) -> Any: ...


class Engine:
    """Applies the rules to a game state."""

    def __init__(self, state: GameState) -> None:
        self.state = state
        self.commands: list[_Executable] = []
        self._current = 0

    @property
    def players(self) -> list[PlayerState]:
        return self.state.players

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def envelope(self) -> TripleClue | None:
        return self.state.envelope

    @envelope.setter
    def envelope(self, value: TripleClue | None) -> None:
        self.state.envelope = value

    @property
    def current_player(self) -> PlayerState:
        return self.players[self._current]

    def determine_first_player(self) -> int:
        """A random index into the player list."""
        return random_int(len(self.players))

    def deal_cards(self) -> None:
        """Fill the envelope, then deal the other cards round from the current player."""
        if not self.players:
            raise ValueError("cannot deal cards without players")
        suspects = [SuspectCard(s) for s in _SUSPECT_DECK]
        weapons = [WeaponCard(w) for w in _WEAPON_DECK]
        rooms = [RoomCard(r) for r in _ROOM_DECK]
        suspect = suspects.pop(random_int(len(suspects)))
        weapon = weapons.pop(random_int(len(weapons)))
        room = rooms.pop(random_int(len(rooms)))
        self.envelope = TripleClue(suspect.suspect, weapon.weapon, room.room)

        pool: list[Card] = [*suspects, *weapons, *rooms]
        hands = cycle(self.players_from_current())
        while pool:
            card = pool.pop(random_int(len(pool)))
            player = next(hands)
            if isinstance(card, SuspectCard):
                player.add_suspect_card(card)
            elif isinstance(card, WeaponCard):
                player.add_weapon_card(card)
            else:
                player.add_room_card(card)

    def distribute_characters(self) -> None:
        """Give each player a character and put them on its starting cell."""
        players = self.players_from_current()
        if len(players) > len(_CHARACTER_ORDER):
            raise ValueError("more players than characters")
        for player, suspect in zip(players, _CHARACTER_ORDER):
            player.identity = suspect
            player.move_to(self.state.starting_cell(suspect))

    @staticmethod
    def dice() -> list[int]:
        """Roll the two dice."""
        return [random_int(5) + 1, random_int(5) + 1]

    def possessed_cards(self, clues: TripleClue, player: PlayerState) -> list[Card]:
        """The player's cards that match the suspect, weapon or room of the clues."""
        return [
            *(c for c in player.suspect_cards if c.suspect is clues.suspect),
            *(c for c in player.weapon_cards if c.weapon is clues.weapon),
            *(c for c in player.room_cards if c.room is clues.room),
        ]

    def show_card(self, cards: Sequence[Card], index: int) -> Card:
        if not 0 <= index < len(cards):
            raise IndexError(f"card index {index} out of range")
        return cards[index]

    def possible_actions(self, player: PlayerState) -> list[CommandId]:
        """What the player may do now; raises RuntimeError if nothing."""
        actions: list[CommandId] = []
        if self.players and player is self.current_player:
            actions.append(CommandId.ACCUSATION)
            location = player.location
            if isinstance(location, Room):
                if player.previous_hypothesis_room is not location.name:
                    actions.append(CommandId.HYPOTHESIS)
                if location.secret_passage is not None:
                    actions.append(CommandId.SECRET_PASSAGE)
                if any(not door.occupied() for door in location.doors):
                    actions.append(CommandId.MOVE_FROM_DICE)
            else:
                actions.append(CommandId.MOVE_FROM_DICE)
        if not actions:
            raise RuntimeError("no possible action found")
        return actions

    def add_command(self, command: _Executable) -> None:
        self.commands.append(command)

    def possible_moves(self, player: PlayerState) -> list[Move]:
        """The steps the player can take from where they stand."""
        location = player.location
        if location is None:
            raise RuntimeError("player has no location")
        if location.type is LocationType.ROOM:
            return [Move.EXIT_ROOM]
        if location.type is LocationType.CORRIDOR and isinstance(location, Cell):
            return self._free_steps(location)
        if location.type is LocationType.DOOR and isinstance(location, Door):
            moves = []
            if player.previous_hypothesis_room is not location.room.name:
                moves.append(Move.ENTER_ROOM)
            return moves + self._free_steps(location)
        raise RuntimeError("switch case failed")

    def _free_steps(self, cell: Cell) -> list[Move]:
        neighbours = self.board.neighbors_as_cells(cell.x, cell.y)
        return [
            step
            for step, neighbour in zip(_STEPS, neighbours)
            if neighbour.type in _WALKABLE and not neighbour.occupied()
        ]

    def execute_commands(self) -> None:
        """Run every queued command in order, then empty the queue."""
        for command in self.commands:
            command.execute()
        self.commands.clear()

    def set_current_player(self, player: PlayerState) -> None:
        for index, candidate in enumerate(self.players):
            if candidate is player:
                self._current = index
                return
        raise ValueError("element not found in player list")

    def move_to_location(self, move: Move) -> Location:
        """The location the current player would reach with the move."""
        location = self.current_player.location
        if move is Move.ENTER_ROOM and isinstance(location, Door):
            return location.room
        if (
            move in _STEPS
            and isinstance(location, Cell)
            and location.type in _WALKABLE
        ):
            neighbours = self.board.neighbors_as_cells(location.x, location.y)
            return neighbours[_STEPS.index(move)]
        raise ValueError("invalid move relative to player's location type")

    def players_from_current(self) -> list[PlayerState]:
        """All players in turn order, starting with the current one."""
        players = self.players
        return players[self._current:] + players[: self._current]