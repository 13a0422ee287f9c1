"""Places a player can stand in: cells, doors and rooms."""

from __future__ import annotations

from typing import Any

from .enums import LocationType, RoomName


class Location:
    """Anything a player can occupy."""

    def __init__(self, type: LocationType) -> None:
        self.type = type

    @property
    def player(self) -> Any:
        """The occupant; plain locations do not track one."""
        return None

    @player.setter
    def player(self, value: Any) -> None:
        pass

    def type_as_string(self) -> str:
        return self.type.name

    def set_type_from_string(self, text: str) -> None:
        """Set the type from its name; unknown names mean INACCESSIBLE."""
        try:
            self.type = LocationType[text]
        except KeyError:
            self.type = LocationType.INACCESSIBLE

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.type.name})"


class Cell(Location):
    """A square of the board grid, holding at most one player."""

    def __init__(self, x: int, y: int, type: LocationType) -> None:
        super().__init__(type)
        self.x = x
        self.y = y
        self._player: Any = None

    @property
    def player(self) -> Any:
        return self._player

    @player.setter
    def player(self, value: Any) -> None:
        self._player = value

    def set_cell(self, x: int, y: int, type: LocationType) -> None:
        self.x = x
        self.y = y
        self.type = type

    def occupied(self) -> bool:
        return self._player is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y}, {self.type.name})"


class Room(Location):
    """A named room with its doors and an optional secret passage."""

    def __init__(self, name: RoomName) -> None:
        super().__init__(LocationType.ROOM)
        self.name = name
        self.doors: list[Door] = []
        self.secret_passage: Room | None = None

    def name_as_string(self) -> str:
        if self.name is RoomName.NO_ROOM:
            return "ERROR"
        return self.name.name

    def add_door(self, door: Door) -> None:
        self.doors.append(door)

    def __repr__(self) -> str:
        return f"Room({self.name.name})"


class Door(Cell):
    """A board cell giving access to a room; registers itself with the room."""

    def __init__(self, x: int, y: int, room: Room) -> None:
        super().__init__(x, y, LocationType.DOOR)
        self.room = room
        room.add_door(self)