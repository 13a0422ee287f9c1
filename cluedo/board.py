"""The game board: a grid of cells plus the nine rooms."""

from __future__ import annotations

import json
from collections.abc import Mapping
from os import PathLike
from typing import Any

from .enums import LocationType, RoomName
from .locations import Cell, Door, Room

# Order matters: up, down, left, right.
_DIRECTIONS = ((0, -1), (0, 1), (-1, 0), (1, 0))

_ROOM_ORDER = (
    RoomName.STUDY,
    RoomName.HALL,
    RoomName.LIVING_ROOM,
    RoomName.DINING_ROOM,
    RoomName.KITCHEN,
    RoomName.BATHROOM,
    RoomName.GARAGE,
    RoomName.GAME_ROOM,
    RoomName.BEDROOM,
)

_SECRET_PASSAGES = (
    (RoomName.LIVING_ROOM, RoomName.BEDROOM),
    (RoomName.KITCHEN, RoomName.GARAGE),
)


class Board:
    """A width x height grid of cells indexed by (x, y), and the rooms."""

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("board dimensions must be positive")
        self.width = width
        self.height = height
        self.rooms: list[Room] = [Room(name) for name in _ROOM_ORDER]
        for a, b in _SECRET_PASSAGES:
            self.room(a).secret_passage = self.room(b)
            self.room(b).secret_passage = self.room(a)
        self._grid: list[list[Cell]] = [
            [Cell(x, y, LocationType.INACCESSIBLE) for y in range(height)]
            for x in range(width)
        ]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Board:
        """Build a board from parsed map data (mapWidth, mapHeight, map)."""
        board = cls(int(data["mapWidth"]), int(data["mapHeight"]))
        rooms_by_key = {room.name_as_string(): room for room in board.rooms}
        for entry in data.get("map", []):
            x, y = int(entry["x"]), int(entry["y"])
            kind = entry["LocationType"]
            if kind == "DOOR":
                link = entry.get("RoomLink")
                if link not in rooms_by_key:
                    raise ValueError(f"door at ({x}, {y}) links to unknown room {link!r}")
                cell: Cell = Door(x, y, rooms_by_key[link])
            elif kind in ("INACCESSIBLE", "CORRIDOR", "ROOM"):
                cell = Cell(x, y, LocationType[kind])
            else:
                raise ValueError(f"unknown location type {kind!r} at ({x}, {y})")
            board._place(cell)
        return board

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> Board:
        with open(path, encoding="utf-8") as handle:
            return cls.from_dict(json.load(handle))

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _place(self, cell: Cell) -> None:
        if not self._in_bounds(cell.x, cell.y):
            raise ValueError(f"cell ({cell.x}, {cell.y}) lies outside the board")
        self._grid[cell.x][cell.y] = cell

    def cell(self, x: int, y: int) -> Cell:
        if not self._in_bounds(x, y):
            raise IndexError(f"coordinates ({x}, {y}) lie outside the board")
        return self._grid[x][y]

    def room(self, name: RoomName) -> Room:
        for room in self.rooms:
            if room.name is name:
                return room
        raise KeyError(name)

    def neighbors_as_cells(self, x: int, y: int) -> list[Cell]:
        """Cells up, down, left and right of an interior cell."""
        if not (1 <= x <= self.width - 2 and 1 <= y <= self.height - 2):
            raise ValueError("invalid coordinates")
        return [self._grid[x + dx][y + dy] for dx, dy in _DIRECTIONS]

    def neighbor_types(self, x: int, y: int) -> list[LocationType]:
        """Types up, down, left and right; off-board counts as INACCESSIBLE."""
        return [
            self._grid[x + dx][y + dy].type
            if self._in_bounds(x + dx, y + dy)
            else LocationType.INACCESSIBLE
            for dx, dy in _DIRECTIONS
        ]

    def display_map(self) -> list[list[str]]:
        """Rows of single-character strings, cells separated by '|'."""
        rows = []
        for y in range(self.height):
            row = ["|"]
            for x in range(self.width):
                row.append(self._symbol(self._grid[x][y]))
                row.append("|")
            rows.append(row)
        return rows

    @staticmethod
    def _symbol(cell: Cell) -> str:
        if cell.type is LocationType.ROOM:
            return "~"
        if cell.type is LocationType.INACCESSIBLE:
            return "X"
        if cell.occupied():
            return str(cell.player.identity)[0]
        return "D" if cell.type is LocationType.DOOR else " "