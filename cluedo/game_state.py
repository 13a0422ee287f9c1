"""The whole state of a game: board, players, envelope and outcome."""

from __future__ import annotations

from os import PathLike

from .board import Board
from .enums import Suspect, TripleClue
from .locations import Cell
from .player import PlayerState

_STARTING_CELLS = {
    Suspect.ROSE: (9, 25),
    Suspect.PERVENCHE: (24, 7),
    Suspect.LEBLANC: (10, 1),
    Suspect.OLIVE: (15, 1),
    Suspect.MOUTARDE: (1, 18),
    Suspect.VIOLET: (24, 20),
}


class GameState:
    """Everything that describes a game in progress."""

    def __init__(self, board: Board, player_count: int) -> None:
        if player_count < 0:
            raise ValueError("player count cannot be negative")
        self.board = board
        self.players: list[PlayerState] = [
            PlayerState(Suspect.PERVENCHE) for _ in range(player_count)
        ]
        self.envelope: TripleClue | None = None
        self.accusation_success = False

    @classmethod
    def from_file(cls, path: str | PathLike[str], player_count: int) -> GameState:
        """Load the board from a map file and create the players."""
        return cls(Board.from_file(path), player_count)

    def starting_cell(self, suspect: Suspect) -> Cell:
        """The board cell where the given character starts."""
        try:
            x, y = _STARTING_CELLS[suspect]
        except KeyError:
            raise ValueError("Incorrect Suspect enum value") from None
        return self.board.cell(x, y)