"""What a player can choose to do on a turn, and how to move."""

from __future__ import annotations

from enum import Enum


class CommandId(Enum):
    """An action a player can take."""

    MOVE_FROM_DICE = "move with the dice"
    SECRET_PASSAGE = "take the secret passage"
    HYPOTHESIS = "make a hypothesis"
    ACCUSATION = "make an accusation"
    NO_COMMAND = "no action"

    @property
    def label(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class Move(Enum):
    """A single step on the board."""

    MOVE_UP = "move up"
    MOVE_DOWN = "move down"
    MOVE_LEFT = "move left"
    MOVE_RIGHT = "move right"
    ENTER_ROOM = "enter the room"
    EXIT_ROOM = "exit the room"

    @property
    def label(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value