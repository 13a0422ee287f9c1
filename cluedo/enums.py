"""Basic game vocabulary: suspects, weapons, rooms, location and card kinds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Suspect(Enum):
    """The six characters of the game."""

    ROSE = 1
    PERVENCHE = 2
    LEBLANC = 3
    OLIVE = 4
    MOUTARDE = 5
    VIOLET = 6

    @property
    def label(self) -> str:
        return _SUSPECT_LABELS[self]

    def __str__(self) -> str:
        return self.label


_SUSPECT_LABELS = {
    Suspect.ROSE: "Rose",
    Suspect.PERVENCHE: "Pervenche",
    Suspect.LEBLANC: "Leblanc",
    Suspect.OLIVE: "Olive",
    Suspect.MOUTARDE: "Moutarde",
    Suspect.VIOLET: "Violet",
}


class Weapon(Enum):
    """The six possible murder weapons."""

    CANDLESTICK = 1
    PISTOL = 2
    ROPE = 3
    LEAD_PIPE = 4
    KNIFE = 5
    WRENCH = 6

    @property
    def label(self) -> str:
        return _WEAPON_LABELS[self]

    def __str__(self) -> str:
        return self.label


_WEAPON_LABELS = {
    Weapon.CANDLESTICK: "candlestick",
    Weapon.PISTOL: "pistol",
    Weapon.ROPE: "rope",
    Weapon.LEAD_PIPE: "lead pipe",
    Weapon.KNIFE: "knife",
    Weapon.WRENCH: "wrench",
}


class RoomName(Enum):
    """The nine rooms of the mansion, plus a marker for 'no room'."""

    NO_ROOM = 0
    STUDY = 1
    HALL = 2
    LIVING_ROOM = 3
    DINING_ROOM = 4
    KITCHEN = 5
    BATHROOM = 6
    GARAGE = 7
    GAME_ROOM = 8
    BEDROOM = 9

    @property
    def label(self) -> str:
        """Human readable name; NO_ROOM has none and raises ValueError."""
        try:
            return _ROOM_LABELS[self]
        except KeyError:
            raise ValueError("invalid room name value") from None

    def __str__(self) -> str:
        return self.label


_ROOM_LABELS = {
    RoomName.STUDY: "study",
    RoomName.HALL: "hall",
    RoomName.LIVING_ROOM: "living room",
    RoomName.DINING_ROOM: "dining room",
    RoomName.KITCHEN: "kitchen",
    RoomName.BATHROOM: "bathroom",
    RoomName.GARAGE: "garage",
    RoomName.GAME_ROOM: "game room",
    RoomName.BEDROOM: "bedroom",
}


class LocationType(Enum):
    """Kind of place a player can be in, or a board cell can be."""

    INACCESSIBLE = auto()
    CORRIDOR = auto()
    DOOR = auto()
    ROOM = auto()


class CardType(Enum):
    """Kind of clue card."""

    SUSPECT_CARD = auto()
    WEAPON_CARD = auto()
    ROOM_CARD = auto()


@dataclass(frozen=True)
class TripleClue:
    """A suspect, a weapon and a room: an envelope, hypothesis or accusation."""

    suspect: Suspect
    weapon: Weapon
    room: RoomName