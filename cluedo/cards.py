"""Clue cards."""

from __future__ import annotations

from .enums import CardType, RoomName, Suspect, Weapon


class Card:
    """A clue card of some kind."""

    def __init__(self, type: CardType) -> None:
        self.type = type

    @property
    def value(self) -> Suspect | Weapon | RoomName:
        raise TypeError(f"a bare {self.type.name} card carries no value")

    def value_as_string(self) -> str:
        """The readable name of what the card shows."""
        return str(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.type.name})"


class SuspectCard(Card):
    def __init__(self, suspect: Suspect) -> None:
        super().__init__(CardType.SUSPECT_CARD)
        self.suspect = suspect

    @property
    def value(self) -> Suspect:
        return self.suspect

    def __repr__(self) -> str:
        return f"SuspectCard({self.suspect.name})"


class WeaponCard(Card):
    def __init__(self, weapon: Weapon) -> None:
        super().__init__(CardType.WEAPON_CARD)
        self.weapon = weapon

    @property
    def value(self) -> Weapon:
        return self.weapon

    def __repr__(self) -> str:
        return f"WeaponCard({self.weapon.name})"


class RoomCard(Card):
    def __init__(self, room: RoomName) -> None:
        super().__init__(CardType.ROOM_CARD)
        self.room = room

    @property
    def value(self) -> RoomName:
        return self.room

    def __repr__(self) -> str:
        return f"RoomCard({self.room.name})"