"""State of one player."""

from __future__ import annotations

from .cards import RoomCard, SuspectCard, WeaponCard
from .enums import RoomName, Suspect
from .locations import Location


class PlayerState:
    """A player's identity, position, hand and progress."""

    def __init__(self, identity: Suspect) -> None:
        self.identity = identity
        self.location: Location | None = None
        self.can_win = True
        self.previous_hypothesis_room = RoomName.NO_ROOM
        self.suspect_cards: list[SuspectCard] = []
        self.weapon_cards: list[WeaponCard] = []
        self.room_cards: list[RoomCard] = []

    def move_to(self, location: Location) -> None:
        """Leave the current location and occupy the new one."""
        if self.location is not None:
            self.location.player = None
        self.location = location
        location.player = self

    def add_suspect_card(self, card: SuspectCard) -> None:
        self.suspect_cards.append(card)

    def add_weapon_card(self, card: WeaponCard) -> None:
        self.weapon_cards.append(card)

    def add_room_card(self, card: RoomCard) -> None:
        self.room_cards.append(card)

    def card_count(self) -> int:
        return len(self.suspect_cards) + len(self.weapon_cards) + len(self.room_cards)

    def __repr__(self) -> str:
        return f"PlayerState({self.identity.name})"