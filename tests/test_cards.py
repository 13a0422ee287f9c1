import pytest

from cluedo.cards import Card, RoomCard, SuspectCard, WeaponCard
from cluedo.enums import CardType, RoomName, Suspect, Weapon


def test_card_type():
    card = Card(CardType.WEAPON_CARD)
    assert card.type == CardType.WEAPON_CARD


def test_suspect_card():
    card = SuspectCard(Suspect.ROSE)
    assert card.suspect == Suspect.ROSE
    assert card.type == CardType.SUSPECT_CARD


def test_weapon_card():
    card = WeaponCard(Weapon.CANDLESTICK)
    assert card.weapon == Weapon.CANDLESTICK
    assert card.type == CardType.WEAPON_CARD


def test_room_card():
    card = RoomCard(RoomName.KITCHEN)
    assert card.room == RoomName.KITCHEN
    assert card.type == CardType.ROOM_CARD


def test_value_as_string():
    assert SuspectCard(Suspect.ROSE).value_as_string() == "Rose"
    assert WeaponCard(Weapon.LEAD_PIPE).value_as_string() == "lead pipe"
    assert RoomCard(RoomName.GAME_ROOM).value_as_string() == "game room"


def test_bare_card_has_no_value():
    with pytest.raises(TypeError):
        Card(CardType.ROOM_CARD).value_as_string()