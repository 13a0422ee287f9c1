from cluedo.enums import LocationType, RoomName
from cluedo.locations import Cell, Door, Location, Room


def test_set_cell():
    cell = Cell(1, 2, LocationType.INACCESSIBLE)
    cell.set_cell(3, 4, LocationType.ROOM)
    assert cell.x == 3
    assert cell.y == 4
    assert cell.type == LocationType.ROOM


def test_coordinates():
    cell = Cell(1, 2, LocationType.INACCESSIBLE)
    assert cell.x == 1
    assert cell.y == 2


def test_occupied_follows_player():
    cell = Cell(1, 2, LocationType.CORRIDOR)
    assert cell.occupied() is False
    occupant = object()
    cell.player = occupant
    assert cell.occupied() is True
    assert cell.player is occupant
    cell.player = None
    assert cell.occupied() is False


def test_plain_location_ignores_player():
    location = Location(LocationType.CORRIDOR)
    location.player = object()
    assert location.player is None


def test_door_room():
    door = Door(1, 1, Room(RoomName.KITCHEN))
    assert door.room.name == RoomName.KITCHEN
    assert door.type == LocationType.DOOR
    assert door.room.doors == [door]


def test_location_type():
    location = Location(LocationType.INACCESSIBLE)
    assert location.type == LocationType.INACCESSIBLE


def test_set_type_from_string():
    for text, expected in [
        ("CORRIDOR", LocationType.CORRIDOR),
        ("DOOR", LocationType.DOOR),
        ("ROOM", LocationType.ROOM),
        ("Mouais", LocationType.INACCESSIBLE),
    ]:
        location = Location(LocationType.INACCESSIBLE)
        location.set_type_from_string(text)
        assert location.type == expected


def test_type_as_string():
    assert Location(LocationType.INACCESSIBLE).type_as_string() == "INACCESSIBLE"
    assert Location(LocationType.CORRIDOR).type_as_string() == "CORRIDOR"
    assert Location(LocationType.DOOR).type_as_string() == "DOOR"
    assert Location(LocationType.ROOM).type_as_string() == "ROOM"


def test_add_door():
    room = Room(RoomName.KITCHEN)
    door = Door(1, 1, Room(RoomName.KITCHEN))
    room.add_door(door)
    assert room.doors[0].room.name == RoomName.KITCHEN


def test_room_name():
    assert Room(RoomName.KITCHEN).name == RoomName.KITCHEN
    assert Room(RoomName.KITCHEN).type == LocationType.ROOM


def test_secret_passage():
    room = Room(RoomName.KITCHEN)
    room2 = Room(RoomName.LIVING_ROOM)
    assert room.secret_passage is None
    room.secret_passage = room2
    assert room.secret_passage.name == RoomName.LIVING_ROOM


def test_name_as_string():
    for name, text in [
        (RoomName.KITCHEN, "KITCHEN"),
        (RoomName.LIVING_ROOM, "LIVING_ROOM"),
        (RoomName.DINING_ROOM, "DINING_ROOM"),
        (RoomName.GARAGE, "GARAGE"),
        (RoomName.GAME_ROOM, "GAME_ROOM"),
        (RoomName.BEDROOM, "BEDROOM"),
        (RoomName.NO_ROOM, "ERROR"),
    ]:
        assert Room(name).name_as_string() == text