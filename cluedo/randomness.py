"""Random numbers and JSON loading shared by the game engine."""

from __future__ import annotations

import json
import random
from os import PathLike
from typing import Any

_rng = random.SystemRandom()


def random_int(upper: int) -> int:
    """A uniformly random integer in [0, upper - 1]."""
    if upper < 1:
        raise ValueError(f"invalid random_int range: {upper}")
    return _rng.randrange(upper)


def load_json(path: str | PathLike[str]) -> Any:
    """Parse a JSON file."""
    with open(path, encoding="utf-8") as handle:
        return json.load(handle)