"""Artefacts the player can carry, and the game's dice."""

from __future__ import annotations

import enum
import random
from typing import Optional

_SIDES = 60


def roll(rng: Optional[random.Random] = None) -> int:
    """A random number in ``range(60)``, drawn from ``rng`` or the global generator."""
    source = rng if rng is not None else random
    return source.randrange(_SIDES)


class ItemName(enum.Enum):
    NO = enum.auto()
    RED_SWORD = enum.auto()
    FROST_STICK = enum.auto()
    QUEST = enum.auto()


class Item:
    """Something the player holds; a plain item does nothing."""

    def __init__(self, name: ItemName = ItemName.NO) -> None:
        self.name = name

    def change_exp(self) -> int:
        """Experience added for the length of a fight."""
        return 0

    def skip(self) -> bool:
        """Whether the item scares the opponent away."""
        return False

    def level(self) -> int:
        """Difficulty of a quest."""
        return 9999


class RedSword(Item):
    """Gives a bonus to experience during one fight."""

    def __init__(self) -> None:
        super().__init__(ItemName.RED_SWORD)

    def change_exp(self) -> int:
        return 5


class FrostStick(Item):
    """Scares the opponent away two times out of three."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__(ItemName.FROST_STICK)
        self._rng = rng

    def skip(self) -> bool:
        return roll(self._rng) % 3 != 0


class Quest(Item):
    """A vizier's quest of a given difficulty."""

    def __init__(self, difficulty: int) -> None:
        super().__init__(ItemName.QUEST)
        self._difficulty = difficulty

    def level(self) -> int:
        return self._difficulty


class Items:
    """The set of artefacts available to one player."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.sword = RedSword()
        self.stick = FrostStick(rng)
        self.quest1 = Quest(2)
        self.quest2 = Quest(4)