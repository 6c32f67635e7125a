"""Characters the player meets in the caves."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .interface import Interface, Message


class Disposition(enum.Enum):
    """How a character treats the player."""

    GOOD = enum.auto()
    EVIL = enum.auto()
    BOSS = enum.auto()
    VIZIER = enum.auto()


class Npc:
    """A character with damage, health and the experience it is worth."""

    def __init__(self, damage: int, health: int, exp: int, interface: Interface) -> None:
        self.damage = damage
        self.health = health
        self._exp = exp
        self.interface = interface

    def talk(self) -> None:
        """Say what the character says; a plain character says nothing."""

    def disposition(self) -> Disposition:
        return Disposition.GOOD

    def name(self) -> str:
        return ""

    def is_killed_by(self, damage: int) -> bool:
        """Whether ``damage`` is enough to kill this character."""
        return damage >= self.health

    def kills(self, health: int) -> bool:
        """Whether this character kills someone with ``health``."""
        return health <= self.damage

    def exp(self) -> int:
        return self._exp


class _NamedNpc(Npc):
    def __init__(
        self, damage: int, health: int, exp: int, interface: Interface, name: str
    ) -> None:
        super().__init__(damage, health, exp, interface)
        self._name = name

    def name(self) -> str:
        return self._name


class Goblin(_NamedNpc):
    """A hostile goblin."""

    def __init__(
        self, damage: int, health: int, exp: int, interface: Interface, name: str
    ) -> None:
        super().__init__(damage, health, exp, interface, name)

    def talk(self) -> None:
        self.interface.tell(Message.GOBLIN, name=self._name, damage=self.damage)

    def disposition(self) -> Disposition:
        return Disposition.EVIL


class Citizen(_NamedNpc):
    """A friendly cave dweller who shares experience."""

    def __init__(
        self, damage: int, health: int, exp: int, interface: Interface, name: str
    ) -> None:
        super().__init__(damage, health, exp, interface, name)

    def talk(self) -> None:
        self.interface.tell(Message.CITIZEN, name=self._name, exp=self._exp)

    def disposition(self) -> Disposition:
        return Disposition.GOOD


class Prisoner(_NamedNpc):
    """A lost traveller who asks the player to fight a goblin."""

    def __init__(
        self, damage: int, health: int, exp: int, interface: Interface, name: str
    ) -> None:
        super().__init__(damage, health, exp, interface, name)

    def talk(self) -> None:
        self.interface.tell(
            Message.PRISONER, name=self._name, damage=self.damage, exp=self._exp
        )

    def disposition(self) -> Disposition:
        return Disposition.EVIL


class Vizier(_NamedNpc):
    """A vizier who offers a quest."""

    def __init__(self, exp: int, interface: Interface, name: str) -> None:
        super().__init__(0, 0, exp, interface, name)

    def talk(self) -> None:
        self.interface.tell(Message.VIZIER, name=self._name)

    def disposition(self) -> Disposition:
        return Disposition.VIZIER


class Boss(Npc):
    """The water spirit who asks riddles."""

    def __init__(self, interface: Interface) -> None:
        super().__init__(0, 0, 10, interface)

    def talk(self) -> None:
        self.interface.tell(Message.BOSS)

    def disposition(self) -> Disposition:
        return Disposition.BOSS


@dataclass(frozen=True)
class Mobs:
    """The full cast of one game."""

    ura1: Goblin
    ura2: Goblin
    egor1: Citizen
    egor2: Citizen
    ars1: Prisoner
    ars2: Prisoner
    lola1: Vizier
    boss1: Boss
    pasha1: Goblin
    pasha2: Goblin
    null1: Citizen
    null2: Citizen
    tan1: Prisoner
    tan2: Prisoner
    lola2: Vizier

    @classmethod
    def create(cls, interface: Interface) -> "Mobs":
        return cls(
            ura1=Goblin(1, 2, 2, interface, "Юра"),
            ura2=Goblin(3, 4, 4, interface, "Супер Юра"),
            egor1=Citizen(1, 2, 2, interface, "Егор"),
            egor2=Citizen(1, 2, 3, interface, "Егор"),
            ars1=Prisoner(1, 2, 2, interface, "Арслан"),
            ars2=Prisoner(5, 4, 5, interface, "Супер Арслан"),
            lola1=Vizier(2, interface, "Лола"),
            boss1=Boss(interface),
            pasha1=Goblin(3, 2, 3, interface, "Паша"),
            pasha2=Goblin(3, 10, 5, interface, "Супер Паша"),
            null1=Citizen(1, 2, 1, interface, "Жадина"),
            null2=Citizen(1, 2, 1, interface, "Жадина"),
            tan1=Prisoner(11, 2, 2, interface, "Злой Таша"),
            tan2=Prisoner(5, 20, 10, interface, "Мирный Таша"),
            lola2=Vizier(4, interface, "Лола"),
        )