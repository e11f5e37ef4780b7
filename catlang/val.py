"""Runtime values of the cat language. Values are immutable and are copied freely between environments."""

from dataclasses import dataclass


class Val:
    """Superclass of every runtime value."""


@dataclass(frozen=True)
class Number(Val):
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Bool(Val):
    value: bool

    def __str__(self):
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Unit(Val):
    """Result of statements and blocks with no meaningful trailing value."""

    def __str__(self):
        return "Unit"
