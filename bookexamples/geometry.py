"""Rectangles, a bounded guess and a few small helpers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    width: int
    height: int

    def area(self):
        return self.width * self.height

    def can_hold(self, other):
        """True when other fits strictly inside this rectangle."""
        return self.width > other.width and self.height > other.height

    @classmethod
    def square(cls, size):
        return cls(width=size, height=size)


class Guess:
    """A guess between 1 and 100 inclusive."""

    def __init__(self, value):
        if value < 1:
            raise ValueError(
                f"Guess value must be greater than or equal to 1, got {value}."
            )
        if value > 100:
            raise ValueError(
                f"Guess value must be less than or equal to 100, got {value}."
            )
        self.value = value


def add_two(a):
    return a + 2


def greeting(name):
    return f"Hello {name}!"