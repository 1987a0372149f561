"""Points and lengths that add, and a couple of text wrappers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __str__(self):
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class Meters:
    value: int


@dataclass(frozen=True)
class Millimeters:
    value: int

    def __add__(self, other):
        """Millimeters plus Meters, in millimeters."""
        if not isinstance(other, Meters):
            return NotImplemented
        return Millimeters(self.value + other.value * 1000)


@dataclass(frozen=True)
class Wrapper:
    items: tuple

    def __init__(self, items):
        object.__setattr__(self, "items", tuple(items))

    def __str__(self):
        return f"[{', '.join(self.items)}]"


def outline(value):
    """The text form of value framed in a box of asterisks."""
    text = str(value)
    width = len(text)
    border = "*" * (width + 4)
    padding = f"*{' ' * (width + 2)}*"
    return "\n".join([border, padding, f"* {text} *", padding, border])