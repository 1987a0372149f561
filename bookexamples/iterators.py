"""A counting iterator and filtering shoes by size."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Shoe:
    size: int
    style: str


class Counter:
    """Yields 1 through 5."""

    def __init__(self):
        self.count = 0

    def __iter__(self):
        return self

    def __next__(self):
        self.count += 1
        if self.count < 6:
            return self.count
        raise StopIteration


def shoes_in_my_size(shoes, shoe_size):
    """The shoes whose size matches shoe_size, in order."""
    return [shoe for shoe in shoes if shoe.size == shoe_size]