"""A list of integers that keeps its average up to date."""


class AveragedCollection:
    """Integers with a cached average, updated on every change."""

    def __init__(self, values=()):
        self._list = list(values)
        self._average = 0.0
        if self._list:
            self._update_average()

    def add(self, value):
        self._list.append(value)
        self._update_average()

    def remove(self):
        """Remove and return the last value, or None when empty."""
        if not self._list:
            return None
        value = self._list.pop()
        self._update_average()
        return value

    def average(self):
        return self._average

    def __len__(self):
        return len(self._list)

    def _update_average(self):
        if self._list:
            self._average = sum(self._list) / len(self._list)
        else:
            self._average = float("nan")