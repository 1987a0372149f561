"""Memoise an expensive one-argument calculation."""

import time


class Cacher:
    """Call a calculation at most once per distinct argument."""

    def __init__(self, calculation):
        self._calculation = calculation
        self._values = {}

    def value(self, arg):
        """The calculation's result for arg, computed on first request only."""
        if arg not in self._values:
            self._values[arg] = self._calculation(arg)
        return self._values[arg]


def _simulated_expensive_calculation(intensity):
    print("Calculating slowly...")
    time.sleep(2)
    return intensity


def generate_workout(intensity, random_number, calculation=None):
    """Print and return the workout plan for the given intensity."""
    if calculation is None:
        calculation = _simulated_expensive_calculation
    expensive_result = Cacher(calculation)

    if intensity < 25:
        lines = [
            f"Today, do {expensive_result.value(intensity)} pushups!",
            f"Next, do {expensive_result.value(intensity)} situps!",
        ]
    elif random_number == 3:
        lines = ["Take a break today! Remember to stay hydrated!"]
    else:
        lines = [f"Today, run for {expensive_result.value(intensity)} minutes!"]

    for line in lines:
        print(line)
    return lines