"""Warn through a messenger as a value approaches its quota."""

import math
from abc import ABC, abstractmethod


class Messenger(ABC):
    """Something that can deliver a text message."""

    @abstractmethod
    def send(self, message):
        """Deliver message."""


class LimitTracker:
    """Tracks a value against a maximum and reports quota warnings."""

    def __init__(self, messenger, maximum):
        self.messenger = messenger
        self.maximum = maximum
        self.value = 0

    def set_value(self, value):
        self.value = value
        if self.maximum:
            ratio = value / self.maximum
        else:
            ratio = math.inf if value else math.nan

        if ratio >= 1.0:
            self.messenger.send("Error: You are over your quota!")
        elif ratio >= 0.9:
            self.messenger.send(
                "Urgent warning: You've used up over 90% of your quota!"
            )
        elif ratio >= 0.75:
            self.messenger.send("Warning: You've used up over 75% of your quota!")