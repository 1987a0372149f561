"""Guess a secret number between 1 and 100."""

import random
import re
import sys
from enum import Enum

_UNSIGNED = re.compile(r"\+?[0-9]+")
U32_MAX = 2**32 - 1


class Outcome(Enum):
    TOO_SMALL = "Too small!"
    TOO_BIG = "Too big!"
    WIN = "You win"


def compare_guess(guess, secret):
    """Compare a guess with the secret number."""
    if guess < secret:
        return Outcome.TOO_SMALL
    if guess > secret:
        return Outcome.TOO_BIG
    return Outcome.WIN


def _parse_guess(text):
    text = text.strip()
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= U32_MAX else None


def run(stdin=None, stdout=None, secret=None):
    """Play one game. Returns True when won, False if input ran out."""
    stdin = sys.stdin if stdin is None else stdin
    if secret is None:
        secret = random.randint(1, 100)
    print("Guess the number!", file=stdout)

    while True:
        print("Please input your guess.", file=stdout)
        line = stdin.readline()
        if not line:
            return False

        guess = _parse_guess(line)
        if guess is None:
            print("Input must be a number.", file=stdout)
            continue

        print(f"You guessed: {guess}", file=stdout)
        outcome = compare_guess(guess, secret)
        print(outcome.value, file=stdout)
        if outcome is Outcome.WIN:
            return True