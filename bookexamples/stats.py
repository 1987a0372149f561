"""Mean, median and mode of a list of integers."""

import re
import sys
from collections import Counter
from operator import itemgetter

_INTEGER = re.compile(r"[+-]?[0-9]+")
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1


def _parse_i32(text):
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    return value if I32_MIN <= value <= I32_MAX else None


def parse_numbers(text):
    """Parse a comma-separated list, dropping entries that are not 32-bit integers."""
    parsed = (_parse_i32(part.strip()) for part in text.split(","))
    return [number for number in parsed if number is not None]


def get_mean(numbers):
    """Integer mean, truncated toward zero."""
    if not numbers:
        raise ValueError("cannot take the mean of an empty list")
    total = sum(numbers)
    quotient = abs(total) // len(numbers)
    return quotient if total >= 0 else -quotient


def get_median(numbers):
    """Median as the program has always computed it."""
    if not numbers:
        raise ValueError("cannot take the median of an empty list")
    if len(numbers) == 1:
        return numbers[0]
    ordered = sorted(numbers)
    middle = (len(numbers) + 1) // 2 - 1
    if middle % 2 == 0:
        return ordered[middle]
    return get_mean(ordered[middle:middle + 2])


def get_mode(numbers):
    """The first most frequent value, or None when no value repeats."""
    counts = Counter(numbers)
    if not counts:
        return None
    value, count = max(counts.items(), key=itemgetter(1))
    return value if count > 1 else None


def run(stdin=None, stdout=None):
    """Interactively report statistics for lists read from stdin."""
    stdin = sys.stdin if stdin is None else stdin
    print("Give a list of numbers, separated by `,` (comma).", file=stdout)
    print("I will give you back the mean, median, and mode.", file=stdout)

    while True:
        print("Enter your list:", file=stdout)
        line = stdin.readline()
        if not line:
            return
        if not line.strip():
            print("Nice try, but you must enter a list.", file=stdout)
            continue

        numbers = parse_numbers(line)
        mean = get_mean(numbers)
        median = get_median(numbers)
        mode = get_mode(numbers)

        print(f"The mean is: {mean}", file=stdout)
        print(f"The median is: {median}", file=stdout)
        print(f"The mode is: {'None' if mode is None else mode}", file=stdout)

        print("Would you like to try another list? (y/n)", file=stdout)
        if not stdin.readline().startswith("y"):
            return