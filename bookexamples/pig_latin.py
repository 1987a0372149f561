"""Convert words and sentences to pig latin."""

import sys

PUNCTUATION = frozenset(".,?")
VOWELS = frozenset("aeiou")


def _starts_with_vowel(word):
    return bool(word) and word[0] in VOWELS


def _shuffle_letters(word):
    if _starts_with_vowel(word):
        return f"{word}hay"
    split = next((i for i, char in enumerate(word) if char in VOWELS), len(word))
    return f"{word[split:]}{word[:split]}ay"


def _handle_capital(is_capital, word):
    if is_capital:
        return word[:1].upper() + word[1:].lower()
    return word


def _handle_punctuation(word):
    index = next(
        (i for i, char in enumerate(word) if char in PUNCTUATION), None
    )
    if index is None:
        return word
    return word[:index] + word[index + 1:] + word[index]


def convert_word(word):
    """Return the pig latin form of a single word."""
    is_capital = word[:1].isupper()
    shuffled = _shuffle_letters(word)
    return _handle_punctuation(_handle_capital(is_capital, shuffled))


def convert_sentence(text):
    """Convert every whitespace-separated word and join them with spaces."""
    return " ".join(convert_word(word) for word in text.split())


def run(stdin=None, stdout=None):
    """Interactively convert sentences read from stdin."""
    stdin = sys.stdin if stdin is None else stdin
    print("Give a word/sentence and I will convert it to pig latin.", file=stdout)

    while True:
        print("Enter your word/sentence:", file=stdout)
        print(convert_sentence(stdin.readline()), file=stdout)
        print("Would you like to try another word/sentence? (y/n)", file=stdout)
        if not stdin.readline().startswith("y"):
            break