"""Print the lines of a file that contain a query string."""

import os
import sys
from dataclasses import dataclass


class ConfigError(ValueError):
    """The command line did not describe a search."""


@dataclass(frozen=True)
class Config:
    query: str
    filename: str
    case_sensitive: bool = True

    @classmethod
    def from_args(cls, args):
        """Build from [program, command, query, filename]; CASE_INSENSITIVE env turns case off."""
        args = list(args)
        if len(args) < 4:
            raise ConfigError("not enough arguments")
        return cls(
            query=args[2],
            filename=args[3],
            case_sensitive="CASE_INSENSITIVE" not in os.environ,
        )


def _lines(contents):
    parts = contents.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def search(query, contents):
    """Lines of contents that contain query."""
    return [line for line in _lines(contents) if query in line]


def search_case_insensitive(query, contents):
    """Lines of contents that contain query, ignoring case."""
    query = query.lower()
    return [line for line in _lines(contents) if query in line.lower()]


def run(config, stdout=None):
    """Search the configured file, print and return the matching lines."""
    with open(config.filename, encoding="utf-8") as handle:
        contents = handle.read()

    finder = search if config.case_sensitive else search_case_insensitive
    results = finder(config.query, contents)
    for line in results:
        print(line, file=stdout)
    return results


def main(argv=None):
    """Command entry point; returns the exit status."""
    args = sys.argv if argv is None else argv
    try:
        config = Config.from_args(args)
    except ConfigError as error:
        print(f"Problem parsing arguments: {error}", file=sys.stderr)
        return 1

    try:
        run(config)
    except OSError as error:
        print(f"Application error: {error}", file=sys.stderr)
        return 1
    return 0