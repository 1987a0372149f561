"""Command line entry point choosing one of the interactive programs."""

import sys
from enum import Enum

from bookexamples import (
    company_directory,
    guessing_game,
    minigrep,
    pig_latin,
    stats,
    web_server,
)


class Command(Enum):
    COMPANY_DIRECTORY = "company-directory"
    DEFAULT = "default"
    GAME = "game"
    MEAN_MEDIAN_MODE = "mean-median-mode"
    MINIGREP = "minigrep"
    PIG_LATIN = "pig-latin"
    WEB_SERVER = "web-server"


def get_command(argv=None):
    """The command named by the first argument, DEFAULT when absent or unknown."""
    args = sys.argv if argv is None else list(argv)
    if len(args) < 2:
        return Command.DEFAULT
    try:
        return Command(args[1])
    except ValueError:
        return Command.DEFAULT


def _show_usage():
    print("Hello, world!")
    print("Available commands:")
    for command in Command:
        if command is not Command.DEFAULT:
            print(f"\t{command.value}")


def main(argv=None):
    """Run the selected program; returns the exit status."""
    args = sys.argv if argv is None else list(argv)
    match get_command(args):
        case Command.COMPANY_DIRECTORY:
            company_directory.run()
        case Command.GAME:
            guessing_game.run()
        case Command.MEAN_MEDIAN_MODE:
            stats.run()
        case Command.MINIGREP:
            return minigrep.main(args)
        case Command.PIG_LATIN:
            pig_latin.run()
        case Command.WEB_SERVER:
            web_server.serve()
        case Command.DEFAULT:
            _show_usage()
    return 0