"""Small worked example programs and the library code behind them."""

__version__ = "0.1.0"

__all__ = [
    "averaged",
    "blog",
    "caching",
    "cli",
    "company_directory",
    "geometry",
    "guessing_game",
    "iterators",
    "limit_tracker",
    "minigrep",
    "operators",
    "pig_latin",
    "stats",
    "thread_pool",
    "web_server",
]