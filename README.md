# bookexamples

Small, self-contained example programs and the library code behind them:

- **pig latin** conversion of words and sentences
- **mean, median and mode** of a list of integers
- an interactive **company directory** of employees by department
- a number **guessing game**
- **minigrep**, a line search tool
- a memoising `Cacher`, a counting iterator, a quota tracker, an averaged collection
- a blog post workflow (draft, review, publish)
- operator overloading examples (points, millimetres plus metres)
- a fixed-size **thread pool** and a minimal HTTP server on top of it

Only the standard library is used.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `bookexamples` command picks a program by name:

```
bookexamples game
bookexamples pig-latin
bookexamples mean-median-mode
bookexamples company-directory
bookexamples minigrep QUERY FILE
bookexamples web-server
```

With no name, or an unknown name, it prints `Hello, world!` followed by the list of available command names.

- `game` picks a secret number from 1 to 100 and reads guesses until one is right, answering `Too small!`, `Too big!` or `You win`. Input that is not a non-negative whole number is rejected.
- `pig-latin` converts each line it reads, word by word, and asks whether to go again (`y` continues).
- `mean-median-mode` reads a comma-separated list of integers and prints its integer mean (truncated toward zero), median and mode (`None` when no value repeats). Entries that are not 32-bit integers are dropped; a line with no valid integers at all ends the program with a `ValueError`.
- `company-directory` offers `a` (add, as `Add <name> to <department>`), `d` (list one department, chosen by number), `c` (list every department) and `q` (quit). Employees are listed sorted.
- `minigrep QUERY FILE` prints every line of `FILE` that contains `QUERY` and exits with status 1 if the arguments are missing or the file cannot be read. Set the `CASE_INSENSITIVE` environment variable to any value to ignore case.
- `web-server` listens on `127.0.0.1:7878` with four worker threads. A request for `/` is answered with `hello.html`, `/sleep` with the same page after a five-second pause, and anything else with `404.html` and status `404 NOT FOUND`. Stop it with Ctrl-C.

The interactive programs stop when their input runs out.

## Library use

```python
from bookexamples.pig_latin import convert_sentence
from bookexamples.stats import get_mean, get_median, get_mode, parse_numbers
from bookexamples.minigrep import Config, search, search_case_insensitive

convert_sentence("Gloves, please.")                    # "Ovesglay, easeplay."
get_median([4, 2, 5, 1])                               # 3
get_mode([1, 2, 2, 3, 3, 4])                           # 2
search_case_insensitive("rUsT", "Rust:\nTrust me.")    # ["Rust:", "Trust me."]
```

`Config.from_args(args)` takes `[program, command, query, filename]` and raises `ConfigError("not enough arguments")` when fewer are given.

```python
from bookexamples.company_directory import Directory, parse_add_command

directory = Directory()
directory.add_employee(*parse_add_command("Add Sally to Engineering"))
directory.departments()                 # ["Engineering"]
directory.employees("Engineering")      # ["Sally"]
```

`parse_add_command` and `Directory.add_employee` raise `CommandError` on malformed input.

```python
from bookexamples.blog import Post, DraftPost

post = Post()               # changes state in place, needs two approvals
post.add_text("I ate a salad for lunch today")
post.request_review()
post.approve()
post.approve()
post.content()              # "I ate a salad for lunch today"

pending = DraftPost("hello").request_review()
published = pending.approve().approve()   # PendingReviewPost, then PublishedPost
published.content()         # "hello"
```

Other modules:

- `caching.Cacher(calculation).value(arg)` calls `calculation` once per distinct argument; `generate_workout(intensity, random_number, calculation=None)` prints and returns a workout plan.
- `iterators.Counter` yields 1 through 5; `shoes_in_my_size(shoes, size)` filters `Shoe` objects.
- `limit_tracker.LimitTracker(messenger, maximum).set_value(value)` sends a warning through a `Messenger` at 75%, 90% and 100% of the maximum.
- `averaged.AveragedCollection` keeps the average of its integers up to date through `add` and `remove`.
- `geometry.Rectangle` has `area`, `can_hold` and `Rectangle.square(size)`; `Guess(value)` raises `ValueError` outside 1 to 100; `add_two` and `greeting` are small helpers.
- `operators.Point` supports `+`, `Millimeters + Meters` gives `Millimeters`, `Wrapper` prints as `[a, b]`, and `outline(value)` frames the text of a value in asterisks.

```python
from bookexamples.thread_pool import ThreadPool

with ThreadPool(4) as pool:
    pool.execute(lambda: print("hello from a worker"))
```

Leaving the `with` block lets queued jobs finish and joins every worker. `web_server.build_response(request, root)` returns the response bytes for a raw request, and `web_server.serve(host, port, root, workers)` runs the server.

## What it does not do

- The package ships no HTML pages. The web server reads `hello.html` and `404.html` from the directory it is given (the current directory for `bookexamples web-server`); if a page is missing, that connection is closed without a response and the error is printed.
- The web server understands only the exact request lines `GET / HTTP/1.1` and `GET /sleep HTTP/1.1`; it sends no headers and keeps no connections open.
- `bookexamples` with no command only lists the commands; it runs no examples of its own.
- Nothing is stored: the company directory lives only as long as the program runs.