"""An interactive directory of employees grouped by department."""

import re
import sys

_INDEX = re.compile(r"\+?[0-9]+")


class CommandError(ValueError):
    """A directory command was malformed."""


class Directory:
    """Employees grouped by department, in the order departments were added."""

    def __init__(self):
        self._departments = {}

    def add_employee(self, employee, department):
        if not employee:
            raise CommandError("Employee name cannot be empty.")
        if not department:
            raise CommandError("Department name cannot be empty.")
        self._departments.setdefault(department, []).append(employee)

    def departments(self):
        """Department names in sorted order."""
        return sorted(self._departments)

    def employees(self, department):
        """Sorted employees of a department; KeyError if it is unknown."""
        return sorted(self._departments[department])

    def __iter__(self):
        return iter(self._departments)

    def __len__(self):
        return len(self._departments)


def parse_add_command(text):
    """Parse 'Add <name> to <department>' into (name, department)."""
    match text.split():
        case ["Add", employee, "to", department]:
            return employee, department
        case _:
            raise CommandError("Not enough or correct arguments!")


def _show_help(stdout):
    print(file=stdout)
    print("a\tAdd an employee", file=stdout)
    print("d\tList employees in a department", file=stdout)
    print("c\tList employees in the company", file=stdout)
    print("q\tQuit the program", file=stdout)


def _print_department(directory, department, stdout):
    print(f"\nEmployees in {department}:", file=stdout)
    for employee in directory.employees(department):
        print(f"\t{employee}", file=stdout)


def _add_employee(directory, stdin, stdout):
    print("Use the following format: Add <name> to <department>", file=stdout)
    print("E.g. Add Neil to Engineering", file=stdout)
    try:
        directory.add_employee(*parse_add_command(stdin.readline()))
    except CommandError as error:
        print(error, file=stdout)


def _list_department(directory, stdin, stdout):
    print("Which department would you like to see?", file=stdout)
    departments = directory.departments()
    for number, department in enumerate(departments, start=1):
        print(f"\t{number}. {department}", file=stdout)

    answer = stdin.readline().strip()
    choice = int(answer) if _INDEX.fullmatch(answer) else 0
    if 1 <= choice <= len(departments):
        _print_department(directory, departments[choice - 1], stdout)
    else:
        print("Department not found.", file=stdout)


def run(stdin=None, stdout=None):
    """Run the interactive directory until 'q' or end of input."""
    stdin = sys.stdin if stdin is None else stdin
    directory = Directory()
    print("Create your company directory", file=stdout)

    while True:
        _show_help(stdout)
        print("Enter your selection:", file=stdout)
        line = stdin.readline()
        if not line:
            return directory
        match line[0]:
            case "a":
                _add_employee(directory, stdin, stdout)
            case "c":
                for department in directory:
                    _print_department(directory, department, stdout)
            case "d":
                _list_department(directory, stdin, stdout)
            case "q":
                return directory