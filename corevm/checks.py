"""Command line checks, the help screen and champion file checks."""

from __future__ import annotations

import os
import sys

from .op import EXIT_HELP, EXIT_SUCCESS, PATH_COREWAR_H, CorewarError, ErrorMessage

_ONE_ROBOT = 1
_FOUR_ROBOT = 4
_ELF_HEADER_SIZE = 64
_MAGIC = bytes((0x00, 0xEA, 0x83, 0xF3))


def check_nb_param(count):
    """Return count when the number of champions is accepted; raise otherwise."""
    if count == _ONE_ROBOT:
        raise CorewarError(ErrorMessage.FEW_WARRIOR)
    if count > _FOUR_ROBOT:
        raise CorewarError(ErrorMessage.MANY_WARRIOR)
    return count


def _char_at(text, index):
    return text[index] if index < len(text) else ""


def check_files(argv):
    """Reject arguments with a dot followed by nothing like 'cor'; return those checked."""
    arguments = list(argv[1:])
    for arg in arguments:
        for k, char in enumerate(arg):
            if (
                char == "."
                and _char_at(arg, k + 1) != "c"
                and _char_at(arg, k + 2) != "o"
                and _char_at(arg, k + 3) != "r"
            ):
                raise CorewarError(ErrorMessage.DOT_COR_FILE)
    return arguments


def check_file_errors(path):
    """Tell whether a file opens and starts with the champion magic number."""
    try:
        with open(path, "rb") as handle:
            header = handle.read(_ELF_HEADER_SIZE)
    except OSError:
        return False
    return len(header) == _ELF_HEADER_SIZE and header[:4] == _MAGIC


def get_file_size(path):
    """Size of a file in bytes, or 0 when it cannot be examined."""
    try:
        return os.stat(path).st_size
    except OSError:
        return 0


def display_h(argv, help_path=None, out=None):
    """Print the help text when the only argument is -h; return the exit status."""
    if len(argv) != 2 or argv[1] != "-h":
        return EXIT_SUCCESS
    path = PATH_COREWAR_H if help_path is None else help_path
    stream = sys.stdout if out is None else out
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        raise CorewarError(f"cannot open help file {path}") from exc
    stream.write(text)
    stream.write("\n")
    return EXIT_HELP


def error_handling(argv, help_path=None, out=None):
    """Run the checks made before the machine starts; return the exit status."""
    return display_h(argv, help_path, out)