"""Command line entry point of the machine."""

from __future__ import annotations

import sys

from .arena import set_arena
from .checks import error_handling
from .loop import corewar_loop
from .op import EXIT_SUCCESS, CorewarError
from .parsing import file_parsing
from .vm import VirtualMachine

_PROGRAM = "corewar"


def browse_files_actions(argv, max_rounds=None):
    """Load the champions named in argv and run the machine."""
    vm = VirtualMachine()
    file_parsing(argv, vm)
    try:
        set_arena(vm)
    except ValueError as exc:
        raise CorewarError(str(exc)) from exc
    corewar_loop(vm, max_rounds)
    return EXIT_SUCCESS


def main(argv=None):
    """Run the machine with the given arguments (program name excluded)."""
    args = sys.argv[1:] if argv is None else list(argv)
    full = [_PROGRAM, *args]
    try:
        status = error_handling(full)
        if status != EXIT_SUCCESS:
            return status
        return browse_files_actions(full)
    except CorewarError as error:
        if error.message:
            print(error.message, file=sys.stderr)
        return error.exit_code


if __name__ == "__main__":
    sys.exit(main())