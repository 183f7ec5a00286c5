"""Placing champions in the arena and showing its content."""

from __future__ import annotations

import sys

from .op import CYCLE_TO_DIE, MEM_SIZE
from .textutils import mini_format
from .vm import Process

_DUMP_CYCLE = 1000


def set_arena(vm):
    """Spread the champions' code evenly over the arena and reset the counters."""
    nb_champ = vm.info.nb_indexes
    if nb_champ == 0:
        raise ValueError("no champion to place")
    gap = MEM_SIZE // nb_champ
    current = 0
    elem = 0
    while elem < MEM_SIZE:
        if elem % gap == 0 and current < nb_champ:
            champion = vm.champions[current]
            if champion.process is None:
                champion.processes.append(Process())
            champion.process.pc = elem
            champion.process.alive = False
            for offset, byte in enumerate(champion.code[: champion.prog_size]):
                vm.arena[(elem + offset) % MEM_SIZE] = byte
            elem += champion.prog_size
            current += 1
            continue
        vm.arena[elem] = 0
        elem += 1
    vm.nb_robots = current
    vm.cycle = CYCLE_TO_DIE
    vm.cur_cycle = 0
    vm.dump_cycle = _DUMP_CYCLE
    vm.nb_live = 0


def format_arena(vm):
    """Render the arena as coloured hexadecimal, 32 bytes per line."""
    parts = []
    for index, byte in enumerate(vm.arena[:MEM_SIZE]):
        if index % 32 == 0:
            parts.append("\n")
        colour = "\033[31;2m" if byte == 0 else "\033[36;1m"
        parts.append(mini_format(colour + "%X \033[0m", byte))
    parts.append("\n")
    return "".join(parts)


def display_arena(vm):
    """Write the rendered arena to standard output."""
    sys.stdout.write(format_arena(vm))