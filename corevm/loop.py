"""The main cycle loop of the machine."""

from __future__ import annotations

from itertools import count

from .arena import display_arena
from .instructions import execute
from .op import CYCLE_DELTA, NBR_LIVE, op_info


def go_into_ins(vm, champ_index, process):
    """Run the instruction under the process."""
    execute(vm, champ_index, process)


def loop_into_process(vm, champ_index):
    """Give every process of a champion one cycle, including ones forked meanwhile."""
    for process in vm.champions[champ_index].processes:
        if process.cldwn <= 0:
            display_arena(vm)
            go_into_ins(vm, champ_index, process)
            process.cldwn = op_info(vm.arena[process.pc]).nbr_cycles
        else:
            process.cldwn -= 1


def loop_into_heroes(vm):
    """Run one cycle for every living champion."""
    for index in range(vm.info.nb_indexes):
        display_arena(vm)
        if vm.champions[index].is_alive:
            loop_into_process(vm, index)
    return vm


def process_cycles(vm):
    """Shorten the cycle after enough lives and advance the cycle counter."""
    if vm.nb_live == NBR_LIVE:
        vm.nb_live = 0
        vm.cycle -= CYCLE_DELTA
    if vm.cur_cycle >= vm.cycle:
        vm.cur_cycle = 0
    else:
        vm.cur_cycle += 1


def corewar_loop(vm, max_rounds=None):
    """Run rounds forever, or max_rounds of them; return how many ran."""
    rounds = range(max_rounds) if max_rounds is not None else count()
    done = 0
    for _ in rounds:
        loop_into_heroes(vm)
        process_cycles(vm)
        vm.info.start_dump_flag += 1
        done += 1
    return done