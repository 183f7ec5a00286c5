"""Execution of the machine instructions for one process."""

from __future__ import annotations

import sys

from .codec import check_cb, get_pos, move_pc, read_coding_byte
from .op import CB_DIR, CB_IDT, CB_IND, DIR_SIZE, IDX_MOD, IND_SIZE, MEM_SIZE, REG_NUMBER, REG_SIZE
from .textutils import mini_format


def _wrap(position):
    return position % MEM_SIZE


def _byte(vm, position):
    return vm.arena[_wrap(position)]


def _c_mod(value, modulus):
    """Remainder that keeps the sign of value, truncating toward zero."""
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def _reg(champion, number):
    """Register content; numbers outside the register file read as zero."""
    if 0 <= number < REG_NUMBER:
        return champion.reg[number]
    return 0


def _set_reg(champion, number, value):
    """Store into a register; numbers outside the register file are ignored."""
    if 0 <= number < REG_NUMBER:
        champion.reg[number] = value


def _coding(vm, process):
    return read_coding_byte(_byte(vm, process.pc + 1))


def _matches(vm, process, *accepted):
    received = _byte(vm, process.pc + 1)
    return any(check_cb(received, expected) for expected in accepted)


def _stay(process):
    """Keep the process on its current instruction, inside the arena."""
    process.pc = _wrap(process.pc)
    return True


def add_node(vm, champ_index, process, long_fork):
    """Append a new process to the champion and return it.

    The jump offset is read after the champion's first process; a plain
    fork limits it with IDX_MOD, a long fork does not.
    """
    champion = vm.champions[champ_index]
    first = champion.process if champion.process is not None else process
    offset = vm.read_map(IND_SIZE, first.pc + 1)
    if not long_fork:
        offset = _c_mod(offset, IDX_MOD)
    new = type(process)(pc=_wrap(process.pc + offset), cldwn=0)
    champion.processes.append(new)
    return new


def exec_null(vm, champ_index, process):
    """Step over one byte."""
    process.pc = _wrap(process.pc + 1)
    return True


def exec_live(vm, champ_index, process):
    """Report the champion alive and count the live."""
    champion = vm.champions[champ_index]
    sys.stdout.write(
        mini_format("The player %i (%s) is alive.\n", champion.id, champion.prog_name)
    )
    vm.nb_live += 1
    if champion.process is not None:
        champion.process.alive = True
    process.pc = _wrap(move_pc(None, process.pc, DIR_SIZE))
    return True


def exec_ld(vm, champ_index, process):
    """Load a value into a register; False when the coding byte is not accepted."""
    if not _matches(vm, process, 0xD0, 0x90):
        return False
    champion = vm.champions[champ_index]
    args = _coding(vm, process)
    pc = process.pc
    if args[0] == CB_IND:
        source = vm.read_map(REG_SIZE, pc + 1)
        target = vm.read_map(REG_SIZE, pc + IND_SIZE + REG_SIZE)
        _set_reg(champion, target, _reg(champion, source))
    else:
        ind = vm.read_map(DIR_SIZE, pc + 2)
        target = vm.read_map(REG_SIZE, pc + IND_SIZE + DIR_SIZE)
        retrieve_at = pc + _c_mod(ind, IDX_MOD)
        _set_reg(champion, target, vm.read_map(REG_SIZE, retrieve_at))
    process.pc = _wrap(move_pc(args, pc, 0))
    return True


def exec_st(vm, champ_index, process):
    """Store a register into memory or another register."""
    if not _matches(vm, process, 0x50, 0x70):
        return False
    champion = vm.champions[champ_index]
    args = _coding(vm, process)
    pc = process.pc
    if args[1] == CB_IND:
        source = vm.read_map(REG_SIZE, pc + 1 + REG_SIZE)
        ind = vm.read_map(DIR_SIZE, pc + IND_SIZE + REG_SIZE)
        store_at = pc + _c_mod(ind, IDX_MOD)
        vm.insert_to_map(DIR_SIZE, _reg(champion, source), _wrap(store_at))
    else:
        target = vm.read_map(REG_SIZE, pc + 2)
        source = vm.read_map(REG_SIZE, pc + IND_SIZE + REG_SIZE)
        _set_reg(champion, target, _reg(champion, source))
    process.pc = _wrap(move_pc(args, pc, 0))
    return True


def _skip_coded(vm, process, coding_byte=None):
    cb = _byte(vm, process.pc + 1) if coding_byte is None else coding_byte
    process.pc = _wrap(move_pc(read_coding_byte(cb), process.pc, 0))
    return True


def exec_add(vm, champ_index, process):
    """Step over the instruction and its coded arguments."""
    return _skip_coded(vm, process)


def exec_sub(vm, champ_index, process):
    """Step over the instruction as if it held three registers."""
    return _skip_coded(vm, process, 0x54)


def exec_and(vm, champ_index, process):
    """Step over the instruction and its coded arguments."""
    return _skip_coded(vm, process)


def exec_or(vm, champ_index, process):
    """Step over the instruction and its coded arguments."""
    return _skip_coded(vm, process)


def exec_xor(vm, champ_index, process):
    """Step over the instruction and its coded arguments."""
    return _skip_coded(vm, process)


def exec_zjump(vm, champ_index, process):
    """Jump by the signed two-byte offset that follows."""
    offset = vm.read_map(IND_SIZE, process.pc + 1)
    process.pc = _wrap(process.pc + offset)
    return True


def exec_ldi(vm, champ_index, process):
    """Keep the process on this instruction."""
    return _stay(process)


def exec_sti(vm, champ_index, process):
    """Store a register at an address built from the following bytes."""
    if not _matches(vm, process, 0x68, 0x54):
        return False
    champion = vm.champions[champ_index]
    args = list(_coding(vm, process))
    pc = process.pc
    offset = _byte(vm, get_pos(pc, args, 2)) + _byte(vm, get_pos(pc, args, 3))
    store_at = pc + offset % IDX_MOD
    source = _byte(vm, get_pos(pc, args, 1))
    vm.insert_to_map(DIR_SIZE, _reg(champion, source), _wrap(store_at))
    args = [CB_IDT if kind == CB_DIR else kind for kind in args]
    process.pc = _wrap(move_pc(args, pc, 0))
    return True


def exec_fork(vm, champ_index, process):
    """Create a process at a nearby address."""
    add_node(vm, champ_index, process, long_fork=False)
    process.pc = _wrap(move_pc(None, process.pc, IND_SIZE))
    return True


def exec_lld(vm, champ_index, process):
    """Keep the process on this instruction."""
    return _stay(process)


def exec_lldi(vm, champ_index, process):
    """Keep the process on this instruction."""
    return _stay(process)


def exec_lfork(vm, champ_index, process):
    """Create a process at any address."""
    add_node(vm, champ_index, process, long_fork=True)
    process.pc = _wrap(move_pc(None, process.pc, IND_SIZE))
    return True


def exec_aff(vm, champ_index, process):
    """Print the low byte of a register as a character."""
    if not _matches(vm, process, 0x40):
        return False
    champion = vm.champions[champ_index]
    args = _coding(vm, process)
    number = vm.read_map(REG_SIZE, process.pc + 1 + REG_SIZE)
    sys.stdout.write(mini_format("%c", _reg(champion, number)))
    process.pc = _wrap(move_pc(args, process.pc, 0))
    return True


_INSTRUCTIONS = (
    exec_null,
    exec_live,
    exec_ld,
    exec_st,
    exec_add,
    exec_sub,
    exec_and,
    exec_or,
    exec_xor,
    exec_zjump,
    exec_ldi,
    exec_sti,
    exec_fork,
    exec_lld,
    exec_lldi,
    exec_lfork,
    exec_aff,
)


def execute(vm, champ_index, process):
    """Run the instruction under the process; unknown bytes are stepped over."""
    code = _byte(vm, process.pc)
    handler = _INSTRUCTIONS[code] if code < len(_INSTRUCTIONS) else exec_null
    return handler(vm, champ_index, process)