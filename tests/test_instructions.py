import pytest

from corevm.instructions import (
    add_node,
    exec_add,
    exec_aff,
    exec_fork,
    exec_ld,
    exec_ldi,
    exec_lfork,
    exec_live,
    exec_lld,
    exec_lldi,
    exec_null,
    exec_st,
    exec_sti,
    exec_sub,
    exec_zjump,
    execute,
)
from corevm.op import DIR_SIZE, IDX_MOD, IND_SIZE, MEM_SIZE, REG_SIZE, Opcode
from corevm.vm import Process, VirtualMachine


@pytest.fixture
def vm():
    machine = VirtualMachine()
    machine.champions[0].processes.append(Process(pc=0))
    return machine


def first(machine):
    return machine.champions[0].processes[0]


def test_null_steps_one_byte(vm):
    proc = first(vm)
    proc.pc = 10
    assert exec_null(vm, 0, proc) is True
    assert proc.pc == 11


def test_null_wraps_around(vm):
    proc = first(vm)
    proc.pc = MEM_SIZE - 1
    exec_null(vm, 0, proc)
    assert proc.pc == 0


def test_live_reports_and_counts(vm, capsys):
    champion = vm.champions[0]
    champion.id = 3
    champion.prog_name = "bob"
    proc = first(vm)
    exec_live(vm, 0, proc)
    assert capsys.readouterr().out == "The player 3 (bob) is alive.\n"
    assert vm.nb_live == 1
    assert proc.alive is True
    assert proc.pc == DIR_SIZE + 1


def test_zjump_negative_offset(vm):
    proc = first(vm)
    proc.pc = 100
    vm.arena[101:103] = b"\xff\xf6"
    exec_zjump(vm, 0, proc)
    assert proc.pc == 90


def test_zjump_positive_offset(vm):
    proc = first(vm)
    proc.pc = 100
    vm.insert_to_map(IND_SIZE, 20, 101)
    exec_zjump(vm, 0, proc)
    assert proc.pc == 120


@pytest.mark.parametrize("handler", [exec_add, exec_sub])
def test_three_registers_skip(vm, handler):
    proc = first(vm)
    proc.pc = 100
    vm.arena[101] = 0x54
    handler(vm, 0, proc)
    assert proc.pc == 100 + 3 * REG_SIZE + 2


def test_sub_ignores_coding_byte(vm):
    proc = first(vm)
    vm.arena[1] = 0xFF
    exec_sub(vm, 0, proc)
    assert proc.pc == 3 * REG_SIZE + 2


def test_ld_rejects_coding_byte(vm):
    proc = first(vm)
    vm.arena[0:2] = bytes([Opcode.LD, 0x54])
    assert exec_ld(vm, 0, proc) is False
    assert proc.pc == 0


def test_st_register_to_register(vm):
    proc = first(vm)
    vm.champions[0].reg[2] = 77
    vm.arena[0:4] = bytes([Opcode.ST, 0x50, 4, 2])
    assert exec_st(vm, 0, proc) is True
    assert vm.champions[0].reg[4] == 77
    assert proc.pc == 2 * REG_SIZE + 2


def test_st_register_to_memory(vm):
    proc = first(vm)
    vm.champions[0].reg[1] = 0x01020304
    vm.arena[0:7] = bytes([Opcode.ST, 0x70, 1, 0, 0, 0, 100])
    exec_st(vm, 0, proc)
    assert bytes(vm.arena[100:104]) == b"\x01\x02\x03\x04"
    assert proc.pc == REG_SIZE + IND_SIZE + 2


def test_st_rejects_coding_byte(vm):
    proc = first(vm)
    vm.arena[0:2] = bytes([Opcode.ST, 0x90])
    assert exec_st(vm, 0, proc) is False


def test_sti_stores_register(vm):
    proc = first(vm)
    vm.champions[0].reg[1] = 0xDEADBEEF
    vm.arena[0:7] = bytes([Opcode.STI, 0x68, 1, 0, 10, 0, 20])
    assert exec_sti(vm, 0, proc) is True
    assert vm.read_map(DIR_SIZE, 30) & 0xFFFFFFFF == 0xDEADBEEF
    assert proc.pc == REG_SIZE + 2 * IND_SIZE + 2


def test_sti_rejects_coding_byte(vm):
    proc = first(vm)
    vm.arena[0:2] = bytes([Opcode.STI, 0x40])
    assert exec_sti(vm, 0, proc) is False
    assert proc.pc == 0


def test_fork_adds_process(vm):
    proc = first(vm)
    vm.arena[0] = Opcode.FORK
    vm.insert_to_map(IND_SIZE, 32, 1)
    exec_fork(vm, 0, proc)
    processes = vm.champions[0].processes
    assert len(processes) == 2
    assert processes[1].pc == 32
    assert processes[1].cldwn == 0
    assert proc.pc == IND_SIZE + 1


def test_fork_limits_offset_lfork_does_not(vm):
    proc = first(vm)
    vm.insert_to_map(IND_SIZE, 1000, 1)
    short = add_node(vm, 0, proc, long_fork=False)
    far = add_node(vm, 0, proc, long_fork=True)
    assert short.pc == 1000 % IDX_MOD
    assert far.pc == 1000


def test_fork_negative_offset_truncates(vm):
    proc = first(vm)
    proc.pc = 1000
    vm.insert_to_map(IND_SIZE, -600, 1001)
    new = add_node(vm, 0, proc, long_fork=False)
    assert new.pc == 912


def test_lfork_moves_pc(vm):
    proc = first(vm)
    vm.insert_to_map(IND_SIZE, 7, 1)
    exec_lfork(vm, 0, proc)
    assert vm.champions[0].processes[-1].pc == 7
    assert proc.pc == IND_SIZE + 1


def test_aff_prints_register(vm, capsys):
    proc = first(vm)
    vm.champions[0].reg[2] = ord("A")
    vm.arena[0:3] = bytes([Opcode.AFF, 0x40, 2])
    assert exec_aff(vm, 0, proc) is True
    assert capsys.readouterr().out == "A"
    assert proc.pc == REG_SIZE + 2


def test_aff_rejects_coding_byte(vm, capsys):
    proc = first(vm)
    vm.arena[0:2] = bytes([Opcode.AFF, 0x80])
    assert exec_aff(vm, 0, proc) is False
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("handler", [exec_ldi, exec_lld, exec_lldi])
def test_unimplemented_ops_leave_pc(vm, handler):
    proc = first(vm)
    proc.pc = 40
    assert handler(vm, 0, proc) is True
    assert proc.pc == 40


def test_execute_dispatches_live(vm, capsys):
    proc = first(vm)
    vm.champions[0].prog_name = "zork"
    vm.arena[0] = Opcode.LIVE
    execute(vm, 0, proc)
    assert "(zork) is alive." in capsys.readouterr().out
    assert vm.nb_live == 1


def test_execute_unknown_byte_steps(vm):
    proc = first(vm)
    vm.arena[0] = 0x42
    execute(vm, 0, proc)
    assert proc.pc == 1