"""State of the virtual machine: processes, champions and the arena."""

from __future__ import annotations

from dataclasses import dataclass, field

from .codec import compose_val, decompose_val
from .op import DIR_SIZE, IND_SIZE, MEM_SIZE, NB_CHAMP, REG_NUMBER, REG_SIZE

_WIDTHS = (REG_SIZE, IND_SIZE, DIR_SIZE)


@dataclass
class Process:
    """One execution thread of a champion."""

    pc: int = 0
    cldwn: int = 0
    alive: bool = False


@dataclass
class Champion:
    """A loaded program with its registers and processes."""

    carry: int = 0
    reg: list[int] = field(default_factory=lambda: [0] * REG_NUMBER)
    id: int = 0
    prog_name: str = ""
    prog_size: int = 0
    comment: str = ""
    code: bytes = b""
    processes: list[Process] = field(default_factory=list)
    is_alive: bool = False

    @property
    def process(self):
        """The first process, or None when there is none."""
        return self.processes[0] if self.processes else None


@dataclass
class FileInfo:
    """What the command line says about the champion files and flags."""

    file_indexes: list[int] = field(default_factory=list)
    paths: list[str] = field(default_factory=list)
    dump_flag: int = 0
    start_dump_flag: int = 0
    n_flag: int = 0
    index_champ_n_flag: int = 0

    @property
    def nb_indexes(self):
        return len(self.file_indexes)


def _check_width(size):
    if size not in _WIDTHS:
        raise ValueError(f"unsupported access width: {size}")


@dataclass
class VirtualMachine:
    """The arena, the champions and the cycle counters."""

    champions: list[Champion] = field(
        default_factory=lambda: [Champion() for _ in range(NB_CHAMP)]
    )
    info: FileInfo = field(default_factory=FileInfo)
    arena: bytearray = field(default_factory=lambda: bytearray(MEM_SIZE))
    cycle: int = 0
    cur_cycle: int = 0
    dump_cycle: int = 0
    nb_live: int = 0
    nb_robots: int = 0

    def read_map(self, size, where):
        """Read a big-endian value of 1, 2 or 4 bytes; 2 and 4 bytes are signed."""
        _check_width(size)
        data = bytes(self.arena[(where + offset) % MEM_SIZE] for offset in range(size))
        value = compose_val(data[::-1])
        if size == IND_SIZE and value >= 1 << 15:
            value -= 1 << 16
        return value

    def insert_to_map(self, size, value, where):
        """Write the low bytes of value big-endian at where, wrapping around."""
        _check_width(size)
        for offset, byte in enumerate(decompose_val(value, size)[::-1]):
            self.arena[(where + offset) % MEM_SIZE] = byte