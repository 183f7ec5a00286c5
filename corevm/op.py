"""Instruction table, machine constants and error messages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

EXIT_SUCCESS = 0
EXIT_FAIL = 84
EXIT_HELP = 104

MEM_SIZE = 6 * 1024
IDX_MOD = 512
MAX_ARGS_NUMBER = 4
REG_NUMBER = 16

COMMENT_CHAR = "#"
LABEL_CHAR = ":"
DIRECT_CHAR = "%"
SEPARATOR_CHAR = ","
LABEL_CHARS = "abcdefghijklmnopqrstuvwxyz_0123456789"
NAME_CMD_STRING = ".name"
COMMENT_CMD_STRING = ".comment"

T_REG = 1
T_DIR = 2
T_IND = 4
T_LAB = 8

CYCLE_TO_DIE = 1536
CYCLE_DELTA = 5
NBR_LIVE = 40

CB_LEN = 4
CB_REG = 1
CB_DIR = 2
CB_IND = 3
CB_IDT = 4

IND_SIZE = 2
DIR_SIZE = 4
REG_SIZE = 1
BYTE = 8

PROG_NAME_LENGTH = 128
COMMENT_LENGTH = 2048
COREWAR_EXEC_MAGIC = 0xEA83F3

# magic (4) + name (129, padded to 132) + size (4) + comment (2049, padded)
HEADER_SIZE = 2192

NB_CHAMP = 4
NB_PATH_CHAMP = 5

PATH_COREWAR_H = "src/error_handling/core_h/.corewar_h"
DUMP_FLAG = "-dump"
N_FLAG = "-n"
FILE_TYPE = ".cor"


class Opcode(IntEnum):
    """Byte codes of the machine instructions."""

    LIVE = 0x01
    LD = 0x02
    ST = 0x03
    ADD = 0x04
    SUB = 0x05
    AND = 0x06
    OR = 0x07
    XOR = 0x08
    ZJUMP = 0x09
    LDI = 0x0A
    STI = 0x0B
    FORK = 0x0C
    LLD = 0x0D
    LLDI = 0x0E
    LFORK = 0x0F
    AFF = 0x10


@dataclass(frozen=True)
class OpInfo:
    """Description of one instruction."""

    mnemonic: str | None
    nbr_args: int
    types: tuple[int, ...]
    code: int
    nbr_cycles: int
    comment: str | None


_EMPTY_OP = OpInfo(None, 0, (), 0, 0, None)

_OP_TABLE = {
    op.code: op
    for op in (
        OpInfo("live", 1, (T_DIR,), 1, 10, "alive"),
        OpInfo("ld", 2, (T_DIR | T_IND, T_REG), 2, 5, "load"),
        OpInfo("st", 2, (T_REG, T_IND | T_REG), 3, 5, "store"),
        OpInfo("add", 3, (T_REG, T_REG, T_REG), 4, 10, "addition"),
        OpInfo("sub", 3, (T_REG, T_REG, T_REG), 5, 10, "soustraction"),
        OpInfo(
            "and", 3, (T_REG | T_DIR | T_IND, T_REG | T_IND | T_DIR, T_REG),
            6, 6, "et (and  r1, r2, r3   r1&r2 -> r3",
        ),
        OpInfo(
            "or", 3, (T_REG | T_IND | T_DIR, T_REG | T_IND | T_DIR, T_REG),
            7, 6, "ou  (or   r1, r2, r3   r1 | r2 -> r3",
        ),
        OpInfo(
            "xor", 3, (T_REG | T_IND | T_DIR, T_REG | T_IND | T_DIR, T_REG),
            8, 6, "ou (xor  r1, r2, r3   r1^r2 -> r3",
        ),
        OpInfo("zjmp", 1, (T_DIR,), 9, 20, "jump if zero"),
        OpInfo(
            "ldi", 3, (T_REG | T_DIR | T_IND, T_DIR | T_REG, T_REG),
            10, 25, "load index",
        ),
        OpInfo(
            "sti", 3, (T_REG, T_REG | T_DIR | T_IND, T_DIR | T_REG),
            11, 25, "store index",
        ),
        OpInfo("fork", 1, (T_DIR,), 12, 100, "fork"),
        OpInfo("lld", 2, (T_DIR | T_IND, T_REG), 13, 10, "long load"),
        OpInfo(
            "lldi", 3, (T_REG | T_DIR | T_IND, T_DIR | T_REG, T_REG),
            14, 50, "long load index",
        ),
        OpInfo("lfork", 1, (T_DIR,), 15, 1000, "long fork"),
        OpInfo("aff", 1, (T_REG,), 16, 2, "aff"),
    )
}


def op_info(code):
    """Return the description of an instruction byte; unknown bytes give an empty entry."""
    return _OP_TABLE.get(code, _EMPTY_OP)


class ErrorMessage(Enum):
    """Messages reported when the command line is wrong."""

    FEW_WARRIOR = "INIT: Too few warrior"
    MANY_WARRIOR = "INIT: Too many warrior"
    DOT_COR_FILE = "INIT: Not a .cor file"
    ERR_DUMP_FLAG = "INIT: Wrong flag -dump definition"
    ERR_N_FLAG = "INIT: Wrong flag -n definition"


class CorewarError(Exception):
    """Error that stops the machine, carrying the process exit code."""

    def __init__(self, message, exit_code=EXIT_FAIL):
        if isinstance(message, ErrorMessage):
            message = message.value
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code