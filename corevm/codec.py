"""Coding bytes, byte packing and program counter movement."""

from __future__ import annotations

from .op import BYTE, CB_DIR, CB_IDT, CB_IND, CB_LEN, CB_REG, DIR_SIZE, IND_SIZE, REG_SIZE

_ARG_SIZES = {CB_REG: REG_SIZE, CB_DIR: DIR_SIZE, CB_IND: IND_SIZE, CB_IDT: IND_SIZE}


def read_coding_byte(cb):
    """Split a coding byte into its four two-bit argument kinds, high bits first."""
    return tuple(
        (((cb << (2 * slot)) & 0xFF) >> 6) for slot in range(CB_LEN)
    )


def check_cb(received, expected):
    """Tell whether two coding bytes describe the same arguments."""
    return read_coding_byte(received) == read_coding_byte(expected)


def compose_val(data):
    """Build a signed 32-bit integer from little-endian bytes."""
    value = 0
    for shift, byte in enumerate(data):
        value += byte << (BYTE * shift)
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def decompose_val(value, size):
    """Split the low bytes of value into little-endian bytes."""
    return bytes((value >> (BYTE * shift)) & 0xFF for shift in range(size))


def get_pos(pc, args, move_in_cb):
    """Offset pc by the first argument kinds of a coding byte, plus one."""
    return pc + sum(args[:move_in_cb]) + 1


def move_pc(args, pc, nb):
    """Return pc past an instruction of nb bytes, or past its coded arguments."""
    if nb != 0:
        return pc + nb + 1
    return pc + sum(_ARG_SIZES.get(kind, 0) for kind in args[:CB_LEN]) + 2