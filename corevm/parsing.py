"""Reading the command line and the champion files into the machine."""

from __future__ import annotations

from pathlib import Path

from .checks import check_nb_param
from .op import (
    COMMENT_LENGTH,
    DUMP_FLAG,
    FILE_TYPE,
    HEADER_SIZE,
    N_FLAG,
    PROG_NAME_LENGTH,
    CorewarError,
    ErrorMessage,
    op_info,
)
from .textutils import get_number, is_alpha_or_space, is_number_string
from .vm import FileInfo, Process

_SKIP_MAGIC = 4


def _arg(argv, index):
    return argv[index] if index < len(argv) else None


def is_cor_file(arg):
    """Tell whether an argument names a champion file."""
    return FILE_TYPE in arg


def _check_dump_flag(info, argv, index, count_dump):
    if argv[index] != DUMP_FLAG:
        return
    value = _arg(argv, index + 1)
    if count_dump >= 2 or value is None or not is_number_string(value):
        raise CorewarError(ErrorMessage.ERR_DUMP_FLAG)
    info.dump_flag = get_number(value)


def _check_n_flag(info, argv, index):
    if argv[index] != N_FLAG:
        return
    value = _arg(argv, index + 1)
    if value is None or not is_number_string(value):
        raise CorewarError(ErrorMessage.ERR_N_FLAG)
    info.n_flag = get_number(value)
    if _arg(argv, index + 2) is None:
        raise CorewarError(ErrorMessage.ERR_DUMP_FLAG)
    info.index_champ_n_flag = index + 2


def is_specific_flag(info, argv, index):
    """Record a -dump or -n flag found at argv[index]; raise when it is malformed."""
    count_dump = argv[1 : index + 1].count(DUMP_FLAG)
    _check_dump_flag(info, argv, index, count_dump)
    info.start_dump_flag = 1 if count_dump == 1 else 0
    _check_n_flag(info, argv, index)


def get_info_path_files(argv):
    """Collect flags and champion paths from argv, whose first item is the program name."""
    info = FileInfo()
    for index in range(1, len(argv)):
        is_specific_flag(info, argv, index)
        if is_cor_file(argv[index]):
            info.file_indexes.append(index)
            info.paths.append(argv[index])
    return info


def process_n_flag(info):
    """Give the -n number to its champion, then do one ordering pass by number."""
    info.file_indexes = [
        info.n_flag if position == info.index_champ_n_flag else position
        for position in info.file_indexes
    ]
    indexes, paths = info.file_indexes, info.paths
    for i in range(len(indexes) - 1):
        if indexes[i + 1] == 0:
            break
        if indexes[i] > indexes[i + 1]:
            indexes[i], indexes[i + 1] = indexes[i + 1], indexes[i]
            paths[i], paths[i + 1] = paths[i + 1], paths[i]
    return info


def read_cor_file(champion, path, champ_id):
    """Load name, comment and code of one champion file into champion."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise CorewarError(f"cannot read champion file {path}") from exc
    name, comment = [], []
    for offset, byte in enumerate(data[_SKIP_MAGIC:HEADER_SIZE], start=_SKIP_MAGIC):
        char = chr(byte)
        if byte and is_alpha_or_space(char):
            (name if offset < PROG_NAME_LENGTH + 1 else comment).append(char)
    champion.prog_name = "".join(name)[:PROG_NAME_LENGTH]
    champion.comment = "".join(comment)[:COMMENT_LENGTH]
    champion.code = bytes(data[HEADER_SIZE:])
    champion.prog_size = len(champion.code)
    champion.id = champ_id
    champion.is_alive = True
    return champion


def read_cor_files(vm):
    """Load every listed champion and give each one a first process."""
    info = vm.info
    for k, (path, file_index) in enumerate(zip(info.paths, info.file_indexes)):
        champion = vm.champions[k]
        champion.reg[1] = file_index
        read_cor_file(champion, path, k)
    first_code = vm.champions[0].code
    cooldown = op_info(first_code[0]).nbr_cycles if first_code else 0
    for champion in vm.champions[: info.nb_indexes]:
        champion.processes = [Process(cldwn=cooldown)]
    return vm


def file_parsing(argv, vm):
    """Fill vm from the command line: flags, champion order and champion files."""
    vm.info = get_info_path_files(argv)
    process_n_flag(vm.info)
    check_nb_param(vm.info.nb_indexes)
    read_cor_files(vm)
    return vm