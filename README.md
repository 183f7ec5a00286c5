# corevm

A virtual machine for Corewar. It reads compiled champions (`.cor` files),
places them evenly across a 6 KiB circular arena and steps their processes
through the instructions found there.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
corevm [-dump NBR_CYCLE] [[-n PROG_NUMBER] champion.cor] ...
```

Any argument containing `.cor` is taken as a champion file. Two to four
champions are accepted.

- `-dump NBR_CYCLE`: must appear at most once and be followed by a number.
  The number is checked and recorded; see the limits below.
- `-n PROG_NUMBER`: must be followed by a number and then another argument.
  The number replaces the position of the champion that follows, and the
  champions are then reordered by one swapping pass over those numbers.
- `-h` as the sole argument prints the help text read from
  `src/error_handling/core_h/.corewar_h`, relative to the current
  directory, and exits with status 104. The file is not part of this
  package; when it is missing the command fails with status 84.

Errors are printed on standard error, for example `INIT: Too few warrior`,
`INIT: Too many warrior`, `INIT: Wrong flag -dump definition` or
`INIT: Wrong flag -n definition`, and the command exits with status 84.

While the machine runs it prints:

- `The player <id> (<name>) is alive.` for every `live` instruction;
- the character held in a register for every `aff` instruction;
- the whole arena as coloured hexadecimal, 32 bytes per line, before every
  champion's turn and before every instruction executed.

## What the instructions do

- `live`, `ld`, `st`, `sti`, `aff`: carried out as described above or on
  registers and memory; `ld`, `st`, `sti` and `aff` leave the process where
  it is when their coding byte is not one they accept.
- `zjmp`: jumps by the signed two-byte offset that follows, whatever the
  carry.
- `fork` and `lfork`: append a new process to the champion (`fork` limits
  the offset with `IDX_MOD`).
- `add`, `sub`, `and`, `or`, `xor`: step over their arguments without
  computing anything.
- `ldi`, `lld`, `lldi`: leave the process on the same instruction.
- Any other byte is stepped over.

## What it does not do

- The command runs until it is interrupted: no process or champion is
  ever killed, no winner is announced, and `-dump` does not stop the
  machine or dump memory.
- The carry flag is never set or read.
- The help text is not shipped.
- There is no assembler; champions must already be compiled.

## Library use

- `corevm.op`: constants, the instruction table (`Opcode`, `OpInfo`,
  `op_info`) and the errors (`ErrorMessage`, `CorewarError`, which carries
  an `exit_code`).
- `corevm.textutils`: number parsing (`get_number`, `is_number_string`,
  `is_negative`, `char_number_kind`), `to_hex`, `is_alpha_or_space` and
  `mini_format`, a small `%i %d %c %s %p %x %%` formatter.
- `corevm.codec`: `read_coding_byte`, `check_cb`, `compose_val`,
  `decompose_val`, `get_pos`, `move_pc`.
- `corevm.vm`: `VirtualMachine`, `Champion`, `Process`, `FileInfo`;
  `VirtualMachine.read_map` and `insert_to_map` read and write big-endian
  values of 1, 2 or 4 bytes, wrapping around the arena.
- `corevm.instructions`: one `exec_*` function per instruction,
  `add_node`, and `execute`, which dispatches on the byte under a process.
- `corevm.arena`: `set_arena`, `format_arena`, `display_arena`.
- `corevm.loop`: `go_into_ins`, `loop_into_process`, `loop_into_heroes`,
  `process_cycles` and `corewar_loop(vm, max_rounds)`, which returns the
  number of rounds run.
- `corevm.parsing`: flag handling and `.cor` loading (`is_cor_file`,
  `is_specific_flag`, `get_info_path_files`, `process_n_flag`,
  `read_cor_file`, `read_cor_files`, `file_parsing`).
- `corevm.checks`: `check_nb_param`, `check_files`, `check_file_errors`,
  `get_file_size`, `display_h`, `error_handling`.
- `corevm.cli`: `browse_files_actions` and the `main` entry point.

`browse_files_actions` takes the full argument list, program name first,
and can be limited to a number of rounds:

```python
from corevm.cli import browse_files_actions

status = browse_files_actions(["corevm", "a.cor", "b.cor"], max_rounds=100)
```

It returns 0, or raises `CorewarError` when the arguments or files are
wrong.