# mlz6502

A small MOS 6502 CPU emulator. It has a flat 64 KiB memory bus, the 6502
addressing modes, and an opcode table that is built one instruction variant at a
time.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running the demo

```
mlz6502
```

The command loads a three-byte program at address 0: `LDA #$69` followed by the
`jam` opcode `0x92`. The CPU takes its start address from the reset vector at
`0xFFFC`. That vector is zero, so execution starts at address 0. The CPU runs
until it reaches `jam`, then prints its registers (`a`, `x`, `y`, `sp`, `pc`) and
its status flags. A flag that is clear is printed with a leading `!`, for example
`!C`. At the end the command reports whether register A holds `0x69`. Apart from
`--help`, the command takes no options.

## Using the library

```python
from mlz6502.memory import Memory
from mlz6502.cpu import Cpu6502

memory = Memory()
memory.load_rom(bytes([0xA9, 0x69, 0x92]))   # LDA #$69 ; JAM
cpu = Cpu6502(memory)                        # PC comes from the reset vector at 0xFFFC
cpu.run()                                    # stops at the jam opcode 0x92
assert cpu.a == 0x69
```

### Modules

- `mlz6502.bus`
  - `Bus` is the abstract base class for the address space. Subclasses provide
    `read(addr)` and `write(addr, value)`.
  - `Bus.read16(addr)` reads a little-endian word. The address of the high byte
    wraps at `0xFFFF`.
  - `read_little_endian(lo, hi)` combines two bytes into one 16-bit word.
- `mlz6502.memory`
  - `Memory` is a `Bus` backed by 64 KiB of zeroed RAM.
  - `load_rom(rom)` copies bytes to address 0. `load_rom_at(rom, addr)` copies
    them to `addr`.
  - `load_rom_at` raises `ValueError` when the image does not fit in memory.
  - Reads and writes outside the address space raise `IndexError`.
- `mlz6502.operand`
  - The operand kinds are `Val` (a byte), `Addr` (a 16-bit address), `Rel` (a
    signed byte offset), `Acc` (the accumulator) and `Imp` (no operand).
  - They are frozen dataclasses, and each one checks its range when it is
    created.
- `mlz6502.addressing`
  - `AddressingMode` is an enum of the 13 modes: absolute, absolute X and Y,
    accumulator, immediate, implicit, indirect, indexed indirect, indirect
    indexed, relative, and zero page, zero page X and Y.
  - `supports(operand_type)` tells whether a mode can produce a given operand
    kind.
  - `resolve(cpu, operand_type)` reads the operand bytes from the instruction
    stream. It raises `UnsupportedOperandError` when the mode cannot produce that
    kind.
  - Zero-page indexing and the `(zp,X)` pointer wrap within the zero page.
- `mlz6502.instructions`
  - An `Instruction` has a name, one handler for each operand kind it accepts,
    and an `illegal` marker.
  - The instructions defined are `LDA`, `STA`, `ASL`, `LSR`, `ROL`, `ROR`, `CPX`
    and `JAM`. `JAM` is marked illegal and changes nothing.
- `mlz6502.isa`
  - `variant(opcode, instruction, mode, operand_type)` builds an
    `InstructionEntry`. It checks that the opcode is a byte and that the
    instruction and the mode both agree on the operand kind.
  - `build_instruction_table(variants)` builds a 256-entry table. Every opcode
    without a variant is `jam`.
  - `instruction_table()` returns the default table, which is built once.
- `mlz6502.cpu`
  - `Cpu6502` holds the registers `a`, `x`, `y`, `p`, `sp` and `pc`, plus a
    `cycles` counter.
  - At power-on `p` is `0x24` and `sp` is `0xFD`.
  - `step()` runs one instruction and returns its opcode.
  - `run()` steps until it reaches `jam`. It prints a warning for each illegal
    instruction it executes and a notice when it stops.
  - The class also has `fetch`, `fetch16`, `push`, `pop`, `stack_addr`, the flag
    readers `carry`, `zero`, `interrupt_disable`, `decimal`, `break_flag`,
    `overflow` and `negative`, and the setters `set_carry`, `set_zero` and
    `set_negative`.
- `mlz6502.cli`
  - `main(argv=None)` runs the demo.
  - `describe_state(cpu)` formats the register dump.
  - `flag_str(flag)` gives the prefix for a flag: empty when the flag is set,
    `!` when it is clear.

### Opcodes in the default table

| Opcode | Instruction | Mode        |
|--------|-------------|-------------|
| `0x0A` | asl         | accumulator |
| `0x0E` | asl         | absolute    |
| `0x2A` | rol         | accumulator |
| `0x2E` | rol         | absolute    |
| `0x4A` | lsr         | accumulator |
| `0x4E` | lsr         | absolute    |
| `0x6A` | ror         | accumulator |
| `0x6E` | ror         | absolute    |
| `0x8D` | sta         | absolute    |
| `0xA9` | lda         | immediate   |
| `0xAD` | lda         | absolute    |

Every other opcode runs `jam`, which makes `run()` stop.

## What it does not do

- Only the opcodes listed above are implemented. There are no branch, jump,
  arithmetic, transfer or stack instructions. `CPX` is defined but has no opcode
  in the default table.
- No interrupts are handled.
- Cycles are not counted. `cycles` stays at 0.
- There is no decimal mode.
- The `mlz6502` command runs only its built-in demo program. It cannot load a
  program from a file.