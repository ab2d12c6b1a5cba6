"""The 6502 opcode table."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

from .addressing import AddressingMode, UnsupportedOperandError
from .instructions import ASL, JAM, LDA, LSR, ROL, ROR, STA, Instruction
from .operand import Acc, Addr, Imp, Val

if TYPE_CHECKING:
    from .cpu import Cpu6502

JAM_OPCODE = 0x92
TABLE_SIZE = 256


@dataclass(frozen=True)
class InstructionEntry:
    """One opcode: an instruction paired with the addressing mode that feeds it."""

    opcode: int
    instruction: Instruction
    mode: AddressingMode
    operand_type: type
    cycles: int = 0

    @property
    def name(self) -> str:
        return self.instruction.name

    @property
    def illegal(self) -> bool:
        return self.instruction.illegal

    def execute(self, cpu: Cpu6502) -> None:
        """Resolve the operand and run the instruction."""
        operand = self.mode.resolve(cpu, self.operand_type)
        self.instruction.execute(cpu, operand)


def variant(
    opcode: int, instruction: Instruction, mode: AddressingMode, operand_type: type
) -> InstructionEntry:
    """Build a checked table entry for ``opcode``."""
    if not 0 <= opcode < TABLE_SIZE:
        raise ValueError(f"opcode {opcode} is not a byte")
    if not instruction.accepts(operand_type):
        raise TypeError(
            f"instruction {instruction.name} does not take {operand_type.__name__} operands"
        )
    if not mode.supports(operand_type):
        raise UnsupportedOperandError(mode, operand_type)
    return InstructionEntry(opcode, instruction, mode, operand_type)


VARIANTS_6502: tuple[InstructionEntry, ...] = (
    variant(0x0A, ASL, AddressingMode.ACCUMULATOR, Acc),
    variant(0x0E, ASL, AddressingMode.ABSOLUTE, Addr),
    variant(0xA9, LDA, AddressingMode.IMMEDIATE, Val),
    variant(0xAD, LDA, AddressingMode.ABSOLUTE, Val),
    variant(0x4A, LSR, AddressingMode.ACCUMULATOR, Acc),
    variant(0x4E, LSR, AddressingMode.ABSOLUTE, Addr),
    variant(0x2A, ROL, AddressingMode.ACCUMULATOR, Acc),
    variant(0x2E, ROL, AddressingMode.ABSOLUTE, Addr),
    variant(0x6A, ROR, AddressingMode.ACCUMULATOR, Acc),
    variant(0x6E, ROR, AddressingMode.ABSOLUTE, Addr),
    variant(0x8D, STA, AddressingMode.ABSOLUTE, Addr),
)


def build_instruction_table(variants: Iterable[InstructionEntry]) -> tuple[InstructionEntry, ...]:
    """Fill a 256-slot table with ``variants``; every other slot holds the jam entry."""
    table = [variant(JAM_OPCODE, JAM, AddressingMode.IMPLICIT, Imp)] * TABLE_SIZE
    for entry in variants:
        table[entry.opcode] = entry
    return tuple(table)


@lru_cache(maxsize=None)
def instruction_table() -> tuple[InstructionEntry, ...]:
    """The 6502 opcode table, built once."""
    return build_instruction_table(VARIANTS_6502)