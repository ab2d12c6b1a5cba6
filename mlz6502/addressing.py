"""Addressing modes: how an instruction finds its operand."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Callable, Union

from .operand import Acc, Addr, Imp, Rel, Val

if TYPE_CHECKING:
    from .cpu import Cpu6502

Operand = Union[Val, Addr, Rel, Acc, Imp]


class UnsupportedOperandError(TypeError):
    """Raised when an addressing mode cannot produce the requested operand kind."""

    def __init__(self, mode: "AddressingMode", operand_type: type) -> None:
        super().__init__(
            f"addressing mode {mode.name} cannot produce {operand_type.__name__} operands"
        )
        self.mode = mode
        self.operand_type = operand_type


class AddressingMode(enum.Enum):
    """The 6502 addressing modes."""

    ABSOLUTE = "absolute"
    ABSOLUTE_X = "absolute_x"
    ABSOLUTE_Y = "absolute_y"
    ACCUMULATOR = "accumulator"
    IMMEDIATE = "immediate"
    IMPLICIT = "implicit"
    INDIRECT = "indirect"
    INDIRECT_X = "indirect_x"
    INDIRECT_Y = "indirect_y"
    RELATIVE = "relative"
    ZERO_PAGE = "zero_page"
    ZERO_PAGE_X = "zero_page_x"
    ZERO_PAGE_Y = "zero_page_y"

    def supports(self, operand_type: type) -> bool:
        """Whether this mode can produce operands of ``operand_type``."""
        return operand_type in _SUPPORTED[self]

    def resolve(self, cpu: Cpu6502, operand_type: type) -> Operand:
        """Consume operand bytes from the instruction stream and build the operand."""
        if not self.supports(operand_type):
            raise UnsupportedOperandError(self, operand_type)
        if operand_type is Acc:
            return Acc()
        if operand_type is Imp:
            return Imp()
        if operand_type is Rel:
            return Rel(_to_signed(cpu.fetch()))
        if self is AddressingMode.IMMEDIATE:
            return Val(cpu.fetch())
        address = _EFFECTIVE_ADDRESS[self](cpu)
        if operand_type is Addr:
            return Addr(address)
        return Val(cpu.bus.read(address))


def _to_signed(byte: int) -> int:
    return byte - 0x100 if byte & 0x80 else byte


def _absolute(cpu: Cpu6502) -> int:
    return cpu.fetch16()


def _absolute_x(cpu: Cpu6502) -> int:
    return (cpu.fetch16() + cpu.x) & 0xFFFF


def _absolute_y(cpu: Cpu6502) -> int:
    return (cpu.fetch16() + cpu.y) & 0xFFFF


def _indirect(cpu: Cpu6502) -> int:
    return cpu.bus.read16(cpu.fetch16())


def _indirect_x(cpu: Cpu6502) -> int:
    # The pointer wraps within the zero page, as on the original hardware.
    return cpu.bus.read16((cpu.fetch() + cpu.x) & 0xFF)


def _indirect_y(cpu: Cpu6502) -> int:
    return (cpu.bus.read16(cpu.fetch()) + cpu.y) & 0xFFFF


def _zero_page(cpu: Cpu6502) -> int:
    return cpu.fetch()


def _zero_page_x(cpu: Cpu6502) -> int:
    return (cpu.fetch() + cpu.x) & 0xFF


def _zero_page_y(cpu: Cpu6502) -> int:
    return (cpu.fetch() + cpu.y) & 0xFF


_EFFECTIVE_ADDRESS: dict[AddressingMode, Callable[["Cpu6502"], int]] = {
    AddressingMode.ABSOLUTE: _absolute,
    AddressingMode.ABSOLUTE_X: _absolute_x,
    AddressingMode.ABSOLUTE_Y: _absolute_y,
    AddressingMode.INDIRECT: _indirect,
    AddressingMode.INDIRECT_X: _indirect_x,
    AddressingMode.INDIRECT_Y: _indirect_y,
    AddressingMode.ZERO_PAGE: _zero_page,
    AddressingMode.ZERO_PAGE_X: _zero_page_x,
    AddressingMode.ZERO_PAGE_Y: _zero_page_y,
}

_MEMORY_OPERANDS = frozenset({Addr, Val})

_SUPPORTED: dict[AddressingMode, frozenset] = {
    AddressingMode.ABSOLUTE: _MEMORY_OPERANDS,
    AddressingMode.ABSOLUTE_X: _MEMORY_OPERANDS,
    AddressingMode.ABSOLUTE_Y: _MEMORY_OPERANDS,
    AddressingMode.ACCUMULATOR: frozenset({Acc}),
    AddressingMode.IMMEDIATE: frozenset({Val}),
    AddressingMode.IMPLICIT: frozenset({Imp}),
    AddressingMode.INDIRECT: frozenset({Addr}),
    AddressingMode.INDIRECT_X: _MEMORY_OPERANDS,
    AddressingMode.INDIRECT_Y: _MEMORY_OPERANDS,
    AddressingMode.RELATIVE: frozenset({Rel}),
    AddressingMode.ZERO_PAGE: _MEMORY_OPERANDS,
    AddressingMode.ZERO_PAGE_X: _MEMORY_OPERANDS,
    AddressingMode.ZERO_PAGE_Y: _MEMORY_OPERANDS,
}