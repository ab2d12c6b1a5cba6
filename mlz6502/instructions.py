"""The instructions the emulator knows, with their per-operand behaviour."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from .operand import Acc, Addr, Imp, Val

if TYPE_CHECKING:
    from .cpu import Cpu6502

Handler = Callable[["Cpu6502", Any], None]


@dataclass(frozen=True, eq=False)
class Instruction:
    """A named operation with one handler per operand kind it accepts."""

    name: str
    handlers: Mapping[type, Handler]
    illegal: bool = False

    def accepts(self, operand_type: type) -> bool:
        """Whether the instruction can run on operands of ``operand_type``."""
        return operand_type in self.handlers

    def execute(self, cpu: Cpu6502, operand: Any) -> None:
        """Run the instruction on ``cpu`` with an already resolved operand."""
        handler = self.handlers.get(type(operand))
        if handler is None:
            raise TypeError(
                f"instruction {self.name} does not take {type(operand).__name__} operands"
            )
        handler(cpu, operand)


def _apply_shift(cpu: Cpu6502, shift: Callable[[int, bool], tuple[int, bool]], value: int) -> int:
    result, carry = shift(value, cpu.carry())
    cpu.set_carry(carry)
    cpu.set_zero(result == 0)
    cpu.set_negative(result)
    return result


def _read_modify_write(shift: Callable[[int, bool], tuple[int, bool]]) -> dict[type, Handler]:
    def on_accumulator(cpu: Cpu6502, _: Acc) -> None:
        cpu.a = _apply_shift(cpu, shift, cpu.a)

    def on_address(cpu: Cpu6502, operand: Addr) -> None:
        value = cpu.bus.read(operand.address)
        cpu.bus.write(operand.address, _apply_shift(cpu, shift, value))

    return {Acc: on_accumulator, Addr: on_address}


def _asl(value: int, _carry: bool) -> tuple[int, bool]:
    return (value << 1) & 0xFF, bool(value & 0x80)


def _lsr(value: int, _carry: bool) -> tuple[int, bool]:
    return value >> 1, bool(value & 0x01)


def _rol(value: int, carry: bool) -> tuple[int, bool]:
    return ((value << 1) & 0xFF) | int(carry), bool(value & 0x80)


def _ror(value: int, carry: bool) -> tuple[int, bool]:
    return (value >> 1) | (int(carry) << 7), bool(value & 0x01)


def _cpx(cpu: Cpu6502, operand: Val) -> None:
    x, v = cpu.x, operand.value
    cpu.set_carry(x >= v)
    cpu.set_zero(x == v)
    cpu.set_negative((x - v) & 0xFF)


def _lda(cpu: Cpu6502, operand: Val) -> None:
    cpu.a = operand.value
    cpu.set_zero(cpu.a == 0)
    cpu.set_negative(cpu.a)


def _sta(cpu: Cpu6502, operand: Addr) -> None:
    cpu.bus.write(operand.address, cpu.a)


def _jam(_cpu: Cpu6502, _operand: Imp) -> None:
    """Halting is left to the run loop; the instruction itself changes nothing."""


ASL = Instruction("asl", _read_modify_write(_asl))
CPX = Instruction("cpx", {Val: _cpx})
JAM = Instruction("jam", {Imp: _jam}, illegal=True)
LDA = Instruction("lda", {Val: _lda})
LSR = Instruction("lsr", _read_modify_write(_lsr))
ROL = Instruction("rol", _read_modify_write(_rol))
ROR = Instruction("ror", _read_modify_write(_ror))
STA = Instruction("sta", {Addr: _sta})