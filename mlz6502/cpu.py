"""The 6502 processor core."""

from .bus import Bus
from .isa import JAM_OPCODE, instruction_table

_CARRY = 0x01
_ZERO = 0x02
_INTERRUPT_DISABLE = 0x04
_DECIMAL = 0x08
_BREAK = 0x10
_OVERFLOW = 0x40
_NEGATIVE = 0x80


class Cpu6502:
    """Registers, status flags and the fetch-execute loop."""

    STACK_BASE = 0x0100
    RESET_VECTOR = 0xFFFC

    def __init__(self, bus: Bus) -> None:
        self.bus = bus
        self.a = 0
        self.x = 0
        self.y = 0
        self.p = 0x24
        self.sp = 0xFD
        self.pc = bus.read16(self.RESET_VECTOR)
        self.cycles = 0

    def run(self) -> None:
        """Execute instructions until the jam opcode is reached."""
        while self.step() != JAM_OPCODE:
            pass
        print("Debug: magic 'jam' instruction reached. Stopping execution.")

    def step(self) -> int:
        """Fetch and execute one instruction; return its opcode."""
        opcode = self.fetch()
        entry = instruction_table()[opcode]
        entry.execute(self)
        if entry.illegal:
            print(f"Warning: illegal instruction '{entry.name}' (0x{opcode:02x})")
        return opcode

    def fetch(self) -> int:
        value = self.bus.read(self.pc)
        self.pc = (self.pc + 1) & 0xFFFF
        return value

    def fetch16(self) -> int:
        lo = self.fetch()
        hi = self.fetch()
        return (hi << 8) | lo

    def push(self, value: int) -> None:
        self.bus.write(self.stack_addr(), value)
        self.sp = (self.sp - 1) & 0xFF

    def pop(self) -> int:
        self.sp = (self.sp + 1) & 0xFF
        return self.bus.read(self.stack_addr())

    def stack_addr(self) -> int:
        return self.STACK_BASE + self.sp

    def _flag(self, mask: int) -> bool:
        return bool(self.p & mask)

    def _set_flag(self, mask: int, on: bool) -> None:
        if on:
            self.p |= mask
        else:
            self.p &= ~mask & 0xFF

    def carry(self) -> bool:
        return self._flag(_CARRY)

    def zero(self) -> bool:
        return self._flag(_ZERO)

    def interrupt_disable(self) -> bool:
        return self._flag(_INTERRUPT_DISABLE)

    def decimal(self) -> bool:
        return self._flag(_DECIMAL)

    def break_flag(self) -> bool:
        return self._flag(_BREAK)

    def overflow(self) -> bool:
        return self._flag(_OVERFLOW)

    def negative(self) -> bool:
        return self._flag(_NEGATIVE)

    def set_carry(self, on: bool) -> None:
        self._set_flag(_CARRY, on)

    def set_zero(self, on: bool) -> None:
        self._set_flag(_ZERO, on)

    def set_negative(self, value: int) -> None:
        """Copy bit 7 of ``value`` into the negative flag."""
        self._set_flag(_NEGATIVE, bool(value & 0x80))