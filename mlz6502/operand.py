"""Operand kinds produced by addressing modes and consumed by instructions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Val:
    """An 8-bit value."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFF:
            raise ValueError(f"value {self.value} does not fit in a byte")


@dataclass(frozen=True)
class Addr:
    """A 16-bit effective address."""

    address: int

    def __post_init__(self) -> None:
        if not 0 <= self.address <= 0xFFFF:
            raise ValueError(f"address {self.address} does not fit in 16 bits")


@dataclass(frozen=True)
class Rel:
    """A signed 8-bit branch offset."""

    offset: int

    def __post_init__(self) -> None:
        if not -0x80 <= self.offset <= 0x7F:
            raise ValueError(f"offset {self.offset} does not fit in a signed byte")


@dataclass(frozen=True)
class Acc:
    """The accumulator as the operand."""


@dataclass(frozen=True)
class Imp:
    """No explicit operand."""