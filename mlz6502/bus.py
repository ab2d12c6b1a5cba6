"""Memory bus abstraction shared by the CPU and attached devices."""

from abc import ABC, abstractmethod


def read_little_endian(lo: int, hi: int) -> int:
    """Combine two bytes into a 16-bit word, low byte first."""
    return ((hi & 0xFF) << 8) | (lo & 0xFF)


class Bus(ABC):
    """A 16-bit address space of bytes."""

    @abstractmethod
    def read(self, addr: int) -> int:
        """Return the byte stored at ``addr``."""

    @abstractmethod
    def write(self, addr: int, value: int) -> None:
        """Store the byte ``value`` at ``addr``."""

    def read16(self, addr: int) -> int:
        """Read a little-endian word; the high byte address wraps at 0xFFFF."""
        return read_little_endian(self.read(addr), self.read((addr + 1) & 0xFFFF))