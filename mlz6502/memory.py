"""Flat 64 KiB RAM attached to the bus."""

from collections.abc import Iterable

from .bus import Bus

MEMORY_SIZE = 0x10000


def _check_address(addr: int) -> None:
    if not 0 <= addr < MEMORY_SIZE:
        raise IndexError(f"address {addr:#x} is outside the 64 KiB address space")


class Memory(Bus):
    """64 KiB of zero-initialised RAM."""

    def __init__(self) -> None:
        self._data = bytearray(MEMORY_SIZE)

    def load_rom(self, rom: Iterable[int]) -> None:
        """Copy ``rom`` to the start of memory."""
        self.load_rom_at(rom, 0)

    def load_rom_at(self, rom: Iterable[int], addr: int) -> None:
        """Copy ``rom`` into memory starting at ``addr``."""
        _check_address(addr)
        image = bytes(rom)
        if addr + len(image) > MEMORY_SIZE:
            raise ValueError("ROM too large to fit in memory")
        self._data[addr:addr + len(image)] = image

    def read(self, addr: int) -> int:
        _check_address(addr)
        return self._data[addr]

    def write(self, addr: int, value: int) -> None:
        _check_address(addr)
        self._data[addr] = value