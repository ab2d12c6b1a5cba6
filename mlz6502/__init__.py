"""A small, extensible MOS 6502 CPU emulator: memory bus, addressing modes, opcode table and CPU core."""

__version__ = "0.1.0"