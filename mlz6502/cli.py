"""Command that runs a tiny built-in program and reports the CPU state."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .cpu import Cpu6502
from .memory import Memory

DEMO_PROGRAM = bytes([0xA9, 0x69, 0x92])
EXPECTED_A = 0x69


def flag_str(flag: bool) -> str:
    """Prefix for a flag name: empty when set, ``!`` when clear."""
    return "" if flag else "!"


def describe_state(cpu: Cpu6502) -> str:
    """Render the registers and status flags of ``cpu`` as indented lines."""
    flags = " | ".join(
        f"{flag_str(is_set)}{letter}"
        for letter, is_set in (
            ("C", cpu.carry()),
            ("Z", cpu.zero()),
            ("I", cpu.interrupt_disable()),
            ("D", cpu.decimal()),
            ("B", cpu.break_flag()),
            ("V", cpu.overflow()),
            ("N", cpu.negative()),
        )
    )
    return "\n".join(
        (
            f"  a = {cpu.a:02x}",
            f"  x = {cpu.x:02x}",
            f"  y = {cpu.y:02x}",
            f"  p = {flags}",
            f"  sp = {cpu.sp:02x}",
            f"  pc = {cpu.pc:04x}",
        )
    )


def _result_message(cpu: Cpu6502) -> str:
    if cpu.a == EXPECTED_A:
        return "Register A is 0x69. Execution successful!"
    return "Register A is not 0x69. Execution failed :("


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo program, print the final CPU state and the verdict."""
    parser = argparse.ArgumentParser(
        prog="mlz6502",
        description="Run a small 6502 program and print the resulting CPU state.",
    )
    parser.parse_args(argv)

    memory = Memory()
    memory.load_rom(DEMO_PROGRAM)
    cpu = Cpu6502(memory)

    cpu.run()
    print("Execution finished.")
    print("\nCPU state:")
    print(describe_state(cpu))
    print()
    print(_result_message(cpu))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())