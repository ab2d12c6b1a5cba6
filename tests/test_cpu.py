import pytest

from mlz6502.bus import read_little_endian
from mlz6502.cpu import Cpu6502
from mlz6502.memory import Memory


def make_cpu(program, at=0x0200):
    memory = Memory()
    memory.load_rom_at(bytes(program), at)
    cpu = Cpu6502(memory)
    cpu.pc = at
    return cpu, memory


def test_initial_state():
    cpu = Cpu6502(Memory())
    assert (cpu.a, cpu.x, cpu.y) == (0, 0, 0)
    assert cpu.p == 0x24
    assert cpu.sp == 0xFD
    assert cpu.cycles == 0


def test_pc_comes_from_reset_vector():
    memory = Memory()
    memory.load_rom_at([0x00, 0x80], 0xFFFC)
    assert Cpu6502(memory).pc == read_little_endian(0x00, 0x80)


def test_initial_flags():
    cpu = Cpu6502(Memory())
    assert cpu.interrupt_disable()
    assert not any(
        flag()
        for flag in (cpu.carry, cpu.zero, cpu.decimal, cpu.break_flag, cpu.overflow, cpu.negative)
    )


def test_run_demo_program(capsys):
    memory = Memory()
    program = [0xA9, 0x69, 0x92]
    memory.load_rom(program)
    cpu = Cpu6502(memory)
    cpu.run()
    assert cpu.a == 0x69
    assert cpu.pc == len(program)
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Warning: illegal instruction 'jam' (0x92)",
        "Debug: magic 'jam' instruction reached. Stopping execution.",
    ]


def test_run_continues_past_other_illegal_opcodes(capsys):
    memory = Memory()
    memory.load_rom([0x00, 0xA9, 0x69, 0x92])
    cpu = Cpu6502(memory)
    cpu.run()
    assert cpu.a == 0x69
    out = capsys.readouterr().out
    assert "Warning: illegal instruction 'jam' (0x00)" in out
    assert out.rstrip().endswith("Stopping execution.")


def test_step_returns_opcode():
    cpu, _ = make_cpu([0xA9, 0x05])
    assert cpu.step() == 0xA9
    assert cpu.a == 0x05


def test_fetch16_is_little_endian():
    cpu, _ = make_cpu([0xCD, 0xAB])
    assert cpu.fetch16() == read_little_endian(0xCD, 0xAB)
    assert cpu.pc == 0x0200 + 2


def test_fetch_wraps_program_counter():
    cpu = Cpu6502(Memory())
    cpu.pc = 0xFFFF
    cpu.fetch()
    assert cpu.pc == 0


def test_push_pop_round_trip():
    cpu, memory = make_cpu([])
    start_sp = cpu.sp
    slot = cpu.stack_addr()
    cpu.push(0xAB)
    assert memory.read(slot) == 0xAB
    assert cpu.sp == (start_sp - 1) & 0xFF
    assert cpu.pop() == 0xAB
    assert cpu.sp == start_sp


def test_stack_is_last_in_first_out():
    cpu, _ = make_cpu([])
    for value in (1, 2, 3):
        cpu.push(value)
    assert [cpu.pop() for _ in range(3)] == [3, 2, 1]


def test_stack_pointer_wraps():
    cpu, _ = make_cpu([])
    cpu.sp = 0
    cpu.push(0x11)
    assert cpu.sp == 0xFF
    assert cpu.pop() == 0x11
    assert cpu.sp == 0


def test_stack_addr_is_in_page_one():
    cpu, _ = make_cpu([])
    cpu.sp = 0x42
    assert cpu.stack_addr() - 0x0100 == cpu.sp


@pytest.mark.parametrize(
    "setter,getter,mask",
    [("set_carry", "carry", 0x01), ("set_zero", "zero", 0x02)],
)
def test_flag_setters(setter, getter, mask):
    cpu = Cpu6502(Memory())
    getattr(cpu, setter)(True)
    assert getattr(cpu, getter)()
    assert cpu.p & mask
    getattr(cpu, setter)(False)
    assert not getattr(cpu, getter)()
    assert cpu.p & ~mask & 0xFF == 0x24 & ~mask


def test_set_negative_copies_bit_seven():
    cpu = Cpu6502(Memory())
    cpu.set_negative(0x80)
    assert cpu.negative()
    cpu.set_negative(0x7F)
    assert not cpu.negative()
    assert cpu.p == 0x24