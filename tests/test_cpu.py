import random

import pytest

from chip8vm import (
    Chip8, UnimplementedOpcode, MemoryOutOfBounds, StackOverflow,
    StackUnderflow, LoadTooLarge,
)

from conftest import program


def test_load_writes_exactly_the_rom(vm):
    before = bytes(vm.memory)
    rom = bytes(range(1, 38))
    vm.load(rom)
    after = bytes(vm.memory)
    assert after[0x200:0x200 + len(rom)] == rom
    assert after[:0x200] == before[:0x200]
    assert after[0x200 + len(rom):] == before[0x200 + len(rom):]


def test_load_fills_memory_to_the_end(vm):
    vm.load(b"\xAB" * (4096 - 0x200))
    assert vm.memory[0xFFF] == 0xAB


def test_load_too_large(vm):
    with pytest.raises(LoadTooLarge) as exc:
        vm.load(b"\x00" * (4096 - 0x200 + 1))
    assert exc.value.size == 3585
    assert not any(vm.memory[0x200:])


def test_fetch_is_big_endian(vm):
    vm.load(b"\x12\x34")
    assert vm.fetch() == 0x1234
    assert vm.pc == 0x202


def test_tick_executes_one_instruction(vm):
    vm.load(program(0x6001, 0x6102))
    vm.tick()
    assert vm.V[:2] == [1, 0]
    assert vm.pc == 0x202


def test_unimplemented_opcode_halts(vm):
    vm.load(program(0x6001, 0x0123))
    vm.tick()
    with pytest.raises(UnimplementedOpcode) as exc:
        vm.tick()
    assert exc.value.opcode == 0x0123
    assert exc.value.address == 0x202
    assert vm.halted
    assert vm.pc == 0x202

    with pytest.raises(UnimplementedOpcode):
        vm.tick()
    assert vm.pc == 0x202

    vm.reset()
    assert not vm.halted
    assert vm.pc == 0x200


def test_fetch_past_end_of_memory(vm):
    vm.load(program(0x1FFF))
    vm.tick()
    assert vm.pc == 0xFFF
    with pytest.raises(MemoryOutOfBounds):
        vm.tick()
    assert vm.pc == 0xFFF


def test_stack_overflow_after_sixteen_calls(vm):
    vm.load(program(0x2200))
    for _ in range(16):
        vm.tick()
    assert vm.sp == 16
    with pytest.raises(StackOverflow):
        vm.tick()
    assert vm.sp == 16
    assert vm.pc == 0x200


def test_return_with_empty_stack(vm):
    vm.load(program(0x00EE))
    with pytest.raises(StackUnderflow):
        vm.tick()
    assert vm.pc == 0x200


def test_key_event(vm):
    vm.key_event(0xF, True)
    assert vm.keys[0xF]
    vm.key_event(0xF, False)
    assert not vm.keys.any()


@pytest.mark.parametrize("index", [-1, 16])
def test_key_event_rejects_bad_index(vm, index):
    with pytest.raises(ValueError):
        vm.key_event(index, True)


def test_key_event_by_name(vm):
    assert vm.key_event_by_name("Q", True)
    assert vm.keys[0x4]
    assert vm.key_event_by_name("x", True)
    assert vm.keys[0x0]
    assert not vm.key_event_by_name("p", True)


def test_snapshot_is_a_copy(vm):
    shot = vm.snapshot()
    assert shot.shape == (2048,)
    shot[0] = True
    assert not vm.vram[0]


def test_timers_stop_at_zero():
    vm = Chip8()
    vm.delay_timer = 1
    vm.tick_timers()
    vm.tick_timers()
    assert vm.delay_timer == 0
    assert vm.sound_timer == 0


def test_reset_keeps_the_random_stream_going(vm):
    expected = random.Random(1234)
    vm.load(program(0xC0FF))
    vm.tick()
    assert vm.V[0] == expected.getrandbits(8)
    vm.reset()
    vm.load(program(0xC0FF))
    vm.tick()
    assert vm.V[0] == expected.getrandbits(8)
