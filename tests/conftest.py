import random

import pytest

from chip8vm import Chip8


def program(*words):
    """Assemble 16-bit words into a big-endian ROM."""
    return b"".join(w.to_bytes(2, "big") for w in words)


@pytest.fixture
def vm():
    return Chip8(rng=random.Random(1234))


@pytest.fixture
def run(vm):
    """Reset, load the given words and execute one tick per word."""
    def _run(*words, ticks=None):
        vm.reset()
        vm.load(program(*words))
        for _ in range(len(words) if ticks is None else ticks):
            vm.tick()
        return vm
    return _run
