import numpy as np

from chip8vm.config import WIDTH, HEIGHT
from chip8vm.display import to_rgba, ON, OFF


def test_shape_and_scale():
    vram = np.zeros(WIDTH * HEIGHT, dtype=bool)
    out = to_rgba(vram, scale=3)
    assert out.shape == (HEIGHT * 3, WIDTH * 3, 4)
    assert out.dtype == np.uint8
    assert (out == OFF).all(axis=-1).all()


def test_flip_puts_row_zero_at_bottom():
    vram = np.zeros(WIDTH * HEIGHT, dtype=bool)
    vram[5] = True      # x=5, y=0
    flipped = to_rgba(vram, scale=1)
    assert tuple(flipped[HEIGHT - 1, 5]) == ON
    assert tuple(flipped[0, 5]) == OFF
    upright = to_rgba(vram, scale=1, flip=False)
    assert tuple(upright[0, 5]) == ON


def test_scaled_pixel_is_a_block():
    vram = np.zeros(WIDTH * HEIGHT, dtype=bool)
    vram[1 + WIDTH * 2] = True
    out = to_rgba(vram, scale=2, flip=False)
    assert (out[4:6, 2:4] == ON).all()
    assert int((out[..., 0] == 255).sum()) == 4
