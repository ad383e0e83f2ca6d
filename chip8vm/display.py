import numpy as np

from .config import WIDTH, HEIGHT, scale as default_scale

ON = (255, 255, 255, 255)
OFF = (0, 0, 0, 255)


def to_rgba(vram, scale=default_scale, flip=True, on=ON, off=OFF):
    """Turn a 64x32 framebuffer into an RGBA block upscaled by ``scale``.

    ``flip`` puts row 0 at the bottom, which is what pyglet's ImageData
    expects. Returns a (HEIGHT*scale, WIDTH*scale, 4) uint8 array.
    """
    grid = np.asarray(vram, dtype=bool).reshape(HEIGHT, WIDTH)
    if flip:
        grid = grid[::-1]
    small = np.where(grid[..., None],
                     np.array(on, dtype=np.uint8),
                     np.array(off, dtype=np.uint8)).astype(np.uint8)
    if scale != 1:
        return np.repeat(np.repeat(small, scale, axis=0), scale, axis=1)
    return small
