# pyglet host for the CHIP-8 core.
# We subclass pyglet (graphics, sound output and keyboard handling) and
# override whatever we need from there. The core never imports this module.

import sys
import random

import pyglet
from pyglet.window import key
from pyglet.media import synthesis

from . import config
from .config import WIDTH, HEIGHT, scale, CPU_HZ, TIMER_HZ, key_index, log, set_logs
from .cpu import Chip8
from .display import to_rgba
from .errors import Chip8Error

window_width, window_height = WIDTH * scale, HEIGHT * scale


def keypad_index(symbol):
    # pyglet names digits "_1".."_9" and letters "A".."Z"
    return key_index(key.symbol_string(symbol).lstrip("_"))


class Chip8Window(pyglet.window.Window):

    def __init__(self, vm, romname="", cpu_hz=CPU_HZ, timer_hz=TIMER_HZ):
        super().__init__(
            width=window_width,
            height=window_height,
            caption="CHIP-8 Emulator - %s" % romname if romname else "CHIP-8 Emulator",
            vsync=False
        )
        self.vm = vm
        self.sound_playing = False

        # Performance tracking
        self._cps_counter = 0
        self.cps_label = pyglet.text.Label(
            "Cycles/s: 0",
            font_size=12,
            x=5,
            y=window_height - 15,
            anchor_x='left',
            anchor_y='center',
            color=(255, 255, 255, 255)
        )

        # creating ImageData once, updated in place every frame
        self.image = pyglet.image.ImageData(
            window_width,
            window_height,
            'RGBA',
            to_rgba(self.vm.snapshot()).tobytes()
        )

        # Schedule the loops
        pyglet.clock.schedule_interval(self._cpu_tick, 1 / cpu_hz)
        pyglet.clock.schedule_interval(self._timer_tick, 1 / timer_hz)
        pyglet.clock.schedule_interval(self._update_cps, 1.0)

    # ---- CPU cycle ----
    def _cpu_tick(self, dt):
        if self.vm.halted:
            return
        try:
            self.vm.tick()
            self._cps_counter += 1
        except Chip8Error as e:
            print("Emulation error:", e)
            self.close()

    # ---- timers ----
    def _timer_tick(self, dt):
        self.vm.tick_timers()
        if self.vm.sound_active:
            # Play beep only if it hasn't started yet
            if not self.sound_playing:
                self._play_beep()
        else:
            self.sound_playing = False

    def _update_cps(self, dt):
        self.cps_label.text = f"Cycles/s: {self._cps_counter}"
        self._cps_counter = 0

    # sound
    def _play_beep(self, duration=0.2, frequency=440, pitch_variation=15):
        freq = frequency + random.randint(-pitch_variation, pitch_variation)
        wave = synthesis.Sine(duration=duration, frequency=freq, sample_rate=44100)
        player = pyglet.media.Player()
        player.queue(wave)
        player.play()
        self.sound_playing = True

        def on_eos():
            self.sound_playing = False
            player.delete()

        player.on_eos = on_eos

    # ---- Drawing ----
    def on_draw(self):
        self.clear()
        self.image.set_data('RGBA', window_width * 4, to_rgba(self.vm.snapshot()).tobytes())
        self.image.blit(0, 0)
        if config.logs_on:
            self.cps_label.draw()

    # ---- Input ----
    def on_key_press(self, symbol, modifiers):
        if symbol == key.ESCAPE:
            self.close()
        elif symbol == key.F1:
            log("logsOn:", set_logs(not config.logs_on))
        else:
            index = keypad_index(symbol)
            if index is not None:
                self.vm.key_event(index, True)

    def on_key_release(self, symbol, modifiers):
        index = keypad_index(symbol)
        if index is not None:
            self.vm.key_event(index, False)


# ---- Entry point ----
def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("Usage: python -m chip8vm <rom-file>")
        sys.exit(1)
    romname = argv[0]
    with open(romname, "rb") as f:
        rom = f.read()
    vm = Chip8()
    vm.load(rom)
    Chip8Window(vm, romname)
    pyglet.app.run()
