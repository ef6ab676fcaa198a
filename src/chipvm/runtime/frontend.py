'''
pygame window, keyboard and beeper around a Machine.

The machine never sees pygame: each frame the frontend writes the key
table, calls tick(), then reads the framebuffer and the sound timer.

Keypad layout:

    1 2 3 C        1 2 3 4
    4 5 6 D   <-   Q W E R
    7 8 9 E        A S D F
    A 0 B F        Z X C V
'''

import os
import logging as lg
from array import array

os.environ.setdefault('PYGAME_HIDE_SUPPORT_PROMPT', '1')
import pygame  # noqa: E402

from chipvm.common.hwconf import DISPLAY_WIDTH, DISPLAY_HEIGHT, TIMER_HZ  # noqa: E402
from chipvm.runtime.machine import Machine  # noqa: E402


KEY_MAP = {
    pygame.K_1: 0x1, pygame.K_2: 0x2, pygame.K_3: 0x3, pygame.K_4: 0xC,
    pygame.K_q: 0x4, pygame.K_w: 0x5, pygame.K_e: 0x6, pygame.K_r: 0xD,
    pygame.K_a: 0x7, pygame.K_s: 0x8, pygame.K_d: 0x9, pygame.K_f: 0xE,
    pygame.K_z: 0xA, pygame.K_x: 0x0, pygame.K_c: 0xB, pygame.K_v: 0xF,
}

FG_COLOR = (0, 255, 128)
BG_COLOR = (15, 15, 25)

SAMPLE_RATE = 44100
TONE_HZ = 440
TONE_VOLUME = 4000


def square_wave(freq: int = TONE_HZ, rate: int = SAMPLE_RATE) -> array:
    period = rate // freq
    half = period // 2
    return array('h', [TONE_VOLUME if n < half else -TONE_VOLUME for n in range(period)])


class PygameFrontend():
    machine: Machine
    scale: int
    title: str
    running: bool
    tone: pygame.mixer.Sound | None    # None when audio is unavailable
    beeping: bool
    screen: pygame.Surface
    clock: pygame.time.Clock

    def __init__(self, machine: Machine, scale: int = 10, title: str = 'CHIPVM'):
        self.machine = machine
        self.scale = scale
        self.title = title
        self.running = False
        self.tone = None
        self.beeping = False

    def open(self):
        pygame.init()
        pygame.display.set_caption(self.title)
        self.screen = pygame.display.set_mode((DISPLAY_WIDTH * self.scale, DISPLAY_HEIGHT * self.scale))
        self.clock = pygame.time.Clock()

        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            self.tone = pygame.mixer.Sound(buffer=square_wave().tobytes())
        except pygame.error as e:
            lg.warning(f'Audio unavailable, running silent: {e}')
            self.tone = None

        self.running = True

    def close(self):
        self.running = False
        pygame.quit()

    # - Collaborators - #

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key in KEY_MAP:
                    self.machine.set_key_state(KEY_MAP[event.key], True)

            elif event.type == pygame.KEYUP:
                if event.key in KEY_MAP:
                    self.machine.set_key_state(KEY_MAP[event.key], False)

    def draw(self):
        self.screen.fill(BG_COLOR)
        s = self.scale

        for y, row in enumerate(self.machine.framebuffer()):
            for x, lit in enumerate(row):
                if lit:
                    self.screen.fill(FG_COLOR, pygame.Rect(x * s, y * s, s, s))

        pygame.display.flip()

    def beep(self):
        if self.tone is None:
            return

        on = self.machine.sound_timer > 0

        if on and not self.beeping:
            self.tone.play(loops=-1)
        elif not on and self.beeping:
            self.tone.stop()

        self.beeping = on

    # -- Implementation -- #

    def run(self, frames: int | None = None):
        self.open()

        try:
            while self.running:
                self.handle_events()

                if not self.running:
                    break

                self.machine.tick()
                self.draw()
                self.beep()
                self.clock.tick(TIMER_HZ)

                if frames is not None and self.machine.frames >= frames:
                    break
        finally:
            self.close()
