''' The VM aggregate: state, loader and frame clock '''

import logging as lg
import random

from chipvm.common.hwconf import KEY_COUNT, ROM_LIMIT
from chipvm.runtime.config import Settings
from chipvm.runtime.cpu import CPU, ByteSource
from chipvm.runtime.display import Display, Frame
from chipvm.runtime.faults import EngineFault, RomTooLarge
from chipvm.runtime.keypad import Keypad
from chipvm.runtime.memory import Memory
from chipvm.runtime.registers import Registers
from chipvm.runtime.timers import Timers


def seeded_bytes(seed: int | None = None) -> ByteSource:
    gen = random.Random(seed)
    return lambda: gen.getrandbits(8)


class Machine():
    settings: Settings
    memory: Memory
    regs: Registers
    timers: Timers
    display: Display
    keypad: Keypad
    cpu: CPU
    program: bytes
    fault: EngineFault | None   # Set once a fault escapes tick()
    frames: int

    def __init__(self, settings: Settings | None = None, rng: ByteSource | None = None):
        self.settings = settings if settings is not None else Settings()

        self.memory = Memory()
        self.regs = Registers()
        self.timers = Timers()
        self.display = Display()
        self.keypad = Keypad()

        self.cpu = CPU(
            self.memory,
            self.regs,
            self.timers,
            self.display,
            self.keypad,
            self.settings.quirks,
            rng if rng is not None else seeded_bytes(self.settings.seed),
            trace=self.settings.trace
        )

        self.program = bytes()
        self.fault = None
        self.frames = 0

    # - Loader - #

    def load_program(self, rom: bytes):
        if len(rom) > ROM_LIMIT:
            raise RomTooLarge(len(rom), ROM_LIMIT)

        self.program = bytes(rom)
        self.reset()

    def reset(self):
        self.memory.clear()
        self.memory.load_program(self.program)
        self.regs.reset()
        self.timers.reset()
        self.display.clear()
        self.keypad.reset()
        self.cpu.reset()
        self.fault = None
        self.frames = 0

    # - Clock - #

    def step(self):
        ''' Execute a single instruction '''
        if self.fault is not None:
            raise self.fault

        try:
            self.cpu.exec_next()
        except EngineFault as e:
            lg.debug(f'Engine fault: {e}')
            self.debug_dump()
            self.fault = e
            raise

    def tick(self, instructions_per_frame: int | None = None):
        if self.fault is not None:
            raise self.fault

        if instructions_per_frame is None:
            instructions_per_frame = self.settings.instructions_per_frame

        for _ in range(instructions_per_frame):
            self.step()

            if self.waiting:
                break

        self.timers.step()
        self.frames += 1

    def run(self, frames: int, instructions_per_frame: int | None = None):
        for _ in range(frames):
            self.tick(instructions_per_frame)

    # - Collaborator interfaces - #

    def framebuffer(self) -> Frame:
        return self.display.snapshot()

    @property
    def sound_timer(self) -> int:
        return self.timers.sound

    @property
    def delay_timer(self) -> int:
        return self.timers.delay

    @property
    def waiting(self) -> bool:
        return self.cpu.waiting is not None

    def set_key_state(self, index: int, pressed: bool):
        self.keypad.set_key(index, pressed)

    def set_keys(self, pressed: set[int]):
        for index in range(KEY_COUNT):
            self.keypad.set_key(index, index in pressed)

    def debug_dump(self):
        lg.debug(f'{self.regs.describe()} DT:{self.timers.delay:02X} ST:{self.timers.sound:02X}')
