import logging as lg

from chipvm.common.hwconf import MEMORY_SIZE, ADDR_MASK, FONT, FONT_BASE, ROM_BASE


class Memory():
    ram: bytearray

    def __init__(self):
        self.ram = bytearray(MEMORY_SIZE)
        self.write_font()

    def clear(self):
        self.ram[:] = bytes(MEMORY_SIZE)
        self.write_font()

    def write_font(self):
        self.ram[FONT_BASE:FONT_BASE + len(FONT)] = FONT

    def load_program(self, rom: bytes):
        self.ram[ROM_BASE:ROM_BASE + len(rom)] = rom
        lg.info(f'Loaded {len(rom)} byte program at {ROM_BASE:03X}')

    # - Access - #

    def read_byte(self, addr: int) -> int:
        return self.ram[addr & ADDR_MASK]

    def write_byte(self, addr: int, val: int):
        self.ram[addr & ADDR_MASK] = val & 0xFF

    def read_word(self, addr: int) -> int:
        return (self.read_byte(addr) << 8) | self.read_byte(addr + 1)

    def read_block(self, addr: int, count: int) -> bytes:
        return bytes(self.read_byte(addr + offset) for offset in range(count))

    def write_block(self, addr: int, data: bytes):
        for offset, val in enumerate(data):
            self.write_byte(addr + offset, val)
