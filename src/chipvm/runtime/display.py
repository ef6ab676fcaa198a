from chipvm.common.hwconf import DISPLAY_WIDTH, DISPLAY_HEIGHT
from typing import TypeAlias


Frame: TypeAlias = tuple[tuple[bool, ...], ...]


class Display():
    ''' Monochrome framebuffer, row-major '''

    width: int
    height: int
    pixels: list[list[bool]]

    def __init__(self, width: int = DISPLAY_WIDTH, height: int = DISPLAY_HEIGHT):
        self.width = width
        self.height = height
        self.clear()

    def clear(self):
        self.pixels = [[False] * self.width for _ in range(self.height)]

    def draw_sprite(self, x: int, y: int, rows: bytes) -> bool:
        '''
        XOR each sprite row into the grid at (x, y), wrapping at both edges.
        Returns True when a lit pixel was turned off.
        '''
        collision = False

        for dy, bits in enumerate(rows):
            row = self.pixels[(y + dy) % self.height]

            for dx in range(8):
                if not bits & (0x80 >> dx):
                    continue

                col = (x + dx) % self.width

                if row[col]:
                    collision = True

                row[col] = not row[col]

        return collision

    def snapshot(self) -> Frame:
        return tuple(tuple(row) for row in self.pixels)

    def render_text(self, on: str = '#', off: str = '.') -> str:
        return '\n'.join(
            ''.join(on if pixel else off for pixel in row)
            for row in self.pixels
        )
