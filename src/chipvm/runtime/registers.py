from chipvm.common.hwconf import GP_REGS, STACK_DEPTH, ROM_BASE, ADDR_MASK, WORD_SIZE
from chipvm.runtime.faults import StackOverflow, StackUnderflow


class Registers():
    v: list[int]        # General purpose V0..VF
    i: int              # Index register
    pc: int             # Program counter
    sp: int             # Stack pointer
    stack: list[int]    # Return addresses

    def __init__(self):
        self.reset()

    def reset(self):
        self.v = [0] * GP_REGS
        self.i = 0
        self.pc = ROM_BASE
        self.sp = 0
        self.stack = [0] * STACK_DEPTH

    def jump(self, addr: int):
        self.pc = addr & ADDR_MASK

    def advance(self, count: int = 1):
        self.jump(self.pc + WORD_SIZE * count)

    def push(self, addr: int, at: int):
        if self.sp >= STACK_DEPTH:
            raise StackOverflow(at)

        self.stack[self.sp] = addr & ADDR_MASK
        self.sp += 1

    def pop(self, at: int) -> int:
        if self.sp == 0:
            raise StackUnderflow(at)

        self.sp -= 1
        return self.stack[self.sp]

    def describe(self) -> str:
        state = [f'PC:{self.pc:03X}', f'I:{self.i:04X}', f'SP:{self.sp}']
        state.extend(f'V{n:X}:{val:02X}' for n, val in enumerate(self.v))

        calls = ' '.join(f'{addr:03X}' for addr in self.stack[:self.sp])
        state.append(f'stack:[{calls}]')

        return ' '.join(state)
