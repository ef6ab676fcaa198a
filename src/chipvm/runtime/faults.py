class ChipVMError(Exception):
    pass


class RomTooLarge(ChipVMError):
    def __init__(self, size: int, limit: int):
        super().__init__(f'ROM image of {size} bytes exceeds the {limit} byte program region')
        self.size = size
        self.limit = limit


class EngineFault(ChipVMError):
    ''' Fatal to the current run '''
    pass


class UnknownInstruction(EngineFault):
    def __init__(self, word: int, address: int):
        super().__init__(f'Unknown instruction {word:04X} at {address:03X}')
        self.word = word
        self.address = address


class StackOverflow(EngineFault):
    def __init__(self, address: int):
        super().__init__(f'Call stack overflow at {address:03X}')
        self.address = address


class StackUnderflow(EngineFault):
    def __init__(self, address: int):
        super().__init__(f'Return with empty call stack at {address:03X}')
        self.address = address
