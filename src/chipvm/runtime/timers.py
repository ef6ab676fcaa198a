class Timers():
    ''' Delay and sound countdowns, aged once per frame '''

    delay: int
    sound: int

    def __init__(self):
        self.reset()

    def reset(self):
        self.delay = 0
        self.sound = 0

    def set_delay(self, val: int):
        self.delay = max(0, min(val, 0xFF))

    def set_sound(self, val: int):
        self.sound = max(0, min(val, 0xFF))

    def step(self):
        if self.delay > 0:
            self.delay -= 1

        if self.sound > 0:
            self.sound -= 1

    @property
    def beeping(self) -> bool:
        return self.sound > 0
