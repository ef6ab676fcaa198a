from chipvm.common.hwconf import KEY_COUNT


class Keypad():
    keys: list[bool]
    previous: list[bool]    # State at the last key-wait poll

    def __init__(self):
        self.reset()

    def reset(self):
        self.keys = [False] * KEY_COUNT
        self.previous = [False] * KEY_COUNT

    def set_key(self, index: int, pressed: bool):
        if not 0 <= index < KEY_COUNT:
            raise ValueError(f'Key index {index} out of range')

        self.keys[index] = pressed

    def is_pressed(self, index: int) -> bool:
        return self.keys[index & 0xF]

    def arm(self):
        self.previous = list(self.keys)

    def poll_press(self) -> int | None:
        ''' Lowest key that went down since the last poll '''
        pressed = None

        for index, (was, now) in enumerate(zip(self.previous, self.keys)):
            if now and not was:
                pressed = index
                break

        self.previous = list(self.keys)
        return pressed
