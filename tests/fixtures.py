# type: ignore
import pytest

from chipvm.runtime.config import Settings, Quirks
from chipvm.runtime.machine import Machine


@pytest.fixture
def machine():
    yield Machine(Settings(seed=1))


@pytest.fixture
def quirky_machine():
    quirks = Quirks(
        shift_uses_vy=True,
        jump_uses_vx=True,
        load_store_increments_i=True,
        logic_resets_vf=True
    )

    yield Machine(Settings(quirks=quirks, seed=1))
