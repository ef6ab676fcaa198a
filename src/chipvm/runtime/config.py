''' Runtime settings '''

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
import tomllib
import logging as lg
from typing import Any

from chipvm.common.hwconf import DEFAULT_IPF
from chipvm.runtime.faults import ChipVMError


class ConfigError(ChipVMError):
    pass


@dataclass(frozen=True)
class Quirks:
    shift_uses_vy: bool = False             # 8xy6/8xyE shift Vy into Vx
    jump_uses_vx: bool = False              # Bxnn jumps to xnn + Vx
    load_store_increments_i: bool = False   # Fx55/Fx65 leave I at I + x + 1
    logic_resets_vf: bool = False           # 8xy1/8xy2/8xy3 clear VF


@dataclass(frozen=True)
class Settings:
    instructions_per_frame: int = DEFAULT_IPF
    quirks: Quirks = field(default_factory=Quirks)
    seed: int | None = None
    scale: int = 10
    trace: bool = False

    def update(self, **overrides: Any) -> 'Settings':
        given = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **given)


def _check_table(config: dict[str, Any], section: str) -> dict[str, Any]:
    table = config.get(section, {})

    if not isinstance(table, dict):
        raise ConfigError(f'[{section}] must be a table, got {table!r}')

    return table


def _check_keys(table: dict[str, Any], allowed: set[str], section: str):
    unknown = set(table) - allowed

    if unknown:
        raise ConfigError(f'Unknown keys in [{section}]: {", ".join(sorted(unknown))}')


def _check_count(table: dict[str, Any], key: str):
    val = table.get(key, 1)

    # bool is an int subclass; TOML true/false must not pass as a count
    if isinstance(val, bool) or not isinstance(val, int) or val < 1:
        raise ConfigError(f'{key} must be a positive integer, got {val!r}')


def _check_flag(table: dict[str, Any], key: str):
    val = table.get(key, False)

    if not isinstance(val, bool):
        raise ConfigError(f'{key} must be true or false, got {val!r}')


def parse_settings(config: dict[str, Any]) -> Settings:
    _check_keys(config, {'machine', 'quirks'}, 'root')

    machine = _check_table(config, 'machine')
    quirks = _check_table(config, 'quirks')

    _check_keys(machine, {f.name for f in fields(Settings)} - {'quirks'}, 'machine')
    _check_keys(quirks, {f.name for f in fields(Quirks)}, 'quirks')

    _check_count(machine, 'instructions_per_frame')
    _check_count(machine, 'scale')
    _check_flag(machine, 'trace')

    seed = machine.get('seed')

    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ConfigError(f'seed must be an integer, got {seed!r}')

    for name in quirks:
        _check_flag(quirks, name)

    return Settings(**machine).update(quirks=Quirks(**quirks))


def load_settings(path: str | Path) -> Settings:
    if isinstance(path, str):
        path = Path(path)

    lg.debug(f'Loading settings from {path}')

    try:
        config = tomllib.loads(path.read_text())
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f'{path}: {e}') from e

    return parse_settings(config)
