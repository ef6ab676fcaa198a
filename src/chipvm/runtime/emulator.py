import sys
from pathlib import Path
import logging as lg
import traceback

import click

from chipvm.runtime.config import Settings, ConfigError, load_settings
from chipvm.runtime.faults import EngineFault, RomTooLarge
from chipvm.runtime.machine import Machine


EXIT_HALT = 0
EXIT_ROM_ERROR = 1
EXIT_KEYBOARD = 3
EXIT_ENGINE_FAULT = 4
EXIT_EXEC_ERROR = 100


def create_machine(rom: bytes, settings: Settings | None = None) -> Machine:
    machine = Machine(settings)
    machine.load_program(rom)
    return machine


def execute(rom: bytes, settings: Settings | None = None, frames: int | None = None) -> Machine:
    ''' Run headless until the frame budget is spent '''
    machine = create_machine(rom, settings)

    if frames is None:
        while True:
            machine.tick()

    machine.run(frames)
    return machine


def execute_window(rom: bytes, settings: Settings, frames: int | None = None) -> Machine:
    from chipvm.runtime.frontend import PygameFrontend

    machine = create_machine(rom, settings)
    PygameFrontend(machine, settings.scale).run(frames)
    return machine


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-c', '--config', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='TOML settings file')
@click.option('--ipf', type=click.IntRange(min=1), help='Instructions per frame')
@click.option('--scale', type=click.IntRange(min=1), help='Window pixels per CHIP-8 pixel')
@click.option('--seed', type=int, help='Seed for the random byte source')
@click.option('--trace', is_flag=True, help='Log every executed instruction')
@click.option('--headless', is_flag=True, help='Run without a window and print the final display')
@click.option('--frames', type=click.IntRange(min=0), help='Stop after this many frames')
@click.argument('rom_filename', type=Path)
def run(
    verbose: bool,
    config: Path | None,
    ipf: int | None,
    scale: int | None,
    seed: int | None,
    trace: bool,
    headless: bool,
    frames: int | None,
    rom_filename: Path
):
    lg.basicConfig(level=lg.DEBUG if verbose or trace else lg.INFO)
    lg.info('CHIPVM')

    try:
        settings = load_settings(config) if config is not None else Settings()
        settings = settings.update(instructions_per_frame=ipf, scale=scale, seed=seed, trace=trace or None)

        rom = rom_filename.read_bytes()

        if headless:
            if frames is None:
                raise click.UsageError('--headless needs --frames')

            machine = execute(rom, settings, frames)
            click.echo(machine.display.render_text())
        else:
            execute_window(rom, settings, frames)

        lg.info('Execution halted gracefully')
        sys.exit(EXIT_HALT)

    except (OSError, RomTooLarge, ConfigError) as e:
        lg.info(f'Cannot start: {e}')
        sys.exit(EXIT_ROM_ERROR)

    except EngineFault as e:
        lg.info(f'Execution halted on engine fault: {e}')
        sys.exit(EXIT_ENGINE_FAULT)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except (click.ClickException, click.exceptions.Exit):
        raise

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
