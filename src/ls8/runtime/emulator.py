import sys
from pathlib import Path
import logging as lg
import traceback

import click

from ls8.common.config import EmulatorSettings, load_settings
from ls8.runtime.memory import Memory
from ls8.runtime.peripheral import Peripherals, SysTimer
import ls8.runtime.cpu as cpu
import ls8.asm.loader as loader


EXIT_HALT = 0
EXIT_INVALID_INSTRUCTION = 1
EXIT_KEYBOARD = 3
EXIT_EXEC_ERROR = 100


def start_pp(pp: Peripherals):
    for p in pp.values():
        p.start()


def stop_pp(pp: Peripherals):
    for p in pp.values():
        p.stop()
        p.join()


def make_peripherals(proc: cpu.CPU, settings: EmulatorSettings) -> Peripherals:
    pp = {}

    if settings.timer:
        pp['timer'] = SysTimer(proc, settings.timer_period)

    return pp


def execute(program: bytes, settings: EmulatorSettings | None = None,
            output: cpu.Output = cpu.console):
    if settings is None:
        settings = EmulatorSettings()

    memory = Memory()
    proc = cpu.CPU(memory, output=output, trace=settings.trace)
    loader.load_into(proc, program)

    pp = make_peripherals(proc, settings)

    try:
        start_pp(pp)
        proc.start(settings.clock_hz)
        proc.wait()

    finally:
        proc.stop()
        stop_pp(pp)


@click.command()
@click.option('-v', '--verbose', is_flag=True, default=None, help='Sets logging level to debug')
@click.option('--config', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='TOML file with an [emulator] table')
@click.option('--trace', is_flag=True, default=None, help='Log machine state every cycle')
@click.option('--hz', 'clock_hz', type=click.IntRange(min=1), help='Clock frequency')
@click.option('--timer/--no-timer', default=None, help='Enable the system timer interrupt')
@click.option('--timer-period', type=float, help='System timer period in seconds')
@click.argument('program_filename', type=Path)
def run(config: Path | None, program_filename: Path, **params):
    try:
        settings = EmulatorSettings()

        if config is not None:
            settings = load_settings(config, settings)

        settings.update(**params)

        lg.basicConfig(level=lg.DEBUG if settings.verbose or settings.trace else lg.INFO)
        lg.info("LS8")

        program = loader.load_program(program_filename)
        sys.exit(execute(program, settings))

    except cpu.Halt:
        lg.info('Execution halted gracefully')
        sys.exit(EXIT_HALT)

    except cpu.InvalidInstruction as e:
        lg.info(f'Execution halted on invalid instruction {e.opcode:08b}')
        sys.exit(EXIT_INVALID_INSTRUCTION)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        return sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        return sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
