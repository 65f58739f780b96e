import tomllib
from pathlib import Path

import ls8.common.hwconf as hw


class EmulatorSettings:
    verbose: bool
    trace: bool
    clock_hz: int
    timer: bool
    timer_period: float

    FIELDS = {
        'verbose': bool,
        'trace': bool,
        'clock_hz': int,
        'timer': bool,
        'timer_period': float,
    }

    def __init__(self):
        self.verbose = False
        self.trace = False
        self.clock_hz = hw.CLOCK_HZ
        self.timer = True
        self.timer_period = hw.TIMER_PERIOD

    def update(
        self,
        verbose: bool | None = None,
        trace: bool | None = None,
        clock_hz: int | None = None,
        timer: bool | None = None,
        timer_period: float | None = None
    ):
        if verbose is not None:
            self.verbose = verbose

        if trace is not None:
            self.trace = trace

        if clock_hz is not None:
            if clock_hz <= 0:
                raise UserWarning(f'Clock frequency must be positive, got {clock_hz}')

            self.clock_hz = clock_hz

        if timer is not None:
            self.timer = timer

        if timer_period is not None:
            if timer_period <= 0:
                raise UserWarning(f'Timer period must be positive, got {timer_period}')

            self.timer_period = timer_period

        return self

    @property
    def clock_period(self) -> float:
        return 1.0 / self.clock_hz


def is_field_type(value, expected: type) -> bool:
    # bool is an int subclass; an int is accepted where a float is expected
    if isinstance(value, bool):
        return expected is bool

    if expected is float:
        return isinstance(value, (int, float))

    return isinstance(value, expected)


def load_settings(path: str | Path, settings: EmulatorSettings | None = None) -> EmulatorSettings:
    if isinstance(path, str):
        path = Path(path)

    if settings is None:
        settings = EmulatorSettings()

    config = tomllib.loads(path.read_text())
    section = config.get('emulator', {})

    unknown = set(section) - set(EmulatorSettings.FIELDS)

    if unknown:
        raise UserWarning(f'Unknown emulator settings {sorted(unknown)} in {path}')

    for key, value in section.items():
        if not is_field_type(value, EmulatorSettings.FIELDS[key]):
            raise UserWarning(f'Setting {key} in {path} must be {EmulatorSettings.FIELDS[key].__name__}, got {value!r}')

    return settings.update(**section)
