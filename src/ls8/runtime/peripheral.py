import logging as lg
import threading as th
from typing import Mapping, TYPE_CHECKING

from ls8.common.hwconf import TIMER_INT, TIMER_PERIOD

if TYPE_CHECKING:
    from ls8.runtime.cpu import CPU


class Peripheral(th.Thread):
    ''' External device; talks to the core only through IS '''

    def __init__(self, cpu: 'CPU'):
        super().__init__(daemon=True)
        self.cpu = cpu
        self.stop_event = th.Event()

    def stop(self):
        self.stop_event.set()

    def signal(self, bits: int):
        self.cpu.request_interrupt(bits)

    def run(self):
        while not self.stop_event.is_set():
            self.step()

        self.on_stop()
        lg.debug(f'Peripheral {self.name} stop')

    def step(self):
        self.stop_event.wait()

    def on_stop(self):
        pass


class SysTimer(Peripheral):
    def __init__(self, cpu: 'CPU', period: float = TIMER_PERIOD):
        super().__init__(cpu)
        self.name = 'ls8-systimer'
        self.period = period
        self.fired = 0

    def step(self):
        if self.stop_event.wait(self.period):
            return

        self.fired += 1
        self.signal(TIMER_INT)


Peripherals = Mapping[str, Peripheral]
