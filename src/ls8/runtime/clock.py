import time
import logging as lg
import threading as th
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ls8.runtime.cpu import CPU


class Clock(th.Thread):
    ''' Ticks the CPU at a fixed period until stopped or halted '''

    def __init__(self, cpu: 'CPU', period: float):
        super().__init__(name='ls8-clock', daemon=True)
        self.cpu = cpu
        self.period = period
        self.stop_event = th.Event()
        self.error: Exception | None = None
        self.ticks = 0

    def stop(self):
        self.stop_event.set()

    def run(self):
        lg.info(f'Clock started, period {self.period * 1000:.3f} ms')
        deadline = time.monotonic()

        try:
            while not self.stop_event.is_set():
                with self.cpu.lock:
                    self.cpu.tick()

                self.ticks += 1

                if self.cpu.halted:
                    break

                # Late ticks are not caught up
                deadline = max(deadline + self.period, time.monotonic())
                self.stop_event.wait(max(0.0, deadline - time.monotonic()))

        except Exception as e:
            lg.error(f'Clock stopped on error {e}')
            self.error = e

        lg.info(f'Clock stopped after {self.ticks} ticks')
