import time

import pytest

import ls8.common.ops as ops
import ls8.runtime.cpu as cpu
from ls8.runtime.peripheral import SysTimer
from ls8.common.hwconf import TIMER_INT

from unit_utils import make_cpu


def test_clock_stops_on_halt():
    proc = make_cpu([ops.LDI, 0, 1, ops.HLT])
    proc.start(hz=10000)

    with pytest.raises(cpu.Halt):
        proc.wait(timeout=5)

    assert not proc.clock.is_alive()
    assert proc.clock.ticks == 2


def test_clock_stops_on_invalid_instruction():
    proc = make_cpu([0b11111111])
    proc.start(hz=10000)

    with pytest.raises(cpu.InvalidInstruction):
        proc.wait(timeout=5)

    assert proc.clock.ticks == 1


def test_external_stop():
    proc = make_cpu([ops.LDI, 0, 0, ops.JMP, 0])
    proc.start(hz=10000)
    time.sleep(0.05)
    proc.stop()
    proc.wait(timeout=5)

    assert not proc.clock.is_alive()
    assert not proc.halted
    assert proc.clock.ticks > 1


def test_clock_error_is_reraised():
    proc = make_cpu([ops.PRN, 0, ops.HLT])

    def broken_output(text: str):
        raise RuntimeError('sink failed')

    proc.output = broken_output
    proc.start(hz=10000)

    with pytest.raises(RuntimeError):
        proc.wait(timeout=5)


def test_systimer_sets_interrupt_status():
    proc = make_cpu([])
    timer = SysTimer(proc, period=0.01)
    timer.start()
    time.sleep(0.1)
    timer.stop()
    timer.join(timeout=5)

    assert not timer.is_alive()
    assert timer.fired > 0
    assert proc.regs.ist & TIMER_INT
