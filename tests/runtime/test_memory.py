from ls8.runtime.memory import Memory
from ls8.runtime.registers import Registers
from ls8.runtime.state import MachineState
import ls8.runtime.stack as stack
from ls8.common.hwconf import SP_INIT, MEMORY_SIZE


def test_memory_read_write():
    memory = Memory()
    assert len(memory) == MEMORY_SIZE

    memory.write(0x10, 0xAB)
    assert memory.read(0x10) == 0xAB


def test_memory_wraps_addresses_and_truncates_values():
    memory = Memory()
    memory.write(0x101, 0x1FF)
    assert memory.read(0x01) == 0xFF


def test_registers_initial_state():
    regs = Registers()
    assert regs.pc == 0
    assert regs.fl == 0
    assert regs.sp == SP_INIT
    assert regs.ist == 0
    assert len(regs.gp) == 8


def test_push_pop_value():
    state = MachineState()
    stack.push_value(state, 0x42)

    assert state.regs.sp == SP_INIT - 1
    assert state.memory.read(SP_INIT - 1) == 0x42

    assert stack.pop_value(state) == 0x42
    assert state.regs.sp == SP_INIT


def test_push_pop_register():
    state = MachineState()
    state.regs[3] = 99
    stack.push_register(state, 3)
    state.regs[3] = 0
    stack.pop_register(state, 3)

    assert state.regs[3] == 99
    assert state.regs.sp == SP_INIT


def test_stack_pointer_wraps():
    state = MachineState()
    state.regs.sp = 0
    stack.push_value(state, 7)

    assert state.regs.sp == 0xFF
    assert state.memory.read(0xFF) == 7
    assert stack.pop_value(state) == 7
    assert state.regs.sp == 0
