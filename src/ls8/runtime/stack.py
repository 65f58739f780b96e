from ls8.common.hwconf import ADDRESS_MASK
from ls8.runtime.state import MachineState


# No overflow checks; SP wraps within the address space

def push_value(state: MachineState, value: int):
    regs = state.regs
    regs.sp = (regs.sp - 1) & ADDRESS_MASK
    state.memory.write(regs.sp, value)


def pop_value(state: MachineState) -> int:
    regs = state.regs
    value = state.memory.read(regs.sp)
    regs.sp = (regs.sp + 1) & ADDRESS_MASK
    return value


def push_register(state: MachineState, reg: int):
    push_value(state, state.regs[reg])


def pop_register(state: MachineState, reg: int):
    state.regs[reg] = pop_value(state)
