import logging as lg
from enum import Enum

from ls8.common.hwconf import GP_REGS, INT_VECT_BASE
from ls8.runtime.state import MachineState
import ls8.runtime.stack as stack


class IntState(Enum):
    IDLE = 0
    SERVICING = 1


class InterruptController:
    ''' Polls IS once per cycle and diverts to the handler at INT_VECT_BASE

    Every pending pattern goes to the same handler. FL is not part of the
    saved context; a handler restores the rest with POPs and a RET.
    '''
    state: IntState

    def __init__(self):
        self.state = IntState.IDLE

    def check(self, machine: MachineState) -> bool:
        regs = machine.regs

        if regs.ist == 0:
            return False

        self.state = IntState.SERVICING
        pending = regs.ist
        old_pc = regs.pc

        # Save context
        stack.push_value(machine, regs.pc)

        for i in range(0, GP_REGS, 1):
            stack.push_register(machine, i)

        regs.ist = 0

        regs.pc = machine.memory.read(INT_VECT_BASE)

        lg.debug(f'INT {pending:08b} PC:{old_pc:02X} -> {regs.pc:02X}')

        self.state = IntState.IDLE
        return True
