import logging as lg

from ls8.common.hwconf import GP_REGS, SP_REG, IS_REG, SP_INIT


class Registers:
    pc: int         # Program counter
    fl: int         # Flags
    gp: list[int]   # General purpose registers, R6 is IS, R7 is SP

    def __init__(self):
        self.pc = 0
        self.fl = 0
        self.gp = [0] * GP_REGS
        self.gp[SP_REG] = SP_INIT

    @property
    def sp(self) -> int:
        return self.gp[SP_REG]

    @sp.setter
    def sp(self, value: int):
        self.gp[SP_REG] = value

    @property
    def ist(self) -> int:
        return self.gp[IS_REG]

    @ist.setter
    def ist(self, value: int):
        self.gp[IS_REG] = value

    def __getitem__(self, index: int) -> int:
        return self.gp[index]

    def __setitem__(self, index: int, value: int):
        self.gp[index] = value

    def debug_dump(self):
        state = [f'PC:{self.pc:02X}', f'FL:{self.fl:02X}']
        state.extend([f'R{i}:{self.gp[i]:02X}' for i in range(len(self.gp))])
        lg.debug(' '.join(state))
