from dataclasses import dataclass, field

from ls8.runtime.memory import Memory
from ls8.runtime.registers import Registers


@dataclass
class MachineState:
    ''' Everything a cycle may mutate '''
    memory: Memory = field(default_factory=Memory)
    regs: Registers = field(default_factory=Registers)
