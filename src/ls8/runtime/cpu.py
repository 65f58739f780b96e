import sys
import logging as lg
import threading as th
from typing import Callable

import ls8.common.ops as ops
from ls8.common.hwconf import FL_EQUAL, FL_GREATER, FL_LESS, CLOCK_HZ, BYTE_MASK
from ls8.runtime.state import MachineState
from ls8.runtime.memory import Memory
from ls8.runtime.interrupts import InterruptController
from ls8.runtime.clock import Clock
import ls8.runtime.alu as alu
import ls8.runtime.stack as stack


Output = Callable[[str], None]


class Halt(Exception):
    pass


class InvalidInstruction(Exception):
    def __init__(self, opcode: int, pc: int):
        super().__init__(f'{opcode:08b} (0x{opcode:02X}) at 0x{pc:02X} is not a valid instruction')
        self.opcode = opcode
        self.pc = pc


def console(text: str):
    sys.stdout.write(text)
    sys.stdout.flush()


class CPU():
    def __init__(self, memory: Memory, output: Output = console, trace: bool = False):
        self.state = MachineState(memory=memory)
        self.regs = self.state.regs
        self.memory = memory
        self.output = output
        self.trace = trace

        self.intc = InterruptController()
        self.lock = th.Lock()       # A tick and an external IS write never overlap
        self.clock: Clock | None = None
        self.fault: Exception | None = None

    @property
    def halted(self) -> bool:
        return self.fault is not None

    # - Lifecycle - #

    def poke(self, addr: int, value: int):
        self.memory.write(addr, value)

    def start(self, hz: int = CLOCK_HZ):
        self.clock = Clock(self, 1.0 / hz)
        self.clock.start()

    def stop(self):
        if self.clock is not None:
            self.clock.stop()

    def wait(self, timeout: float | None = None):
        if self.clock is not None:
            self.clock.join(timeout)

            if self.clock.error is not None:
                raise self.clock.error

        if self.fault is not None:
            raise self.fault

    def halt(self, reason: Exception):
        self.fault = reason
        self.stop()

    def request_interrupt(self, bits: int):
        with self.lock:
            self.regs.ist |= bits

    # - Operations - #

    def hlt(self):
        self.halt(Halt())

    def ldi(self, reg: int, value: int):
        self.regs[reg] = value

    def st(self, reg_a: int, reg_b: int):
        self.memory.write(self.regs[reg_a], self.regs[reg_b])

    def prn(self, reg: int):
        self.output(f'{self.regs[reg]}\n')

    def pra(self, reg: int):
        self.output(chr(self.regs[reg] & BYTE_MASK))

    def push(self, reg: int):
        stack.push_register(self.state, reg)

    def pop(self, reg: int):
        stack.pop_register(self.state, reg)

    def call(self, reg: int):
        stack.push_value(self.state, self.regs.pc + 2)
        self.regs.pc = self.regs[reg]

    def ret(self):
        self.regs.pc = stack.pop_value(self.state)

    def jmp(self, reg: int):
        self.regs.pc = self.regs[reg]

    def jump_if(self, cond: bool, reg: int):
        if cond:
            self.jmp(reg)
        else:
            self.regs.pc += 2

    def jeq(self, reg: int):
        self.jump_if((self.regs.fl & FL_EQUAL) != 0, reg)

    def jne(self, reg: int):
        self.jump_if((self.regs.fl & FL_EQUAL) == 0, reg)

    def jlt(self, reg: int):
        self.jump_if((self.regs.fl & FL_LESS) != 0, reg)

    def jgt(self, reg: int):
        self.jump_if((self.regs.fl & FL_GREATER) != 0, reg)

    # - Arithmetic - #

    def add(self, reg_a: int, reg_b: int):
        self.regs[reg_a] = alu.add(self.regs[reg_a], self.regs[reg_b])

    def mul(self, reg_a: int, reg_b: int):
        self.regs[reg_a] = alu.multiply(self.regs[reg_a], self.regs[reg_b])

    def cmp(self, reg_a: int, reg_b: int):
        self.regs.fl = alu.compare(self.regs[reg_a], self.regs[reg_b])

    HANDLERS = {
        ops.HLT: hlt,
        ops.RET: ret,
        ops.PRA: pra,
        ops.PRN: prn,
        ops.CALL: call,
        ops.POP: pop,
        ops.PUSH: push,
        ops.JMP: jmp,
        ops.JEQ: jeq,
        ops.JNE: jne,
        ops.JLT: jlt,
        ops.JGT: jgt,
        ops.LDI: ldi,
        ops.ST: st,

        ops.CMP: cmp,
        ops.ADD: add,
        ops.MUL: mul,
    }

    # -- Implementation -- #

    def debug_trace(self, op: int, operand_a: int, operand_b: int):
        lg.debug(f'{self.regs.pc:02X} | {op:02X} {operand_a:02X} {operand_b:02X} | {ops.NAMES.get(op, "???")}')
        self.regs.debug_dump()

    def tick(self):
        if self.halted:
            return

        self.intc.check(self.state)

        pc = self.regs.pc
        op = self.memory.read(pc)
        # Both operand bytes are read for every instruction; addresses wrap
        operands = (self.memory.read(pc + 1), self.memory.read(pc + 2))

        if self.trace:
            self.debug_trace(op, *operands)

        handler = self.HANDLERS.get(op)

        if handler is None:
            error = InvalidInstruction(op, pc)
            lg.error(f'{error}; halting')
            self.halt(error)
            return

        handler(self, *operands[:ops.operand_count(op)])

        if op not in ops.PC_SETTERS:
            self.regs.pc += ops.instruction_size(op)
