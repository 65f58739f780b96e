# Operand count is encoded in the two high bits
HLT  = 0b00000001  # stop
RET  = 0b00001001  # [SP++] -> PC

PRA  = 0b01000010  # R1 -> out (char)
PRN  = 0b01000011  # R1 -> out (decimal)
CALL = 0b01001000  # PC + 2 -> [--SP]; R1 -> PC
POP  = 0b01001100  # [SP++] -> R1
PUSH = 0b01001101  # R1 -> [--SP]
JMP  = 0b01010000  # R1 -> PC
JEQ  = 0b01010001  # if EQUAL R1 -> PC
JNE  = 0b01010010  # if not EQUAL R1 -> PC
JLT  = 0b01010011  # if LESS R1 -> PC
JGT  = 0b01010100  # if GREATER R1 -> PC

LDI  = 0b10011001  # I2 -> R1
ST   = 0b10011010  # R2 -> M[R1]
CMP  = 0b10100000  # R1 ? R2 -> FL
ADD  = 0b10101000  # R1 + R2 -> R1
MUL  = 0b10101010  # R1 * R2 -> R1

MNEMONICS = {
    'HLT': HLT,
    'RET': RET,
    'PRA': PRA,
    'PRN': PRN,
    'CALL': CALL,
    'POP': POP,
    'PUSH': PUSH,
    'JMP': JMP,
    'JEQ': JEQ,
    'JNE': JNE,
    'JLT': JLT,
    'JGT': JGT,
    'LDI': LDI,
    'ST': ST,
    'CMP': CMP,
    'ADD': ADD,
    'MUL': MUL,
}

NAMES = {op: name for name, op in MNEMONICS.items()}

# Handlers of these set PC themselves
PC_SETTERS = frozenset([CALL, JMP, RET, JEQ, JGT, JLT, JNE])


def operand_count(opcode: int) -> int:
    return (opcode >> 6) & 0b11


def instruction_size(opcode: int) -> int:
    return 1 + operand_count(opcode)
