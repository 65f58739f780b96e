# type: ignore
''' LS-8 assembly grammar

Parse actions yield (handler, argument) pairs which the first pass
processor applies in order.
'''

import pyparsing as pp

import ls8.common.ops as ops
from ls8.asm.fpp import FPP


def parse_number(text: str) -> int:
    text = text.lower()

    if text.startswith('0x'):
        return int(text[2:], 16)

    if text.startswith('0b'):
        return int(text[2:], 2)

    return int(text, 10)


id = pp.Word(pp.alphas + '_', pp.alphanums + '_')
comment = pp.Suppress(pp.Literal(';') + pp.rest_of_line)
comma = pp.Suppress(',')

label = (id + pp.Suppress(':')).set_parse_action(lambda r: (FPP.on_label, r))

reg_op = pp.Regex('[Rr][0-7]\\b').set_parse_action(lambda r: (FPP.on_reg, int(r[0][1])))

number = pp.Regex('0[xX][0-9a-fA-F]+|0[bB][01]+|[0-9]+')
imm_const = number.copy().set_parse_action(lambda r: (FPP.on_imm, parse_number(r[0])))
imm_ref = id.copy().set_parse_action(lambda r: (FPP.on_ref, r[0]))
imm_op = imm_const | imm_ref


def g_cmd(mnemonic):
    op = ops.MNEMONICS[mnemonic]
    return pp.CaselessKeyword(mnemonic).set_parse_action(lambda _: (FPP.issue_op, op))


def g_cmd_0(mnemonic):
    return g_cmd(mnemonic)


def g_cmd_1(mnemonic):
    return g_cmd(mnemonic) + reg_op


def g_cmd_2(mnemonic):
    return g_cmd(mnemonic) + reg_op + comma + reg_op


# Instructions
hlt_cmd = g_cmd_0('HLT')
ret_cmd = g_cmd_0('RET')

pra_cmd = g_cmd_1('PRA')
prn_cmd = g_cmd_1('PRN')
call_cmd = g_cmd_1('CALL')
pop_cmd = g_cmd_1('POP')
push_cmd = g_cmd_1('PUSH')
jmp_cmd = g_cmd_1('JMP')
jeq_cmd = g_cmd_1('JEQ')
jne_cmd = g_cmd_1('JNE')
jlt_cmd = g_cmd_1('JLT')
jgt_cmd = g_cmd_1('JGT')

ldi_cmd = g_cmd('LDI') + reg_op + comma + imm_op
st_cmd = g_cmd_2('ST')
cmp_cmd = g_cmd_2('CMP')
add_cmd = g_cmd_2('ADD')
mul_cmd = g_cmd_2('MUL')

# Data
db_cmd = pp.Suppress(pp.CaselessKeyword('DB')) + imm_op

# Fail on unknown command
unknown = pp.Regex('[^\\s;][^;\\n]*').set_parse_action(lambda r: (FPP.on_fail, r[0]))

asm_cmd = hlt_cmd \
    | ret_cmd \
    | pra_cmd \
    | prn_cmd \
    | call_cmd \
    | pop_cmd \
    | push_cmd \
    | jmp_cmd \
    | jeq_cmd \
    | jne_cmd \
    | jlt_cmd \
    | jgt_cmd \
    | ldi_cmd \
    | st_cmd \
    | cmp_cmd \
    | add_cmd \
    | mul_cmd \
    | db_cmd

program = pp.ZeroOrMore(label | asm_cmd | unknown)
program.ignore(comment)
