import logging as lg
from typing import List, Tuple, Dict, Any

from ls8.common.hwconf import BYTE_MASK
import ls8.common.ops as ops

Tokens = List[Any]


class AsmError(Exception):
    pass


class FPP:
    ''' First pass processor '''
    cmd_list: List[Tuple[str, int | str]]
    label_dict: Dict[str, int]
    annotations: Dict[int, str]

    def __init__(self):
        self.cmd_list = list()
        self.offset = 0
        self.label_dict = dict()
        self.annotations = dict()

    # Handlers
    def issue_byte(self, value: int):
        if value < 0 or value > BYTE_MASK:
            raise AsmError(f'Value {value} does not fit in a byte')

        self.cmd_list.append(('byte', value))
        self.offset += 1

    def issue_op(self, op: int):
        lg.debug(f'Issuing {ops.NAMES[op]} @ 0x{self.offset:02X}')
        self.annotations[self.offset] = ops.NAMES[op]
        self.issue_byte(op)

    def on_reg(self, reg: int):
        self.issue_byte(reg)

    def on_imm(self, value: int):
        self.issue_byte(value)

    def on_ref(self, labelname: str):
        lg.debug(f'Ref {labelname}')
        self.cmd_list.append(('ref', labelname))
        self.offset += 1  # placeholder-byte

    def on_label(self, tokens: Tokens):
        labelname = tokens[0]

        if labelname in self.label_dict:
            raise AsmError(f'Label {labelname} defined twice')

        self.label_dict[labelname] = self.offset
        lg.debug(f'Label {labelname} @ 0x{self.offset:02X}')

    def on_fail(self, rest: str):
        raise AsmError(f'Unknown command {rest.strip()!r}')
