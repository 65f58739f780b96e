import logging as lg
from dataclasses import dataclass, field
from pathlib import Path

import click

from ls8.common.hwconf import MEMORY_SIZE, BYTE_MASK
import ls8.asm.grammar as grammar
from ls8.asm.fpp import FPP, AsmError


@dataclass
class Program:
    code: bytes
    annotations: dict[int, str] = field(default_factory=dict)


def assemble(source: str) -> Program:
    # First pass
    first_pass = FPP()
    actions = grammar.program.parse_string(source, parse_all=True)

    for (func, arg) in actions:  # type: ignore
        func(first_pass, arg)

    if first_pass.offset > MEMORY_SIZE:
        raise AsmError(f'Program of {first_pass.offset} bytes exceeds memory')

    # Second pass
    bytestr = bytearray()

    for (t, d) in first_pass.cmd_list:
        if t == 'byte':
            bytestr.append(d)

        if t == 'ref':
            if d not in first_pass.label_dict:
                raise AsmError(f'Undefined label {d}')

            addr = first_pass.label_dict[str(d)]

            if addr > BYTE_MASK:
                raise AsmError(f'Label {d} at 0x{addr:X} is outside memory')

            bytestr.append(addr)

    return Program(bytes(bytestr), first_pass.annotations)


def format_ls8(program: Program) -> str:
    lines = []

    for offset, value in enumerate(program.code):
        if offset in program.annotations:
            lines.append(f'{value:08b}  # {program.annotations[offset]}')
        else:
            lines.append(f'{value:08b}')

    return '\n'.join(lines) + '\n'


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.argument('source', type=Path)
@click.argument('output', type=Path)
def compile(verbose: bool, source: Path, output: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info("LS8 ASM")

    program = assemble(source.read_text())
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(format_ls8(program))
    lg.info(f'{len(program.code)} bytes written to {output}')


if __name__ == "__main__":
    compile()
