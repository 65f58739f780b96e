''' Program image loader

An .ls8 file holds one byte per line as eight binary digits; anything
after a '#' is a comment.
'''

import logging as lg
from pathlib import Path
from typing import TYPE_CHECKING

import pyparsing as pp

from ls8.common.hwconf import MEMORY_SIZE, PROGRAM_BASE
import ls8.asm.asm as asm

if TYPE_CHECKING:
    from ls8.runtime.cpu import CPU


class LoaderError(Exception):
    pass


comment = pp.Suppress(pp.Literal('#') + pp.rest_of_line)
byte = pp.Regex('[01]{8}(?![01])').set_parse_action(lambda r: int(r[0], 2))
unknown = pp.Regex('[^\\s#][^#\\n]*')

program = pp.ZeroOrMore(byte | unknown)
program.ignore(comment)


def parse_program(text: str) -> bytes:
    tokens = program.parse_string(text, parse_all=True)
    image = bytearray()

    for token in tokens:
        if isinstance(token, str):
            raise LoaderError(f'Not a binary byte: {token.strip()!r}')

        image.append(token)

    return bytes(image)


def load_program(path: str | Path) -> bytes:
    if isinstance(path, str):
        path = Path(path)

    lg.debug(f'Loading program {path}')

    if path.suffix == '.ls8':
        return parse_program(path.read_text())

    if path.suffix == '.asm':
        return asm.assemble(path.read_text()).code

    return path.read_bytes()


def load_into(cpu: 'CPU', image: bytes, base: int = PROGRAM_BASE):
    if base + len(image) > MEMORY_SIZE:
        raise LoaderError(f'Program of {len(image)} bytes does not fit at 0x{base:02X}')

    for offset, value in enumerate(image):
        cpu.poke(base + offset, value)

    lg.debug(f'Loaded {len(image)} bytes at 0x{base:02X}')
