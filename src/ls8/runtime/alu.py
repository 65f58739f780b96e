''' Arithmetic and comparison unit

Results are not truncated: a register may hold a value wider than a byte
after ADD or MUL. Memory truncates on store.
'''

from ls8.common.hwconf import FL_EQUAL, FL_GREATER, FL_LESS


def add(a: int, b: int) -> int:
    return a + b


def multiply(a: int, b: int) -> int:
    return a * b


def compare(a: int, b: int) -> int:
    if a == b:
        return FL_EQUAL

    if a > b:
        return FL_GREATER

    return FL_LESS
