# Emulated byte-addressable RAM

from ls8.common.hwconf import MEMORY_SIZE, ADDRESS_MASK, BYTE_MASK


class Memory:
    ''' Flat 256-cell store; addresses wrap, stored values are truncated to a byte '''

    def __init__(self, size: int = MEMORY_SIZE):
        self.cells = bytearray(size)

    def read(self, addr: int) -> int:
        return self.cells[addr & ADDRESS_MASK]

    def write(self, addr: int, value: int):
        self.cells[addr & ADDRESS_MASK] = value & BYTE_MASK

    def __len__(self):
        return len(self.cells)
