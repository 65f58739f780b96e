MEMORY_SIZE      = 0x100
ADDRESS_MASK     = MEMORY_SIZE - 1
BYTE_MASK        = 0xFF
GP_REGS          = 8

IS_REG           = 6                # Interrupt status
SP_REG           = 7                # Stack pointer

SP_INIT          = 0xF4             # Stack grows down from here
INT_VECT_BASE    = 0xF8             # Single handler address location
PROGRAM_BASE     = 0x00

FL_LESS          = 0b00000100
FL_GREATER       = 0b00000010
FL_EQUAL         = 0b00000001

TIMER_INT        = 0b00000001       # Bit set in IS by the system timer

CLOCK_HZ         = 1000             # 1 ms per tick
TIMER_PERIOD     = 1.0
