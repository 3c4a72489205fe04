# Memory image layout
OPCODE_SIZE = 1  # bytes per opcode
WORD_SIZE = 4    # bytes per operand

OPCODE_MAX = 0xFF
WORD_MAX = 0xFFFFFFFF

# Operand byte orders understood by the execution engine
BYTE_ORDERS = {
    'little': '<',
    'big': '>'
}
