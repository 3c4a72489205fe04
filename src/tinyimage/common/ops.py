# Arithmetic and data movement
INCR = 0x01  # R1 + 1 -> R1
ADDI = 0x02  # R1 + C2 -> R1
ADDR = 0x03  # R1 + R2 -> R1
PUSHR = 0x04  # R1 -> [SP++]
PUSHI = 0x05  # C1 -> [SP++]
MOVI = 0x06  # C2 -> R1
MOVR = 0x07  # R2 -> R1
MOVMR = 0x08  # M[R2] -> R1
MOVRM = 0x09  # R2 -> M[R1]
MOVMM = 0x0A  # M[R2] -> M[R1]
PRINTR = 0x0B  # print R1
PRINTM = 0x0C  # print M[R1]

# Flow control
JMP = 0x0D  # IP + R1 -> IP
CMPI = 0x0E  # compare R1 with C2 -> SF, ZF
CMPR = 0x0F  # compare R1 with R2 -> SF, ZF
JLT = 0x10  # if SF jmp R1
JGT = 0x11  # if not SF and not ZF jmp R1
JE = 0x12  # if ZF jmp R1
CALL = 0x13  # push IP; IP + R1 -> IP
CALLM = 0x14  # push IP; IP + M[R1] -> IP
RET = 0x15  # IP <- [--SP]

# Operating system calls
ALLOC = 0x16  # allocate R1 bytes -> R2
ACQUIRELOCK = 0x17  # acquire lock M[R1]
RELEASELOCK = 0x18  # release lock M[R1]
SLEEP = 0x19  # sleep R1 clock cycles
SETPRIORITY = 0x1A  # R1 -> priority
EXIT = 0x1B  # terminate current process
FREEMEMORY = 0x1C  # free memory at R1
MAPSHAREDMEM = 0x1D  # map shared region R1 -> R2
SIGNALEVENT = 0x1E  # signal event R1
WAITEVENT = 0x1F  # wait for event R1
INPUT = 0x20  # read console -> R1
MEMORYCLEAR = 0x21  # clear C2 bytes from C1
TERMINATEPROCESS = 0x22  # terminate process R1
POPR = 0x23  # [--SP] -> R1
POPM = 0x24  # [--SP] -> M[R1]

# Opcode -> number of operands
ARITY = {
    INCR: 1,
    ADDI: 2,
    ADDR: 2,
    PUSHR: 1,
    PUSHI: 1,
    MOVI: 2,
    MOVR: 2,
    MOVMR: 2,
    MOVRM: 2,
    MOVMM: 2,
    PRINTR: 1,
    PRINTM: 1,
    JMP: 1,
    CMPI: 2,
    CMPR: 2,
    JLT: 1,
    JGT: 1,
    JE: 1,
    CALL: 1,
    CALLM: 1,
    RET: 0,
    ALLOC: 2,
    ACQUIRELOCK: 1,
    RELEASELOCK: 1,
    SLEEP: 1,
    SETPRIORITY: 1,
    EXIT: 0,
    FREEMEMORY: 1,
    MAPSHAREDMEM: 2,
    SIGNALEVENT: 1,
    WAITEVENT: 1,
    INPUT: 1,
    MEMORYCLEAR: 2,
    TERMINATEPROCESS: 1,
    POPR: 1,
    POPM: 1
}

# Mnemonic -> opcode, names are matched case-insensitively
OPCODES = {
    name.lower(): value
    for name, value in list(globals().items())
    if name.isupper() and isinstance(value, int)
}

MNEMONICS = {value: name for name, value in OPCODES.items()}
