from pathlib import Path
import logging as lg
from typing import Iterable, Iterator, TextIO

from tinyimage.common.errors import ParseError, ProgramIOError
from tinyimage.loader.instruction import Instruction, parse_instruction


class Program:
    ''' Ordered instructions of a program on disk, not a running process '''

    instructions: tuple[Instruction, ...]

    def __init__(self, instructions: Iterable[Instruction]):
        self.instructions = tuple(instructions)

    def __len__(self):
        return len(self.instructions)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def __eq__(self, other):
        if not isinstance(other, Program):
            return NotImplemented

        return self.instructions == other.instructions

    def __hash__(self):
        return hash(self.instructions)

    def __repr__(self):
        return f'Program({list(self.instructions)!r})'


def read_lines(lines: Iterable[str], source: str) -> Program:
    instructions: list[Instruction] = []

    for lineno, line in enumerate(lines, start=1):
        text = line.rstrip('\r\n')

        if not text.strip():
            continue

        try:
            instructions.append(parse_instruction(text))
        except ParseError as e:
            raise e.locate(source, lineno)

    lg.info(f'Loaded {len(instructions)} instruction(s) from {source}')
    return Program(instructions)


def load_program(filepath: str | Path) -> Program:
    ''' One instruction per non-blank line, file order is kept '''

    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Loading program {filepath}')

    try:
        f: TextIO = filepath.open('r')
    except OSError as e:
        raise ProgramIOError(f'Cannot open program {filepath}: {e.strerror}') from e

    with f:
        try:
            return read_lines(f, str(filepath))
        except (OSError, UnicodeDecodeError) as e:
            raise ProgramIOError(f'Cannot read program {filepath}: {e}') from e


def load_program_text(text: str, source: str = '<string>') -> Program:
    return read_lines(text.splitlines(), source)


def dump_program(program: Program, enabled: bool) -> str:
    ''' Debug listing, one instruction per line and a blank separator '''

    if not enabled:
        return ''

    lines = [str(instr) for instr in program]

    for line in lines:
        lg.debug(line)

    lines.append('')
    return '\n'.join(lines) + '\n'
