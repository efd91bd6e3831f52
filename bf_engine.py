from bf_errors import UnmatchedBracketError
from bf_io import StreamIO
from bf_tape import Tape

PLUS = ord('+')
MINUS = ord('-')
RIGHT = ord('>')
LEFT = ord('<')
OUTPUT = ord('.')
INPUT = ord(',')
LOOP_START = ord('[')
LOOP_END = ord(']')

INSTRUCTIONS = frozenset([PLUS, MINUS, RIGHT, LEFT, OUTPUT, INPUT, LOOP_START, LOOP_END])


def as_program(code):
    if isinstance(code, bytes):
        return code
    if isinstance(code, (bytearray, memoryview)):
        return bytes(code)
    if isinstance(code, str):
        try:
            return code.encode('latin-1')
        except UnicodeEncodeError as e:
            raise ValueError(f"program text has a character above U+00FF at offset {e.start}") from None
    raise TypeError(f"program must be bytes, not {type(code).__name__}")


def scan_forward(program, i):
    """
    Return the index of the ']' matching the '[' at `i`.

    Walks right from `i` keeping a balance count: '[' raises it, ']'
    lowers it, everything else is skipped. Running off the end of the
    program before the count drops to zero means the '[' is unmatched.
    """
    bal = 1
    j = i
    while True:
        j += 1
        if j >= len(program):
            raise UnmatchedBracketError(i, '[')
        c = program[j]
        if c == LOOP_START:
            bal += 1
        elif c == LOOP_END:
            bal -= 1
            if bal == 0:
                return j


def scan_backward(program, i):
    """Mirror of scan_forward: index of the '[' matching the ']' at `i`."""
    bal = 1
    j = i
    while True:
        j -= 1
        if j < 0:
            raise UnmatchedBracketError(i, ']')
        c = program[j]
        if c == LOOP_END:
            bal += 1
        elif c == LOOP_START:
            bal -= 1
            if bal == 0:
                return j


def validate(program):
    # One pass over the whole source, so loops that never run are checked too
    loop_stack = []
    for i, c in enumerate(program):
        if c == LOOP_START:
            loop_stack.append(i)
        elif c == LOOP_END:
            if not loop_stack:
                raise UnmatchedBracketError(i, ']')
            loop_stack.pop()
    if loop_stack:
        raise UnmatchedBracketError(loop_stack[0], '[')


class Engine:
    def __init__(self, program, tape=None, io=None):
        self.program = as_program(program)
        validate(self.program)
        self.tape = tape if tape is not None else Tape()
        self.io = io if io is not None else StreamIO.from_std()
        self.pc = 0
        self.step_count = 0
        # bracket index -> matching bracket index, filled from the scans
        self.jumps = {}

    @property
    def finished(self):
        return self.pc >= len(self.program)

    def _match(self, i, scan):
        target = self.jumps.get(i)
        if target is None:
            target = scan(self.program, i)
            self.jumps[i] = target
            self.jumps[target] = i
        return target

    def run_step(self):
        program = self.program
        size = len(program)
        while self.pc < size and program[self.pc] not in INSTRUCTIONS:
            self.pc += 1
        if self.pc >= size:
            return False

        op = program[self.pc]
        tape = self.tape
        self.step_count += 1

        if op == PLUS:
            tape.increment()
        elif op == MINUS:
            tape.decrement()
        elif op == RIGHT:
            tape.move_right()
        elif op == LEFT:
            tape.move_left()
        elif op == OUTPUT:
            self.io.write_byte(tape.current_value())
        elif op == INPUT:
            value = self.io.read_byte()
            # End of input reads as 0
            tape.set_value(0 if value is None else value)
        elif op == LOOP_START:
            if tape.current_value() == 0:
                self.pc = self._match(self.pc, scan_forward) + 1
                return True
        elif op == LOOP_END:
            if tape.current_value() != 0:
                # Land on the '[' itself so its test runs again
                self.pc = self._match(self.pc, scan_backward)
                return True

        self.pc += 1
        return True

    def run(self):
        while self.run_step():
            pass
        return self


def run(program, tape=None, io=None):
    """
    Execute `program` to completion and return the finished Engine.

    Raises UnmatchedBracketError before anything runs if the brackets
    do not nest, OutOfMemoryError if the tape cannot grow and
    OutputError if a byte cannot be written.
    A str program is taken as latin-1 and raises ValueError if it
    holds anything above U+00FF.
    """
    return Engine(program, tape, io).run()
