""" Befunge-93 interpreter.

Epic esoteric language in 2D!

See also: https://en.wikipedia.org/wiki/Befunge

Example usage:

>>> from befunge93.interpreter import BefungeInterpreter
>>> from befunge93.streams import BufferIo
>>> m = BefungeInterpreter(io=BufferIo())
>>> m.load('"!iH",,,@')
>>> m.run()
>>> m.output
b'Hi!'

"""

import enum
import logging
import re
from .common import BefungeError, ParseError, InvalidAscii
from .grid import Grid, Cursor
from .instructions import Opcode, decode
from .randomness import RandomHeadingSource
from .stack import Stack
from .streams import StreamIo


NUMBER_PATTERN = re.compile(r'[+-]?[0-9]+\Z')


class Mode(enum.Enum):
    NORMAL = 0
    STRING = 1


def truncated_div(b, a):
    """ Division rounding towards zero, as done by C """
    q = abs(b) // abs(a)
    return q if (a < 0) == (b < 0) else -q


def truncated_mod(b, a):
    """ Remainder with the sign of the dividend, as done by C """
    return b - a * truncated_div(b, a)


class BefungeInterpreter:
    """ Befunge machine.

    The machine owns the stack, the program grid and the program counter.
    Input, output and randomness are provided by the host via io and
    heading_source.
    """
    logger = logging.getLogger('befunge')

    def __init__(
            self, io=None, heading_source=None, stack_default=0,
            strict_stack=False):
        self.io = io if io is not None else StreamIo()
        if heading_source is None:
            heading_source = RandomHeadingSource()
        self.heading_source = heading_source
        self._stack = Stack(default=stack_default, strict=strict_stack)
        self._grid = Grid()
        self.cursor = Cursor()
        self.mode = Mode.NORMAL
        self.running = False
        self.steps = 0
        self._halted = False
        self._output = bytearray()
        self._handlers = {
            Opcode.PUSH_DIGIT: self.push_digit,
            Opcode.ADD: self.add,
            Opcode.SUB: self.sub,
            Opcode.MUL: self.mul,
            Opcode.DIV: self.div,
            Opcode.MOD: self.mod,
            Opcode.NOT: self.logical_not,
            Opcode.GREATER: self.greater,
            Opcode.GO_RIGHT: self.cursor_go_right,
            Opcode.GO_LEFT: self.cursor_go_left,
            Opcode.GO_UP: self.cursor_go_up,
            Opcode.GO_DOWN: self.cursor_go_down,
            Opcode.GO_RANDOM: self.go_random,
            Opcode.HORIZONTAL_IF: self.horizontal_if,
            Opcode.VERTICAL_IF: self.vertical_if,
            Opcode.STRING_MODE: self.toggle_string_mode,
            Opcode.DUP: self.duplicate,
            Opcode.SWAP: self.swap,
            Opcode.DROP: self.drop,
            Opcode.OUTPUT_INT: self.output_int,
            Opcode.OUTPUT_CHAR: self.output_char,
            Opcode.BRIDGE: self.bridge,
            Opcode.PUT: self.put,
            Opcode.GET: self.get,
            Opcode.INPUT_INT: self.input_int,
            Opcode.INPUT_CHAR: self.input_char,
            Opcode.NOP: self.nop,
            Opcode.END: self.end,
        }

    def load(self, text):
        """ Load a new program.

        The grid, program counter and mode are reset. The stack and the
        output are left alone. Loading empty text does nothing.
        """
        if not text:
            return
        self._grid = Grid.from_text(text)
        self.cursor = Cursor()
        self.mode = Mode.NORMAL
        self.running = not self._grid.is_empty
        self.steps = 0
        self.logger.info('Loaded %s program', self._grid)

    # Host accessors:
    @property
    def stack(self):
        """ Stack contents, bottom first """
        return self._stack.snapshot()

    @property
    def output(self):
        """ All bytes written by the program """
        return bytes(self._output)

    @property
    def grid(self):
        """ The current program, including modifications, as lines """
        return self._grid.lines()

    @property
    def width(self):
        return self._grid.width

    @property
    def height(self):
        return self._grid.height

    @property
    def position(self):
        return self.cursor.position

    @property
    def direction(self):
        return self.cursor.direction

    @property
    def is_loaded(self):
        return not self._grid.is_empty

    def clear_stack(self):
        self._stack.clear()

    def clear_output(self):
        self._output.clear()

    def put_cell(self, x, y, value):
        """ Modify the program from the outside, validated like 'p' """
        self._grid.put(x, y, value)

    def run(self):
        """ Run until finished. """
        if not self.is_loaded:
            return
        self.running = True
        while self.running:
            self.step()

    def step(self):
        """ Execute a single opcode. """
        if not self.is_loaded:
            return
        char = self.fetch()
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                'at %s execute %r stack=%s', self.cursor, char,
                self._stack.snapshot()[-4:])
        self.steps += 1
        self._halted = False

        try:
            if self.mode is Mode.STRING:
                if char == '"':
                    self.toggle_string_mode()
                else:
                    self._stack.push(ord(char))
            else:
                self.dispatch(char)
        except BefungeError as ex:
            self.running = False
            self.logger.debug('Stopped at %s: %s', self.cursor, ex.msg)
            raise

        if not self._halted:
            self.move_pointer()

    def fetch(self):
        x, y = self.cursor.position
        return self._grid.get(x, y)

    def move_pointer(self):
        self.cursor.advance(self._grid.width, self._grid.height)

    def dispatch(self, char):
        """ Execute a single opcode. """
        opcode = decode(char)
        self._handlers[opcode](char)

    def push_digit(self, char):
        self._stack.push(int(char))

    def add(self, _):
        a, b = self._stack.pop2()
        self._stack.push(a + b)

    def sub(self, _):
        a, b = self._stack.pop2()
        self._stack.push(b - a)

    def mul(self, _):
        a, b = self._stack.pop2()
        self._stack.push(a * b)

    def div(self, _):
        a, b = self._stack.pop2()
        self._stack.push(0 if a == 0 else truncated_div(b, a))

    def mod(self, _):
        a, b = self._stack.pop2()
        self._stack.push(0 if a == 0 else truncated_mod(b, a))

    def logical_not(self, _):
        self._stack.push(1 if self._stack.pop() == 0 else 0)

    def greater(self, _):
        a, b = self._stack.pop2()
        self._stack.push(1 if b > a else 0)

    def cursor_go_right(self, _):
        self.cursor.go_right()

    def cursor_go_left(self, _):
        self.cursor.go_left()

    def cursor_go_up(self, _):
        self.cursor.go_up()

    def cursor_go_down(self, _):
        self.cursor.go_down()

    def go_random(self, _):
        self.cursor.direction = self.heading_source.choose_heading()

    def horizontal_if(self, _):
        if self._stack.pop() == 0:
            self.cursor.go_right()
        else:
            self.cursor.go_left()

    def vertical_if(self, _):
        if self._stack.pop() == 0:
            self.cursor.go_down()
        else:
            self.cursor.go_up()

    def toggle_string_mode(self, _=None):
        if self.mode is Mode.NORMAL:
            self.mode = Mode.STRING
        else:
            self.mode = Mode.NORMAL

    def duplicate(self, _):
        value = self._stack.pop()
        self._stack.push(value)
        self._stack.push(value)

    def swap(self, _):
        a, b = self._stack.pop2()
        self._stack.push(a)
        self._stack.push(b)

    def drop(self, _):
        self._stack.pop()

    def write(self, data):
        self.io.write_bytes(data)
        self._output.extend(data)

    def output_int(self, _):
        value = self._stack.pop()
        self.write(str(value).encode('ascii'))

    def output_char(self, _):
        value = self._stack.pop()
        if not 0 <= value <= 255:
            raise InvalidAscii(value)
        self.write(bytes([value]))

    def bridge(self, _):
        """ Skip next cell! """
        self.move_pointer()

    def put(self, _):
        """ Enable self modifying code! """
        y, x = self._stack.pop2()
        value = self._stack.pop()
        self._grid.put(x, y, value)

    def get(self, _):
        y, x = self._stack.pop2()
        self._stack.push(ord(self._grid.get(x, y)))

    def input_int(self, _):
        text = self.io.read_line()
        if not NUMBER_PATTERN.match(text.strip()):
            raise ParseError(text)
        self._stack.push(int(text.strip()))

    def input_char(self, _):
        self._stack.push(self.io.read_byte())

    def nop(self, _):
        pass

    def end(self, _):
        self._halted = True
        self.running = False
        self.logger.info('Program finished after %s steps', self.steps)
