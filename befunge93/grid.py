""" The two dimensional program space and the program counter walking it.

Cells are addressed with x as the column and y as the row. Movement over
the grid is toroidal: leaving an edge re-enters at the opposite edge of the
same row or column.
"""

import enum
from .common import InvalidCoordinates, InvalidAscii


class Direction(enum.Enum):
    """ Heading of the program counter, as a (dx, dy) step """
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]


def split_lines(text):
    """ Split program text into rows.

    Only newline separates rows, so other control characters such as form
    feeds remain cell values. A trailing newline does not start a new row.
    """
    lines = text.split('\n')
    if lines and lines[-1] == '':
        lines.pop(-1)
    return [line[:-1] if line.endswith('\r') else line for line in lines]


class Grid:
    """ Rectangular, mutable array of characters. """
    def __init__(self, width=0, height=0):
        self.width = width
        self.height = height
        self.rows = [[' '] * width for _ in range(height)]

    @classmethod
    def from_text(cls, text):
        """ Create a grid from program source, padding short lines """
        lines = split_lines(text)
        width = max((len(line) for line in lines), default=0)
        grid = cls(width, len(lines))
        for y, line in enumerate(lines):
            for x, char in enumerate(line):
                grid.rows[y][x] = char
        return grid

    def __repr__(self):
        return 'Grid({}x{})'.format(self.width, self.height)

    @property
    def is_empty(self):
        return self.width == 0 or self.height == 0

    def contains(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x, y):
        """ Get the character at the given position """
        if not self.contains(x, y):
            raise InvalidCoordinates(x, y)
        return self.rows[y][x]

    def put(self, x, y, value):
        """ Store the character with code value at the given position.

        Negative coordinates are rejected before the value is checked.
        """
        if x < 0 or y < 0:
            raise InvalidCoordinates(x, y)
        if not 0 <= value <= 255:
            raise InvalidAscii(value)
        if not self.contains(x, y):
            raise InvalidCoordinates(x, y)
        self.rows[y][x] = chr(value)

    def lines(self):
        """ Snapshot of the grid as a list of strings """
        return [''.join(row) for row in self.rows]


class Cursor:
    """ The program counter: a position and a heading. """
    def __init__(self, x=0, y=0, direction=Direction.RIGHT):
        self.x = x
        self.y = y
        self.direction = direction

    def __repr__(self):
        return 'Cursor(x={}, y={}, {})'.format(
            self.x, self.y, self.direction.name)

    @property
    def position(self):
        return self.x, self.y

    def go_left(self):
        self.direction = Direction.LEFT

    def go_right(self):
        self.direction = Direction.RIGHT

    def go_up(self):
        self.direction = Direction.UP

    def go_down(self):
        self.direction = Direction.DOWN

    def advance(self, width, height):
        """ Move one cell in the current heading, wrapping at the edges """
        self.x = (self.x + self.direction.dx) % width
        self.y = (self.y + self.direction.dy) % height
