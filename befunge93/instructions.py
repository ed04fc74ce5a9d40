""" The befunge-93 instruction set.

Every cell character decodes to exactly one opcode, or to an
UnknownInstruction error.
"""

import enum
from .common import UnknownInstruction


DIGITS = '0123456789'


class Opcode(enum.Enum):
    PUSH_DIGIT = DIGITS
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    MOD = '%'
    NOT = '!'
    GREATER = '`'
    GO_RIGHT = '>'
    GO_LEFT = '<'
    GO_UP = '^'
    GO_DOWN = 'v'
    GO_RANDOM = '?'
    HORIZONTAL_IF = '_'
    VERTICAL_IF = '|'
    STRING_MODE = '"'
    DUP = ':'
    SWAP = '\\'
    DROP = '$'
    OUTPUT_INT = '.'
    OUTPUT_CHAR = ','
    BRIDGE = '#'
    PUT = 'p'
    GET = 'g'
    INPUT_INT = '&'
    INPUT_CHAR = '~'
    NOP = ' '
    END = '@'


def decode(char):
    """ Determine the opcode for a cell character """
    if char in DIGITS and len(char) == 1:
        return Opcode.PUSH_DIGIT
    try:
        return Opcode(char)
    except ValueError:
        raise UnknownInstruction(char) from None
