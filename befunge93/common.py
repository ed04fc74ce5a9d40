"""
   Error handling routines
   Logging format shared by the command line tools
"""


logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'


class BefungeError(Exception):
    """ Base class of all errors raised while executing befunge code """
    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __repr__(self):
        return '"{}"'.format(self.msg)


class IoError(BefungeError):
    """ The input or output capability failed """
    def __init__(self, msg, cause=None):
        super().__init__(msg)
        self.cause = cause


class UnknownInstruction(BefungeError):
    def __init__(self, char):
        super().__init__('Unknown instruction {!r}'.format(char))
        self.char = char


class InvalidAscii(BefungeError):
    """ A value does not fit in a single byte """
    def __init__(self, value):
        super().__init__(
            'Value {} is not a valid ascii value'.format(value))
        self.value = value


class InvalidCoordinates(BefungeError):
    """ A get or put targets a cell outside of the program grid """
    def __init__(self, x, y):
        super().__init__('Invalid coordinates x={}, y={}'.format(x, y))
        self.x = x
        self.y = y


class ParseError(BefungeError):
    def __init__(self, text):
        super().__init__('Cannot parse {!r} as a number'.format(text))
        self.text = text


class StackEmpty(BefungeError):
    """ Popped from an empty stack while in strict stack mode """
    def __init__(self):
        super().__init__('Pop from empty stack')
