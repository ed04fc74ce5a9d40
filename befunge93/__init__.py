""" A befunge-93 interpreter implemented in pure Python.

Example usage:

>>> from befunge93 import BefungeInterpreter, BufferIo
>>> m = BefungeInterpreter(io=BufferIo())
>>> m.load('34*.@')
>>> m.run()
>>> m.output
b'12'

"""

# Define version here. Used in the setup script:
__version_info__ = (0, 1, 0)
__version__ = '.'.join(map(str, __version_info__))

from .common import BefungeError, IoError, UnknownInstruction  # noqa: E402
from .common import InvalidAscii, InvalidCoordinates, ParseError  # noqa: E402
from .common import StackEmpty  # noqa: E402
from .grid import Direction  # noqa: E402
from .interpreter import BefungeInterpreter, Mode  # noqa: E402
from .randomness import RandomHeadingSource, FixedHeadingSource  # noqa: E402
from .streams import BefungeIo, StreamIo, BufferIo  # noqa: E402

__all__ = [
    'BefungeInterpreter', 'Mode', 'Direction',
    'BefungeIo', 'StreamIo', 'BufferIo',
    'RandomHeadingSource', 'FixedHeadingSource',
    'BefungeError', 'IoError', 'UnknownInstruction', 'InvalidAscii',
    'InvalidCoordinates', 'ParseError', 'StackEmpty',
]
