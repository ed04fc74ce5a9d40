""" Input and output for the befunge machine.

The interpreter talks to the outside world only via a BefungeIo instance,
so that it can be attached to a console, a file or an in-memory buffer.
"""

import abc
import io
import sys
from .common import IoError


class BefungeIo(metaclass=abc.ABCMeta):
    """ Blocking input and output interface used by the interpreter. """

    @abc.abstractmethod
    def read_line(self):  # pragma: no cover
        """ Read a line of text, an empty string when input is exhausted """
        raise NotImplementedError()

    @abc.abstractmethod
    def read_byte(self):  # pragma: no cover
        """ Read exactly one byte and return it as an integer """
        raise NotImplementedError()

    @abc.abstractmethod
    def write_bytes(self, data):  # pragma: no cover
        raise NotImplementedError()


class StreamIo(BefungeIo):
    """ Input and output via binary file objects.

    When no streams are given, the standard input and output of the
    process are used.
    """
    def __init__(self, input=None, output=None, encoding='utf-8'):
        self.input = input
        self.output = output
        self.encoding = encoding

    def _input_stream(self):
        return self.input if self.input is not None else sys.stdin.buffer

    def _output_stream(self):
        return self.output if self.output is not None else sys.stdout.buffer

    def read_line(self):
        try:
            data = self._input_stream().readline()
        except (OSError, ValueError) as ex:
            raise IoError('Reading a line failed: {}'.format(ex), ex)
        return data.decode(self.encoding, errors='replace')

    def read_byte(self):
        try:
            data = self._input_stream().read(1)
        except (OSError, ValueError) as ex:
            raise IoError('Reading a byte failed: {}'.format(ex), ex)
        if len(data) != 1:
            raise IoError('Unexpected end of input')
        return data[0]

    def write_bytes(self, data):
        stream = self._output_stream()
        try:
            stream.write(data)
            stream.flush()
        except (OSError, ValueError) as ex:
            raise IoError('Writing output failed: {}'.format(ex), ex)


class BufferIo(StreamIo):
    """ In-memory input and output, handy for testing and embedding """
    def __init__(self, input=b''):
        if isinstance(input, str):
            input = input.encode('utf-8')
        super().__init__(io.BytesIO(input), io.BytesIO())

    def getvalue(self):
        """ Get all bytes written so far """
        return self.output.getvalue()

    def reset(self, input=None):
        """ Discard produced output and optionally provide new input """
        self.output = io.BytesIO()
        if input is not None:
            if isinstance(input, str):
                input = input.encode('utf-8')
            self.input = io.BytesIO(input)
