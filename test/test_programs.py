""" Run some well known befunge programs. """

import unittest
from befunge93.interpreter import BefungeInterpreter
from befunge93.programs import hello_world, factorial, quine
from befunge93.streams import BufferIo


class ProgramTestCase(unittest.TestCase):
    def do(self, src, input=b''):
        m = BefungeInterpreter(io=BufferIo(input))
        m.load(src)
        m.run()
        self.assertFalse(m.running)
        return m.io.getvalue().decode('ascii')

    def test_hello_world(self):
        self.assertEqual('Hello World!', self.do(hello_world))

    def test_factorial(self):
        self.assertEqual('120', self.do(factorial))

    def test_quine(self):
        self.assertEqual(quine.strip(), self.do(quine))

    def test_quine_with_newline(self):
        self.assertEqual(quine.strip(), self.do(quine + '\n'))

    def test_echo_until_zero(self):
        """ Read numbers and echo them until a zero is entered """
        src = '>&:.:v\n^    _@\n'
        self.assertEqual('340', self.do(src, input=b'3\n4\n0\n'))


if __name__ == '__main__':
    unittest.main()
