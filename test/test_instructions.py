import unittest
from befunge93.instructions import Opcode, decode
from befunge93.interpreter import BefungeInterpreter
from befunge93.common import UnknownInstruction
from befunge93.streams import BufferIo


class DecodeTestCase(unittest.TestCase):
    def test_digits(self):
        for char in '0123456789':
            self.assertIs(Opcode.PUSH_DIGIT, decode(char))

    def test_operators(self):
        self.assertIs(Opcode.SWAP, decode('\\'))
        self.assertIs(Opcode.GREATER, decode('`'))
        self.assertIs(Opcode.END, decode('@'))
        self.assertIs(Opcode.NOP, decode(' '))

    def test_unknown(self):
        for char in ('x', 'V', '\t', '²', 'é'):
            with self.assertRaises(UnknownInstruction) as cm:
                decode(char)
            self.assertEqual(char, cm.exception.char)

    def test_dispatch_is_total(self):
        """ Every opcode has a handler in the interpreter """
        m = BefungeInterpreter(io=BufferIo())
        self.assertEqual(set(Opcode), set(m._handlers))


if __name__ == '__main__':
    unittest.main()
