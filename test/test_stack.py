import unittest
from befunge93.stack import Stack
from befunge93.common import StackEmpty


class StackTestCase(unittest.TestCase):
    def test_lifo(self):
        s = Stack()
        s.push(1)
        s.push(2)
        self.assertEqual(2, s.pop())
        self.assertEqual(1, s.pop())

    def test_pop_empty_gives_default(self):
        """ Popping an empty stack is not an error """
        s = Stack()
        self.assertEqual(0, s.pop())
        self.assertEqual(0, len(s))

    def test_custom_default(self):
        s = Stack(default=-1)
        self.assertEqual(-1, s.pop())
        self.assertEqual(-1, s.peek())

    def test_pop2_order(self):
        s = Stack()
        s.push(1)
        s.push(2)
        self.assertEqual((2, 1), s.pop2())

    def test_pop2_partially_empty(self):
        s = Stack()
        s.push(7)
        self.assertEqual((7, 0), s.pop2())

    def test_strict(self):
        s = Stack(strict=True)
        s.push(3)
        self.assertEqual(3, s.pop())
        with self.assertRaises(StackEmpty):
            s.pop()

    def test_snapshot_and_clear(self):
        s = Stack()
        for value in (4, 5, 6):
            s.push(value)
        self.assertEqual([4, 5, 6], s.snapshot())
        self.assertEqual([4, 5, 6], list(s))
        s.clear()
        self.assertEqual([], s.snapshot())


if __name__ == '__main__':
    unittest.main()
