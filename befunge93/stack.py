""" The befunge data stack. """

from .common import StackEmpty


class Stack:
    """ Last in first out stack of integers.

    Popping an empty stack yields the default value. When strict is set,
    popping an empty stack raises StackEmpty instead.
    """
    def __init__(self, default=0, strict=False):
        self.default = default
        self.strict = strict
        self._values = []

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    def __repr__(self):
        return 'Stack({})'.format(self._values)

    def push(self, value):
        self._values.append(value)

    def pop(self):
        if self._values:
            return self._values.pop()
        elif self.strict:
            raise StackEmpty()
        else:
            return self.default

    def pop2(self):
        """ Pop two values, the first one popped is returned first """
        a = self.pop()
        b = self.pop()
        return a, b

    def peek(self):
        """ Return the top of stack without removing it """
        if self._values:
            return self._values[-1]
        elif self.strict:
            raise StackEmpty()
        else:
            return self.default

    def clear(self):
        self._values.clear()

    def snapshot(self):
        """ Copy of the contents, bottom of stack first """
        return list(self._values)
