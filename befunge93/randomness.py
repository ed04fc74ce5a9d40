""" Sources of headings for the random direction instruction. """

import abc
import itertools
import random
from .grid import Direction


HEADINGS = (Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN)


class HeadingSource(metaclass=abc.ABCMeta):
    @abc.abstractmethod
    def choose_heading(self):  # pragma: no cover
        """ Pick one of the four headings """
        raise NotImplementedError()


class RandomHeadingSource(HeadingSource):
    """ Uniformly distributed headings, reproducible when seeded """
    def __init__(self, seed=None):
        self.rng = random.Random(seed)

    def choose_heading(self):
        return self.rng.choice(HEADINGS)


class FixedHeadingSource(HeadingSource):
    """ Cycle through a predetermined sequence of headings """
    def __init__(self, headings):
        headings = list(headings)
        if not headings:
            raise ValueError('At least one heading is required')
        self._headings = itertools.cycle(headings)

    def choose_heading(self):
        return next(self._headings)
