from collections.abc import Iterator
from typing import Self, final, override

from lockstep.paired_item import PairedItem
from lockstep.pullers import Puller, as_puller
from lockstep.utils.types import SequenceSource


@final
class PairPuller[L, R](Iterator[PairedItem[L, R]]):
    """
    Advances a left and a right puller in lockstep, yielding one PairedItem
    per step. Stops as soon as either side runs dry; whatever remains on the
    longer side is left untouched.

    Not safe for concurrent use. Not reusable once exhausted.
    """

    def __init__(self, left: Puller[L], right: Puller[R]):
        self._left: Puller[L] = left
        self._right: Puller[R] = right

    @classmethod
    def create(
        cls, left: Puller[L] | Iterator[L], right: Puller[R] | Iterator[R]
    ) -> "PairPuller[L, R]":
        """
        Build from two single-use pull sources (Puller objects or plain
        iterators).

        A plain iterator has to be advanced to answer has_more(), so when the
        left side has an element but the right is exhausted, that left element
        is already gone from the caller's iterator. Pass a Puller to keep
        the longer side fully intact.

        Raises:
            ValueError: either side is None
        """
        if left is None:
            raise ValueError("left puller must not be None")
        if right is None:
            raise ValueError("right puller must not be None")

        return cls(as_puller(left), as_puller(right))

    @classmethod
    def from_sequences(
        cls, left: SequenceSource[L], right: SequenceSource[R]
    ) -> "PairPuller[L, R]":
        """
        Build from two re-iterable sources. A fresh iterator is taken from
        each on every call.

        Raises:
            ValueError: either side is None
        """
        if left is None:
            raise ValueError("left sequence must not be None")
        if right is None:
            raise ValueError("right sequence must not be None")

        return cls.create(iter(left), iter(right))

    def has_more(self) -> bool:
        """Never consumes from a Puller; a plain iterator may be peeked one ahead."""
        # left first; right is never peeked once left is exhausted
        return self._left.has_next() and self._right.has_next()

    def pull_next(self) -> PairedItem[L, R]:
        """
        Raises:
            StopIteration: has_more() is false; no element is consumed
        """
        if not self.has_more():
            raise StopIteration("no more paired items")

        left_item = self._left.next()
        right_item = self._right.next()
        return PairedItem(left_item, right_item)

    @override
    def __iter__(self) -> Self:
        return self

    @override
    def __next__(self) -> PairedItem[L, R]:
        return self.pull_next()
