import logging
from collections.abc import Iterable, Iterator
from typing import Any, final, override

from lockstep.pair_puller import PairPuller
from lockstep.paired_item import PairedItem
from lockstep.utils.types import SequenceSource

logger = logging.getLogger(__name__)


@final
class PairedSequence[L, R](Iterable[PairedItem[L, R]]):
    """
    streaming [...L], [...R] -> [... {L, R} ]

    Re-iterable: every traversal gets its own PairPuller over fresh iterators,
    so traversals never share cursor state. This only holds if the two sources
    are themselves re-iterable (lists, tuples, ranges, arrays, ...).

    Immutable once built; attribute assignment raises AttributeError.
    """

    __slots__ = ("_left", "_right")

    def __init__(self, left: SequenceSource[L], right: SequenceSource[R]):
        if left is None:
            raise ValueError("left sequence must not be None")
        if right is None:
            raise ValueError("right sequence must not be None")

        for side, source in (("left", left), ("right", right)):
            if not isinstance(source, Iterable):
                raise TypeError(
                    f"{side} sequence must be iterable, got {type(source).__name__}"
                )
            # iterators are exactly the one-shot case
            if isinstance(source, Iterator):
                logger.warning(
                    "PairedSequence %s source %s is a one-shot iterator; "
                    "traversals after the first will be empty",
                    side,
                    type(source).__name__,
                )

        object.__setattr__(self, "_left", left)
        object.__setattr__(self, "_right", right)

    @override
    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"PairedSequence is immutable; cannot set {name!r}")

    @override
    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"PairedSequence is immutable; cannot delete {name!r}")

    @classmethod
    def of(
        cls, left: SequenceSource[L], right: SequenceSource[R]
    ) -> "PairedSequence[L, R]":
        return cls(left, right)

    def new_puller(self) -> PairPuller[L, R]:
        return PairPuller.from_sequences(self._left, self._right)

    @override
    def __iter__(self) -> Iterator[PairedItem[L, R]]:
        return self.new_puller()

    def stream(self) -> Iterator[PairedItem[L, R]]:
        """
        Lazily yields every pair from a fresh traversal.

        Each call starts over from the beginning of both sources; a single
        returned generator cannot be rewound.
        """
        puller = self.new_puller()
        count = 0

        while puller.has_more():
            yield puller.pull_next()
            count += 1

        logger.debug("PairedSequence.stream exhausted after %d pairs", count)

    def lefts(self) -> Iterator[L]:
        """Left components of the paired prefix."""
        for item in self.stream():
            yield item.left_item

    def rights(self) -> Iterator[R]:
        """Right components of the paired prefix."""
        for item in self.stream():
            yield item.right_item
