from collections.abc import Iterator
from typing import Protocol, final, override, runtime_checkable


@runtime_checkable
class Puller[T](Protocol):
    """
    A single-use cursor that can report whether another element exists
    and hand it out exactly once.

    `next()` raises StopIteration when `has_next()` is false.
    """

    def has_next(self) -> bool: ...
    def next(self) -> T: ...


_EMPTY = object()


@final
class IteratorPuller[T](Puller[T]):
    """
    Iterator[T] -> Puller[T]

    Python iterators can only answer "is there more?" by advancing, so
    `has_next` peeks a single element and holds it until `next` takes it.
    """

    def __init__(self, iterator: Iterator[T]):
        self._iterator: Iterator[T] = iterator
        self._peeked: object = _EMPTY
        self._done: bool = False

    @override
    def has_next(self) -> bool:
        if self._peeked is not _EMPTY:
            return True
        if self._done:
            return False

        try:
            self._peeked = next(self._iterator)
        except StopIteration:
            self._done = True
            return False

        return True

    @override
    def next(self) -> T:
        if not self.has_next():
            raise StopIteration("puller is exhausted")

        item = self._peeked
        self._peeked = _EMPTY
        return item  # pyright: ignore[reportReturnType]


def as_puller[T](source: Puller[T] | Iterator[T]) -> Puller[T]:
    """
    Accepts either a ready-made Puller or a plain iterator and returns
    something with the Puller interface.

    Raises:
        ValueError: source is None
        TypeError: source is neither a Puller nor an Iterator
    """
    if source is None:
        raise ValueError("puller source must not be None")
    if isinstance(source, Puller):
        return source
    if isinstance(source, Iterator):
        return IteratorPuller(source)

    raise TypeError(
        f"expected a Puller or an Iterator, got {type(source).__name__}; "
        "pass iter(...) for re-iterable collections"
    )
