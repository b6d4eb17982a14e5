from collections.abc import Iterable

# any re-iterable object; each iter() call must hand back a fresh iterator
type SequenceSource[T] = Iterable[T]
