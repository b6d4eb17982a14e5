from .pair_puller import PairPuller
from .paired_item import PairedItem
from .paired_sequence import PairedSequence
from .pullers import IteratorPuller, Puller, as_puller

__all__ = [
    "IteratorPuller",
    "PairPuller",
    "PairedItem",
    "PairedSequence",
    "Puller",
    "as_puller",
]
