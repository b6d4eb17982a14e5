from .types import SequenceSource

__all__ = ["SequenceSource"]
