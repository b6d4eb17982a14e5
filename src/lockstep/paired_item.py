from dataclasses import dataclass
from typing import final


@final
@dataclass(frozen=True)
class PairedItem[L, R]:
    """
    One left element and one right element taken at the same position.
    """

    left_item: L
    right_item: R

    def as_tuple(self) -> tuple[L, R]:
        return (self.left_item, self.right_item)

    def __iter__(self):
        # allows `left, right = item`
        yield self.left_item
        yield self.right_item

    def __str__(self) -> str:
        return f"{{{self.left_item}, {self.right_item}}}"
