import pytest


class ListPuller:
    """Hand-written Puller over a list; exposes `pos` so tests can see consumption."""

    def __init__(self, items):
        self.items = list(items)
        self.pos = 0

    def has_next(self):
        return self.pos < len(self.items)

    def next(self):
        if not self.has_next():
            raise StopIteration
        self.pos += 1
        return self.items[self.pos - 1]


@pytest.fixture
def list_puller():
    return ListPuller
