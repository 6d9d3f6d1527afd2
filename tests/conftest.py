import pytest

from tictac import Board


class StubRng:
    """Generator stand-in returning fixed draws."""

    def __init__(self, value: float = 0.99, index: int = 0):
        self.value = value
        self.index = index

    def random(self):
        return self.value

    def integers(self, high):
        return min(self.index, high - 1)


@pytest.fixture
def board_from():
    """Build a board from rows of pieces (None = empty)."""
    def build(rows):
        board = Board(len(rows))
        for r, row in enumerate(rows):
            for c, piece in enumerate(row):
                if piece is not None:
                    board.place(r, c, piece)
        return board
    return build


@pytest.fixture
def stub_rng():
    return StubRng
