import pytest

from tictac import Board, InvalidArgumentError, piece_symbol, render_board


def test_compact_render():
    board = Board()
    board.place(0, 0, 0)
    board.place(1, 1, 1)
    board.place(2, 2, 2)
    assert render_board(board, pretty=False) == "X| | \n-+-+-\n |O| \n-+-+-\n | |1"


def test_pretty_render_dimensions():
    board = Board()
    board.place(0, 0, 0)
    lines = render_board(board).split("\n")
    assert len(lines) == 2 + 3 * (5 + 2)
    assert all(len(line) == 23 for line in lines)
    assert lines[0] == "=" * 23
    assert lines[2] == "==X   X==     ==     =="


def test_pretty_render_larger_board():
    lines = render_board(Board(4)).split("\n")
    assert len(lines) == 2 + 4 * 7
    assert all(len(line) == 30 for line in lines)


def test_piece_symbol():
    assert piece_symbol(None) == " "
    assert piece_symbol(0) == "X"
    assert piece_symbol(1) == "O"
    assert piece_symbol(6) == "5"


def test_piece_without_glyph():
    board = Board()
    board.place(0, 0, 7)
    with pytest.raises(InvalidArgumentError):
        render_board(board)
    with pytest.raises(InvalidArgumentError):
        piece_symbol(7)
