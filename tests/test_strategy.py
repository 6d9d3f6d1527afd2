import numpy as np
import pytest

from tictac import Board, InvalidArgumentError, InvalidStateError, best_move, min_of, random_move

_ = None


def test_min_of_first_occurrence_wins():
    assert min_of([5, 2, 2, 9]) == (2, 1)
    assert min_of([3, 1, 1]) == (1, 1)
    assert min_of([7]) == (7, 0)
    assert min_of((4, 4, 4)) == (4, 0)


def test_min_of_empty():
    with pytest.raises(InvalidArgumentError):
        min_of([])


def test_best_move_empty_board():
    board = Board()
    weight, move = best_move(0, board)
    assert weight == 3
    assert move in board.empty_cells()


def test_best_move_completes_row(board_from):
    board = board_from([[0, 0, _], [1, _, _], [_, _, 1]])
    assert best_move(0, board) == (1, (0, 2))


def test_best_move_prefers_lower_row(board_from):
    board = board_from([[_, _, _], [0, 0, _], [_, _, _]])
    assert best_move(0, board) == (1, (1, 2))


def test_best_move_finds_column(board_from):
    board = board_from([[1, 0, _], [_, 0, _], [_, _, _]])
    assert best_move(0, board) == (1, (2, 1))


def test_best_move_anti_diagonal(board_from):
    board = board_from([[1, _, _], [1, 0, _], [0, _, _]])
    assert best_move(0, board) == (1, (0, 2))


def test_best_move_all_lines_blocked(board_from):
    board = board_from([[0, _, _], [_, 0, _], [_, _, 1]])
    assert best_move(5, board) == (3, None)


def test_best_move_line_already_owned(board_from):
    board = board_from([[0, 0, 0], [1, 1, _], [_, _, _]])
    assert best_move(0, board) == (0, None)


def test_best_move_does_not_mutate(board_from):
    board = board_from([[0, 1, _], [_, _, _], [_, _, _]])
    before = board.rows()
    best_move(0, board)
    best_move(1, board)
    assert board.rows() == before


def test_best_move_full_board(board_from):
    board = board_from([[0, 0, 1], [1, 1, 0], [0, 1, 0]])
    with pytest.raises(InvalidStateError):
        best_move(0, board)


def test_random_move_single_empty_cell(board_from):
    board = board_from([[0, 0, 1], [1, _, 0], [0, 1, 0]])
    for seed in range(20):
        assert random_move(board, np.random.default_rng(seed)) == (1, 1)


def test_random_move_covers_all_empty_cells():
    board = Board()
    board.place(1, 1, 0)
    rng = np.random.default_rng(0)
    seen = {random_move(board, rng) for _ in range(500)}
    assert seen == set(board.empty_cells())


def test_random_move_default_rng():
    board = Board()
    assert random_move(board) in board.empty_cells()


def test_random_move_full_board(board_from):
    board = board_from([[0, 0, 1], [1, 1, 0], [0, 1, 0]])
    with pytest.raises(InvalidStateError):
        random_move(board, np.random.default_rng(0))
