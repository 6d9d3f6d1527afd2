"""
Console input for human players.

Re-prompts until the user enters an in-range, empty cell.
"""

from typing import Callable, Optional

from .board import Board, Move


def _ask_index(label: str, name: str, size: int, input_fn, print_fn) -> Optional[int]:
    print_fn(f"Player {name}, please enter the {label} where you want to place your piece.")
    print_fn(f"{label.capitalize()}s must be in range [0, {size - 1}].")
    try:
        value = int(input_fn(f"{label}: "))
    except ValueError:
        print_fn("Incorrect format!")
        return None
    if not 0 <= value < size:
        print_fn(f"Invalid {label}.")
        return None
    return value


def prompt_move(
    board: Board,
    player,
    input_fn: Callable[[str], str] = input,
    print_fn: Callable[..., None] = print,
) -> Move:
    """Read a (row, col) for `player` from the console."""
    while True:
        row = _ask_index("row", player.name, board.size, input_fn, print_fn)
        if row is None:
            continue
        col = _ask_index("column", player.name, board.size, input_fn, print_fn)
        if col is None:
            continue
        if board.get(row, col) is not None:
            print_fn(f"Piece already located at {row}, {col}")
            continue
        return row, col
