"""
Console rendering of a board.

Pretty mode draws every cell as a 5x5 glyph framed by '=' borders; compact
mode prints one character per cell:

 X|O|
 -+-+-
"""

from typing import Optional

from .board import Board
from .errors import InvalidArgumentError

GLYPH_SIZE = 5
BORDER_THICKNESS = 2
BORDER_SYMBOL = "="

# Glyph 0 is an empty cell, glyph k is piece k - 1
GLYPHS = [
    ["     ", "     ", "     ", "     ", "     "],
    ["X   X", " X X ", "  X  ", " X X ", "X   X"],
    [" OOO ", "O   O", "O   O", "O   O", " OOO "],
    ["  1  ", " 11  ", "  1  ", "  1  ", " 111 "],
    [" 222 ", "2   2", "  22 ", " 2   ", "22222"],
    ["3333 ", "    3", " 333 ", "    3", "3333 "],
    ["4  4 ", "4  4 ", "44444", "   4 ", "   4 "],
    ["55555", "5    ", "5555 ", "    5", "5555 "],
]

SYMBOLS = " XO12345"

# One glyph per piece, so one piece per player
MAX_PLAYERS = len(GLYPHS) - 1


def _glyph_index(piece: Optional[int]) -> int:
    index = 0 if piece is None else piece + 1
    if not 0 <= index < len(GLYPHS):
        raise InvalidArgumentError(
            f"No symbol for piece {piece}; pieces must be in [0, {len(GLYPHS) - 2}]."
        )
    return index


def piece_symbol(piece: Optional[int]) -> str:
    """Single-character symbol for a piece (space for empty)."""
    return SYMBOLS[_glyph_index(piece)]


def render_board(board: Board, pretty: bool = True) -> str:
    if not pretty:
        lines = []
        for i, row in enumerate(board.rows()):
            lines.append("|".join(piece_symbol(piece) for piece in row))
            if i < board.size - 1:
                lines.append("+".join("-" * board.size))
        return "\n".join(lines)

    width = BORDER_THICKNESS + board.size * (GLYPH_SIZE + BORDER_THICKNESS)
    border = [BORDER_SYMBOL * width] * BORDER_THICKNESS
    edge = BORDER_SYMBOL * BORDER_THICKNESS

    lines = list(border)
    for row in board.rows():
        glyphs = [GLYPHS[_glyph_index(piece)] for piece in row]
        for i in range(GLYPH_SIZE):
            lines.append(edge + "".join(glyph[i] + edge for glyph in glyphs))
        lines.extend(border)
    return "\n".join(lines)
