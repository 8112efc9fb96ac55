from chipdrop.config import COLUMNS, ROWS

# Column kinds for a full board with no four anywhere: A starts with player 1,
# B with player 2, laid out A A B B A A B.
DRAW_LAYOUT = "AABBAAB"


def draw_column(kind):
    first, second = (1, 2) if kind == "A" else (2, 1)
    return [first if r % 2 == 0 else second for r in range(ROWS)]


def draw_moves():
    """(column, player) pairs that fill the board without anyone winning."""
    moves = []
    for col in range(COLUMNS):
        for player in draw_column(DRAW_LAYOUT[col]):
            moves.append((col, player))
    return moves
