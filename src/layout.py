"""Drop-position estimation for a column of fixed-height cards."""
import math

CARD_HEIGHT = 100
CARD_VERTICAL_MARGIN = 5


def card_cell_height(card_height: float = CARD_HEIGHT, vertical_margin: float = CARD_VERTICAL_MARGIN) -> float:
    """Height one card occupies in a column: the card plus margin above and below."""
    return card_height + 2 * vertical_margin


CARD_CELL_HEIGHT = card_cell_height()


def estimate_target_index(y: float, cell_height: float, column_length: int) -> int:
    """Return the insertion index for a drop at ``y`` pixels below the column top.

    The result is ``floor(y / cell_height)`` clamped to ``[0, column_length]``;
    the upper bound is the length itself so a drop below the last card appends.
    Infinite ``y`` clamps like any other out-of-range value; NaN is rejected.
    """
    if cell_height <= 0:
        raise ValueError(f'cell_height must be positive, got {cell_height}')
    if column_length < 0:
        raise ValueError(f'column_length must be >= 0, got {column_length}')
    if math.isnan(y):
        raise ValueError('y must be a number, got nan')
    if math.isinf(y):
        return column_length if y > 0 else 0
    index = math.floor(y / cell_height)
    return max(0, min(index, column_length))
