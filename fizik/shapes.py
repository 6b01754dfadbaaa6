"""Fixed 9x9 shape masks that a body may carry."""

from __future__ import annotations

Grid = tuple[tuple[int, ...], ...]

SHAPE_SIZE = 9

_CENTRE = (4, 4)

_SHAPE_CELLS: tuple[frozenset[tuple[int, int]], ...] = (
    frozenset({_CENTRE}),
    frozenset((row, col) for row in range(3, 6) for col in range(3, 6)),
    frozenset({(4, 3), (4, 4)}),
    frozenset({(3, 4), (3, 5), (4, 4)}),
    frozenset({_CENTRE}),
    frozenset({(4, 4), (5, 5)}),
    frozenset({_CENTRE}),
    frozenset({_CENTRE}),
    frozenset({_CENTRE}),
)


def _build(cells: frozenset[tuple[int, int]]) -> Grid:
    return tuple(
        tuple(1 if (row, col) in cells else 0 for col in range(SHAPE_SIZE))
        for row in range(SHAPE_SIZE)
    )


SHAPES: tuple[Grid, ...] = tuple(_build(cells) for cells in _SHAPE_CELLS)


def shape(index: int) -> Grid:
    """Return the 9x9 mask for the shape with the given index."""
    if not 0 <= index < len(SHAPES):
        raise IndexError(f"no shape with index {index}; expected 0..{len(SHAPES) - 1}")
    return SHAPES[index]