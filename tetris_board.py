"""Field model and helpers: collide, merge, sweep"""
from dataclasses import dataclass
from typing import Iterable, Tuple

from tetris_piece import Piece

Row = Tuple[bool, ...]

@dataclass(frozen=True)
class Field:
    cols: int
    rows: int
    cells: Tuple[Row, ...]

    @staticmethod
    def empty(cols: int, rows: int):
        if cols <= 0 or rows <= 0:
            raise ValueError(f"field dimensions must be positive, got {cols}x{rows}")
        return Field(cols, rows, tuple((False,)*cols for _ in range(rows)))

    @staticmethod
    def from_rows(rows: Iterable[Iterable]):
        """Build a field from rows of truthy/falsy cells, top row first."""
        cells = tuple(tuple(bool(v) for v in r) for r in rows)
        if not cells or not cells[0]:
            raise ValueError("field dimensions must be positive")
        if any(len(r) != len(cells[0]) for r in cells):
            raise ValueError("field rows must have equal length")
        return Field(len(cells[0]), len(cells), cells)

    def filled(self, x: int, y: int) -> bool:
        return self.cells[y][x]

def collide(field: Field, piece: Piece) -> bool:
    for bx,by in piece.cells():
        if bx<0 or bx>=field.cols or by>=field.rows: return True
        # rows above the field only get the column check
        if by>=0 and field.cells[by][bx]: return True
    return False

def is_valid(field: Field, piece: Piece) -> bool:
    return not collide(field, piece)

def merge(field: Field, piece: Piece) -> Field:
    grid = [list(r) for r in field.cells]
    for bx,by in piece.cells():
        if by>=0: grid[by][bx] = True
    return Field(field.cols, field.rows, tuple(tuple(r) for r in grid))

def sweep(field: Field) -> Tuple[Field, int]:
    kept = [r for r in field.cells if not all(r)]
    c = field.rows - len(kept)
    if not c:
        return field, 0
    rows = [(False,)*field.cols for _ in range(c)] + kept
    return Field(field.cols, field.rows, tuple(rows)), c
