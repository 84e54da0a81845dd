"""Piece catalog, piece model, naive rotation"""
from dataclasses import dataclass, replace
from typing import Dict, Tuple

Shape = Tuple[Tuple[int, ...], ...]

KINDS = ("I", "O", "T", "S", "Z", "J", "L")

SHAPES: Dict[str, Shape] = {
    "I": ((1,1,1,1),),
    "O": ((1,1),(1,1)),
    "T": ((0,1,0),(1,1,1)),
    "S": ((0,1,1),(1,1,0)),
    "Z": ((1,1,0),(0,1,1)),
    "J": ((1,0,0),(1,1,1)),
    "L": ((0,0,1),(1,1,1)),
}

def shape_of(t: str) -> Shape:
    try:
        return SHAPES[t]
    except KeyError:
        raise ValueError(f"Unknown piece kind: {t!r}") from None

def rotate_cw(m: Shape) -> Shape: return tuple(tuple(r) for r in zip(*m[::-1]))
def rotate_ccw(m: Shape) -> Shape: return tuple(tuple(c) for c in zip(*m))[::-1]

@dataclass(frozen=True)
class Piece:
    t: str
    shape: Shape
    x: int
    y: int

    @staticmethod
    def spawn(t: str, cols: int):
        s = shape_of(t)
        return Piece(t, s, cols//2 - len(s[0])//2, 0)

    def moved(self, dx: int, dy: int):
        return replace(self, x=self.x+dx, y=self.y+dy)

    def cells(self):
        """Absolute (x, y) of every filled cell."""
        return [(self.x+c, self.y+r)
                for r,row in enumerate(self.shape)
                for c,v in enumerate(row) if v]

# rotation, no kicks: the caller rejects an invalid result

def rotate_right(piece: Piece) -> Piece:
    return replace(piece, shape=rotate_cw(piece.shape))

def rotate_left(piece: Piece) -> Piece:
    return replace(piece, shape=rotate_ccw(piece.shape))
