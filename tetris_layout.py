# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG

@dataclass
class Dims:
    cell: int
    margin: int
    side_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    hold_x: int
    board_x: int
    board_y: int
    panel_x: int

def compute_dims(cols: int = CONFIG["COLS"], rows: int = CONFIG["ROWS"]) -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    side_w = 160

    board_w = cols * cell
    board_h = rows * cell

    # hold column | board | score + next column
    total_w = margin + side_w + margin + board_w + margin + side_w + margin
    total_h = margin + board_h + margin

    hold_x = margin
    board_x = hold_x + side_w + margin
    board_y = margin
    panel_x = board_x + board_w + margin

    return Dims(
        cell=cell, margin=margin, side_w=side_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        hold_x=hold_x, board_x=board_x, board_y=board_y,
        panel_x=panel_x
    )
