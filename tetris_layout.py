# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG


@dataclass
class Dims:
    rows: int
    cols: int
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int


def compute_dims(rows: int, cols: int) -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    panel_w = 200

    board_w = cols * cell
    board_h = rows * cell

    total_w = margin + board_w + margin + panel_w + margin
    # panel content needs ~430px even on short boards
    total_h = margin + max(board_h, 430) + margin

    return Dims(
        rows=rows, cols=cols, cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=margin, board_y=margin,
        panel_x=margin + board_w + margin, panel_y=margin,
    )
