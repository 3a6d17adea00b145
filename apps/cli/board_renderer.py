from __future__ import annotations

from types_sudoku import Cell, Grid

"""Rendering utilities to draw a play state as an image: given digits, user digits, and red highlights for conflicting or incorrect entries. Used by the play CLI to export puzzle/solution/board PNGs."""


# board_renderer.py
# Render a 9x9 board onto a 900x900 canvas.
from PIL import Image, ImageDraw, ImageFont

CELL = 100  # 900/9
W = H = 900

BG = (255, 255, 255)
GIVEN_FG = (20, 20, 20)
USER_FG = (30, 90, 200)
BAD_FG = (200, 0, 0)
BAD_BG = (255, 205, 205)
LINE = (0, 0, 0)


def cell_rect(r, c, pad=0):
    # r, c are 0-based
    x0 = c * CELL + pad
    y0 = r * CELL + pad
    x1 = (c + 1) * CELL - pad
    y1 = (r + 1) * CELL - pad
    return (x0, y0, x1, y1)


def load_font(size):
    try:
        return ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", size)
    except OSError:
        return ImageFont.load_default()


def draw_grid_lines(d: ImageDraw.ImageDraw, thin_th=2, heavy_th=6) -> None:
    for i in range(10):
        th = heavy_th if i % 3 == 0 else thin_th
        p = min(i * CELL, W - 1)
        d.line([(p, 0), (p, H)], fill=LINE, width=th)
        d.line([(0, p), (W, p)], fill=LINE, width=th)


def render_board(
    board: Grid,
    initial: Grid | None = None,
    highlight: set[Cell] | list[Cell] | None = None,
) -> Image.Image:
    """Draw ``board``. Cells that are non-zero in ``initial`` are drawn as givens;
    other digits as user entries. Cells in ``highlight`` get a red background."""
    initial = initial if initial is not None else board
    highlight = {tuple(cell) for cell in (highlight or ())}
    im = Image.new("RGB", (W, H), BG)
    d = ImageDraw.Draw(im)
    font = load_font(64)

    for r, c in highlight:
        d.rectangle(cell_rect(r, c), fill=BAD_BG)

    for r in range(9):
        for c in range(9):
            v = board[r][c]
            if v == 0:
                continue
            if initial[r][c] != 0:
                fg = GIVEN_FG
            elif (r, c) in highlight:
                fg = BAD_FG
            else:
                fg = USER_FG
            x0, y0, x1, y1 = cell_rect(r, c)
            d.text(((x0 + x1) // 2, (y0 + y1) // 2), str(v), fill=fg, font=font, anchor="mm")

    draw_grid_lines(d)
    return im


def save_board(out_path, board: Grid, initial: Grid | None = None, highlight=None) -> str:
    render_board(board, initial, highlight).save(out_path)
    return str(out_path)
