"""Draw the board as an image: grid lines, givens in black, player entries in blue, optional hint highlight. Used by the console `export` command."""

# overlay_renderer.py
# Board image is SIZE*cell_px square plus a margin; hint cell is shaded green.
from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from solver.grid import Grid, SIZE
from types_sudoku import CellValue

MARGIN = 20
GIVEN_COLOR = (0, 0, 0)
ENTRY_COLOR = (30, 80, 200)
HINT_FILL = (144, 238, 144)
HINT_COLOR = (0, 128, 0)


def load_font(size):
    try:
        return ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", size)
    except OSError:
        return ImageFont.load_default(size)


def cell_rect(r, c, cell_px, pad=0):
    x0 = MARGIN + c * cell_px + pad
    y0 = MARGIN + r * cell_px + pad
    return (x0, y0, x0 + cell_px - 2 * pad, y0 + cell_px - 2 * pad)


def draw_grid_lines(draw, cell_px, color=(0, 0, 0), thin_th=2, heavy_th=5):
    side = SIZE * cell_px
    x1 = y1 = MARGIN
    x2 = y2 = MARGIN + side
    for i in range(SIZE + 1):
        th = heavy_th if i % 3 == 0 else thin_th
        p = MARGIN + i * cell_px
        draw.line([(p, y1), (p, y2)], fill=color, width=th)
        draw.line([(x1, p), (x2, p)], fill=color, width=th)


def render_board(
    current: Grid,
    original: Grid,
    out_path: str | Path,
    hint: CellValue | None = None,
    cell_px: int = 100,
) -> str:
    """Render `current` to a PNG at out_path. Cells given in `original` are drawn black."""
    side = SIZE * cell_px + 2 * MARGIN
    im = Image.new("RGB", (side, side), (255, 255, 255))
    d = ImageDraw.Draw(im)

    if hint is not None:
        d.rectangle(cell_rect(hint.row, hint.col, cell_px, pad=3), fill=HINT_FILL)

    font = load_font(int(cell_px * 0.6))
    for r in range(SIZE):
        for c in range(SIZE):
            v = current.get(r, c)
            if not v:
                continue
            x0, y0, x1, y1 = cell_rect(r, c, cell_px)
            color = GIVEN_COLOR if original.is_given(r, c) else ENTRY_COLOR
            d.text(((x0 + x1) // 2, (y0 + y1) // 2), str(v), fill=color, font=font, anchor="mm")

    if hint is not None and current.is_empty(hint.row, hint.col):
        x0, y0, x1, y1 = cell_rect(hint.row, hint.col, cell_px)
        d.text(((x0 + x1) // 2, (y0 + y1) // 2), str(hint.value), fill=HINT_COLOR, font=font, anchor="mm")

    draw_grid_lines(d, cell_px)

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    im.save(out_path)
    return str(out_path)
