# gridpath/viz.py
from __future__ import annotations
import os
from typing import Tuple

from PIL import Image, ImageDraw

from .grid import GridWorld
from .driver import SearchResult

def _terrain_color(w: int, max_w: int) -> Tuple[int, int, int]:
    if max_w <= 1:
        return (240, 240, 240)
    # heavier cells get darker, plain stays light grey
    t = (w - 1) / (max_w - 1) if w > 1 else 0.0
    v = int(240 - 130 * t)
    return (v, v, v - 20)

def draw_result_png(world: GridWorld, result: SearchResult, out_png: str, cell: int = 10) -> None:
    W, H = world.width * cell, world.height * cell
    img = Image.new("RGB", (W, H), (255, 255, 255))
    drw = ImageDraw.Draw(img)

    def box(x: int, y: int):
        x0, y0 = x * cell, y * cell
        return (x0, y0, x0 + cell - 1, y0 + cell - 1)

    passable = [w for row in world.cells for w in row if w >= 0]
    max_w = max(passable) if passable else 1

    # base terrain
    for y in range(world.height):
        for x in range(world.width):
            if world.is_blocked(x, y):
                drw.rectangle(box(x, y), fill=(0, 0, 0))
            else:
                drw.rectangle(box(x, y), fill=_terrain_color(world.cells[y][x], max_w))

    # expanded cells
    for (x, y) in result.expanded:
        drw.rectangle(box(x, y), fill=(255, 200, 200))

    # path
    if result.path:
        for (x, y) in result.path:
            drw.rectangle(box(x, y), fill=(160, 190, 255))

    # start/goal
    start = result.start if result.start is not None else world.start
    goal = result.goal if result.goal is not None else world.goal
    drw.rectangle(box(*start), fill=(100, 220, 120))
    drw.rectangle(box(*goal), fill=(255, 170, 80))

    d = os.path.dirname(out_png)
    if d:
        os.makedirs(d, exist_ok=True)
    img.save(out_png)
