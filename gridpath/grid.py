# gridpath/grid.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import os
import random

from .types import Coord, IMPASSABLE

PLAIN = 1

@dataclass
class GridWorld:
    width: int
    height: int
    cells: List[List[int]]  # cells[y][x] = weight, IMPASSABLE for obstacles
    start: Coord
    goal: Coord

    @staticmethod
    def uniform(width: int, height: int, start: Coord, goal: Coord, weight: int = PLAIN) -> "GridWorld":
        cells = [[weight for _ in range(width)] for _ in range(height)]
        return GridWorld(width, height, cells, start, goal)

    @staticmethod
    def random(width: int = 20, height: int = 20, p_blocked: float = 0.25,
               p_rough: float = 0.0, rough_weight: int = 5,
               seed: Optional[int] = None) -> "GridWorld":
        rng = random.Random(seed)
        cells: List[List[int]] = []
        for _ in range(height):
            row = []
            for _ in range(width):
                r = rng.random()
                if r < p_blocked:
                    row.append(IMPASSABLE)
                elif r < p_blocked + p_rough:
                    row.append(rough_weight)
                else:
                    row.append(PLAIN)
            cells.append(row)
        start, goal = (0, 0), (width - 1, height - 1)
        cells[start[1]][start[0]] = PLAIN
        cells[goal[1]][goal[0]] = PLAIN
        return GridWorld(width, height, cells, start, goal)

    @staticmethod
    def load(path: str) -> "GridWorld":
        with open(path, "r") as f:
            lines = [line.strip() for line in f if line.strip()]
        if not lines:
            raise ValueError(f"{path}: empty grid file")

        header = lines[0].split()
        if header[0] == "GRID":
            if len(header) != 7:
                raise ValueError(f"{path}: header must be 'GRID w h sx sy gx gy'")
            w, h, sx, sy, gx, gy = map(int, header[1:])
            rows = lines[1:]
            if len(rows) != h:
                raise ValueError(f"{path}: expected {h} rows, found {len(rows)}")
            cells = []
            for y, line in enumerate(rows):
                toks = line.split()
                if len(toks) != w:
                    raise ValueError(f"{path}: row {y} has {len(toks)} cells, expected {w}")
                cells.append([_parse_cell(t, path) for t in toks])
            world = GridWorld(w, h, cells, (sx, sy), (gx, gy))
            world._check_endpoints(path)
            return world

        # fallback (legacy flat format: lines of 0/1, 1=blocked; start=(0,0), goal=(n-1,n-1))
        w = len(lines[0])
        for y, row in enumerate(lines):
            if len(row) != w:
                raise ValueError(f"{path}: row {y} has {len(row)} cells, expected {w}")
            bad = set(row) - {"0", "1"}
            if bad:
                raise ValueError(f"{path}: bad cell {sorted(bad)[0]!r} in row {y}")
        cells = [[IMPASSABLE if c == "1" else PLAIN for c in row] for row in lines]
        world = GridWorld(w, len(cells), cells, (0, 0), (w - 1, len(cells) - 1))
        world._check_endpoints(path)
        return world

    def save(self, path: str) -> None:
        d = os.path.dirname(path)
        if d:
            os.makedirs(d, exist_ok=True)
        with open(path, "w") as f:
            f.write(f"GRID {self.width} {self.height} {self.start[0]} {self.start[1]} "
                    f"{self.goal[0]} {self.goal[1]}\n")
            for row in self.cells:
                f.write(" ".join("#" if v == IMPASSABLE else str(v) for v in row) + "\n")

    def _check_endpoints(self, path: str) -> None:
        for name, (x, y) in (("start", self.start), ("goal", self.goal)):
            if not self.in_bounds(x, y):
                raise ValueError(f"{path}: {name} {(x, y)} is outside the {self.width}x{self.height} grid")

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_blocked(self, x: int, y: int) -> bool:
        return self.cells[y][x] == IMPASSABLE

    def validate(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and not self.is_blocked(x, y)

    def weight(self, x: int, y: int) -> int:
        w = self.cells[y][x]
        if w == IMPASSABLE:
            raise ValueError(f"asked weight of impassable cell {(x, y)}")
        return w

    def set_weight(self, x: int, y: int, w: int) -> None:
        if w < 0:
            raise ValueError("weights must be non-negative; use block() for obstacles")
        self.cells[y][x] = w

    def block(self, x: int, y: int) -> None:
        self.cells[y][x] = IMPASSABLE

def _parse_cell(tok: str, path: str) -> int:
    if tok == "#":
        return IMPASSABLE
    try:
        v = int(tok)
    except ValueError:
        raise ValueError(f"{path}: bad cell {tok!r}") from None
    if v < 0:
        raise ValueError(f"{path}: negative weight {v}")
    return v
