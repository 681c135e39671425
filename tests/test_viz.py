from pathlib import Path

from PIL import Image

from gridpath.grid import GridWorld
from gridpath.driver import SearchDriver, run_search
from gridpath.viz import draw_result_png


def test_png_has_grid_dimensions_and_colors(tmp_path: Path):
    g = GridWorld.uniform(5, 3, (0, 1), (4, 1))
    g.block(2, 0)
    g.set_weight(2, 2, 8)
    res = run_search(g, "astar")
    out = tmp_path / "nested" / "r.png"
    draw_result_png(g, res, str(out), cell=4)

    img = Image.open(out).convert("RGB")
    assert img.size == (20, 12)
    assert img.getpixel((2 * 4 + 1, 0 * 4 + 1)) == (0, 0, 0)          # obstacle
    assert img.getpixel((0 * 4 + 1, 1 * 4 + 1)) == (100, 220, 120)    # start
    assert img.getpixel((4 * 4 + 1, 1 * 4 + 1)) == (255, 170, 80)     # goal
    assert img.getpixel((2 * 4 + 1, 1 * 4 + 1)) == (160, 190, 255)    # path
    assert img.getpixel((2 * 4 + 1, 2 * 4 + 1)) == (110, 110, 90)     # heaviest terrain


def test_png_marks_the_searched_endpoints(tmp_path: Path):
    g = GridWorld.uniform(3, 3, (0, 0), (2, 2))
    res = SearchDriver(g, "astar", start=(2, 0), goal=(0, 2)).run_to_completion()
    out = tmp_path / "o.png"
    draw_result_png(g, res, str(out), cell=4)

    img = Image.open(out).convert("RGB")
    assert img.getpixel((2 * 4 + 1, 0 * 4 + 1)) == (100, 220, 120)    # overridden start
    assert img.getpixel((0 * 4 + 1, 2 * 4 + 1)) == (255, 170, 80)     # overridden goal
    assert img.getpixel((0 * 4 + 1, 0 * 4 + 1)) != (100, 220, 120)
