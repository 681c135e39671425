# gridpath/cli.py
from __future__ import annotations
import argparse, csv, logging, os, os.path, sys
from typing import List, Optional, Sequence, Tuple

from .grid import GridWorld
from .search import ALGORITHMS
from .driver import SearchDriver, SearchResult, LoggingObserver, SearchObserver
from .errors import PathfinderError
from .viz import draw_result_png

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

def format_stats(name: str, r: SearchResult) -> str:
    path_len = len(r.path) if r.path else 0
    cost = "-" if r.cost is None else str(r.cost)
    return (f"{name:10s} | found={r.found!s:5s} | path={path_len:4d} | cost={cost:>6s} | "
            f"visited={r.visited_count:6d} | steps={r.steps:6d} | "
            f"time={r.elapsed_sec*1000:7.1f} ms")

def parse_algorithms(text: str) -> List[str]:
    names = [n.strip() for n in text.split(",") if n.strip()]
    unknown = [n for n in names if n not in ALGORITHMS]
    if unknown or not names:
        raise argparse.ArgumentTypeError(
            f"unknown algorithm(s) {', '.join(unknown) or '(none)'}; choose from {', '.join(ALGORITHMS)}")
    return names

def run_all_algs(world: GridWorld, algorithms: Sequence[str] = tuple(ALGORITHMS),
                 out_dir: Optional[str] = None, base_tag: str = "run",
                 trace: bool = False) -> List[Tuple[str, SearchResult]]:
    results: List[Tuple[str, SearchResult]] = []
    for name in algorithms:
        observer: SearchObserver = LoggingObserver(name) if trace else SearchObserver()
        res = SearchDriver(world, name, observer=observer).run_to_completion()
        results.append((name, res))
        if out_dir:
            draw_result_png(world, res, os.path.join(out_dir, f"{base_tag}_{name}.png"))
    return results

# -------- subcommands --------

def cmd_gen(args: argparse.Namespace) -> None:
    os.makedirs(args.out, exist_ok=True)
    for i in range(args.count):
        gw = GridWorld.random(width=args.width, height=args.height, p_blocked=args.p,
                              p_rough=args.rough, rough_weight=args.rough_weight,
                              seed=(args.seed + i) if args.seed is not None else None)
        path = os.path.join(args.out, f"grid_{i:03d}.txt")
        gw.save(path)
        print("wrote", path)

def cmd_demo(args: argparse.Namespace) -> None:
    if args.trace:
        logging.getLogger("gridpath.driver.trace").setLevel(logging.DEBUG)
    gw = GridWorld.load(args.env)
    os.makedirs(args.out, exist_ok=True)
    tag = os.path.splitext(os.path.basename(args.env))[0]
    results = run_all_algs(gw, args.algorithms, out_dir=args.out, base_tag=tag, trace=args.trace)
    for name, res in results:
        print(format_stats(name, res))

def cmd_bench(args: argparse.Namespace) -> None:
    envs = sorted(p for p in os.listdir(args.envdir) if p.endswith(".txt"))
    out_dir = None if args.no_png else args.out
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    rows = []
    for fname in envs:
        gw = GridWorld.load(os.path.join(args.envdir, fname))
        base = os.path.splitext(fname)[0]
        for name, res in run_all_algs(gw, args.algorithms, out_dir=out_dir, base_tag=base):
            print(f"{fname} :: {format_stats(name, res)}")
            rows.append({
                "env": fname,
                "alg": name,
                "found": res.found,
                "path_len": len(res.path) if res.path else 0,
                "cost": "" if res.cost is None else res.cost,
                "visited": res.visited_count,
                "steps": res.steps,
                "time_sec": round(res.elapsed_sec, 6),
            })
    if args.csv and rows:
        with open(args.csv, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            writer.writeheader()
            writer.writerows(rows)
        print("wrote CSV:", args.csv)

def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gridpath", description="Grid pathfinding (BFS, Dijkstra, A*)")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                   default=os.getenv("GRIDPATH_LOG_LEVEL", "WARNING").upper(),
                   help="logging level (default from GRIDPATH_LOG_LEVEL, else WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)
    all_algs = ",".join(ALGORITHMS)

    g = sub.add_parser("gen", help="generate random grids")
    g.add_argument("--count", type=int, default=10)
    g.add_argument("--width", type=int, default=20)
    g.add_argument("--height", type=int, default=20)
    g.add_argument("--p", type=float, default=0.25, help="obstacle probability")
    g.add_argument("--rough", type=float, default=0.0, help="rough terrain probability")
    g.add_argument("--rough-weight", type=int, default=5)
    g.add_argument("--out", type=str, default="envs")
    g.add_argument("--seed", type=int, default=None)
    g.set_defaults(func=cmd_gen)

    d = sub.add_parser("demo", help="run the algorithms on one grid and save PNGs")
    d.add_argument("--env", type=str, required=True)
    d.add_argument("--out", type=str, default="runs")
    d.add_argument("--algorithms", type=parse_algorithms, default=list(ALGORITHMS),
                   help=f"comma separated subset of {all_algs}")
    d.add_argument("--trace", action="store_true", help="log every visited and path cell (DEBUG)")
    d.set_defaults(func=cmd_demo)

    b = sub.add_parser("bench", help="run the algorithms on every .txt grid in a folder")
    b.add_argument("--envdir", type=str, required=True)
    b.add_argument("--out", type=str, default="runs")
    b.add_argument("--csv", type=str, default="")
    b.add_argument("--no-png", action="store_true")
    b.add_argument("--algorithms", type=parse_algorithms, default=list(ALGORITHMS),
                   help=f"comma separated subset of {all_algs}")
    b.set_defaults(func=cmd_bench)

    return p

def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    # argparse does not apply choices to defaults, so GRIDPATH_LOG_LEVEL is checked here
    if args.log_level not in LOG_LEVELS:
        ap.error(f"invalid log level {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)
    try:
        args.func(args)
    except (PathfinderError, ValueError, OSError) as e:
        print(f"gridpath: error: {e}", file=sys.stderr)
        return 1
    return 0
