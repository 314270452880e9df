# crucible/cli.py
from __future__ import annotations
import argparse, csv, logging, os, os.path, sys
from typing import List, Optional, Sequence, Tuple

from .exceptions import CrucibleError
from .grid import CostGrid
from .logging_config import configure_logging
from .profiles import CrucibleProfile, NORMAL, ULTRA, get_profile
from .runs import RunStats, run_profiles
from .viz import draw_grid_png

logger = logging.getLogger(__name__)

DEFAULT_PROFILES = (NORMAL, ULTRA)


def format_stats(name: str, s: RunStats) -> str:
    cost = f"{s.cost:6d}" if s.reached else "  none"
    return (f"{name:10s} | reached={s.reached!s:5s} | cost={cost} | steps={s.steps:4d} | "
            f"expansions={s.expansions:7d} | peak={s.frontier_peak:6d} | "
            f"time={s.elapsed_sec*1000:8.1f} ms")


def format_result(name: str, s: RunStats) -> str:
    return f"{name}: {s.cost}" if s.reached else f"{name}: no path"


def _profiles(args: argparse.Namespace) -> Tuple[CrucibleProfile, ...]:
    if not args.profile:
        return DEFAULT_PROFILES
    return tuple(get_profile(p) for p in args.profile)


# -------- subcommands --------

def cmd_solve(args: argparse.Namespace) -> int:
    grid = CostGrid.load(args.file)
    results = run_profiles(grid, _profiles(args), time_limit=args.time_limit)
    for name, st in results:
        print(format_stats(name, st) if args.stats else format_result(name, st))
        if args.path and st.result is not None:
            print("  " + " ".join(str(s) for s in st.result.path))
    return 0 if all(st.reached for _, st in results) else 1


def cmd_gen(args: argparse.Namespace) -> int:
    os.makedirs(args.out, exist_ok=True)
    for i in range(args.count):
        grid = CostGrid.random(args.width, args.height,
                               seed=(args.seed + i) if args.seed is not None else None,
                               low=args.low, high=args.high)
        path = os.path.join(args.out, f"grid_{i:03d}.txt")
        grid.save(path)
        print("wrote", path)
    return 0


def cmd_bench(args: argparse.Namespace) -> int:
    envs = sorted(p for p in os.listdir(args.envdir) if p.endswith(".txt"))
    profiles = _profiles(args)
    rows = []
    for fname in envs:
        grid = CostGrid.load(os.path.join(args.envdir, fname))
        for name, st in run_profiles(grid, profiles, time_limit=args.time_limit):
            print(f"{fname} :: {format_stats(name, st)}")
            rows.append({
                "env": fname,
                "profile": name,
                "reached": st.reached,
                "cost": st.cost if st.reached else "",
                "steps": st.steps,
                "expansions": st.expansions,
                "frontier_peak": st.frontier_peak,
                "time_sec": round(st.elapsed_sec, 6),
            })
    if args.csv and rows:
        with open(args.csv, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            writer.writeheader()
            writer.writerows(rows)
        print("wrote CSV:", args.csv)
    return 0


def cmd_png(args: argparse.Namespace) -> int:
    grid = CostGrid.load(args.file)
    base = os.path.splitext(os.path.basename(args.file))[0]
    for name, st in run_profiles(grid, _profiles(args), time_limit=args.time_limit):
        out_png = os.path.join(args.out, f"{base}_{name.replace(':', '-')}.png")
        draw_grid_png(grid, st.path_taken, st.expanded_all, out_png, cell=args.cell)
        print(format_result(name, st), "->", out_png)
    return 0


def cmd_view(args: argparse.Namespace) -> int:
    from .viewer import view  # pygame is only needed here

    grid = CostGrid.load(args.file)
    view(grid, _profiles(args), cell_size=args.cell, fps=args.fps,
         fullscreen=args.fullscreen, env_dir=args.envdir)
    return 0


def _add_profile_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--profile", action="append", default=None,
                   help="preset name (normal, ultra) or MIN:MAX; repeatable; default normal and ultra")
    p.add_argument("--time-limit", type=float, default=None, help="seconds allowed per search")


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="crucible", description="Minimum heat-loss crucible routing")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("solve", help="print the minimum heat loss for a grid file")
    s.add_argument("file")
    _add_profile_args(s)
    s.add_argument("--stats", action="store_true", help="print search statistics")
    s.add_argument("--path", action="store_true", help="print the route taken")
    s.set_defaults(func=cmd_solve)

    g = sub.add_parser("gen", help="generate random cost grids")
    g.add_argument("--count", type=int, default=10)
    g.add_argument("--width", type=int, default=13)
    g.add_argument("--height", type=int, default=13)
    g.add_argument("--low", type=int, default=1)
    g.add_argument("--high", type=int, default=9)
    g.add_argument("--out", type=str, default="envs")
    g.add_argument("--seed", type=int, default=None)
    g.set_defaults(func=cmd_gen)

    b = sub.add_parser("bench", help="solve every .txt grid in a folder")
    b.add_argument("--envdir", type=str, required=True)
    _add_profile_args(b)
    b.add_argument("--csv", type=str, default="")
    b.set_defaults(func=cmd_bench)

    r = sub.add_parser("png", help="render solved routes to PNG")
    r.add_argument("file")
    _add_profile_args(r)
    r.add_argument("--out", type=str, default="runs")
    r.add_argument("--cell", type=int, default=10)
    r.set_defaults(func=cmd_png)

    v = sub.add_parser("view", help="step through the search in a window")
    v.add_argument("file")
    _add_profile_args(v)
    v.add_argument("--cell", type=int, default=24)
    v.add_argument("--fps", type=int, default=60)
    v.add_argument("--envdir", type=str, default=None, help="folder of grids to cycle through with [ and ]")
    v.add_argument("--fullscreen", action="store_true")
    v.set_defaults(func=cmd_view)

    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    try:
        return args.func(args)
    except (CrucibleError, OSError) as e:
        logger.debug("command failed", exc_info=True)
        print(f"crucible: {e}", file=sys.stderr)
        return 1
