import argparse
import logging
import sys
from pathlib import Path

from .engine import solve
from .loader import load_puzzle_yaml
from .loopy import LOOPY_STEPS, EdgeState, LoopySolverResult
from .net import NET_STEPS
from .registry import default_log_level, default_loopy_steps, default_net_seed_steps
from .results import ResultState


def _print_summary(name: str, result) -> None:
    print(f"puzzle: {name}")
    print(f"state: {result.state.value}")
    if isinstance(result, LoopySolverResult):
        grid = result.grid
        print(f"passes: {result.passes}")
        print(
            "edges: "
            f"marked={grid.count_edges(EdgeState.MARKED)} "
            f"disabled={grid.count_edges(EdgeState.DISABLED)} "
            f"normal={grid.count_edges(EdgeState.NORMAL)}"
        )
        for problem in result.contradictions:
            print(f"  contradiction: {problem}")
    else:
        grid = result.grid
        total = grid.rows * grid.columns
        print(f"steps applied: {result.steps_applied}")
        print(f"tiles: locked={total - grid.unlocked_count()}/{total}")


def main() -> None:
    """Entry point for the gridlogic command-line interface."""
    parser = argparse.ArgumentParser(prog="gridlogic", description="Loop and pipe puzzle deduction engine.")
    parser.add_argument(
        "--log-level",
        default=default_log_level(),
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level (default from solver_defaults.yaml).",
    )
    subparsers = parser.add_subparsers(dest="command")

    solve_parser = subparsers.add_parser("solve", help="Run the deduction engine on a puzzle YAML file.")
    solve_parser.add_argument("path", type=Path, help="Puzzle file (family: loopy or net).")
    solve_parser.add_argument("-v", "--verbose", action="store_true", help="Log driver progress at INFO.")

    subparsers.add_parser("steps", help="List registered solver steps and the default order.")

    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "steps":
        print("loopy:")
        for name in default_loopy_steps():
            print(f"  {name}")
        for name in sorted(set(LOOPY_STEPS) - set(default_loopy_steps())):
            print(f"  {name} (not in default order)")
        print("net:")
        for name in default_net_seed_steps():
            print(f"  {name}")
        for name in sorted(set(NET_STEPS) - set(default_net_seed_steps())):
            print(f"  {name} (not seeded by default)")
        sys.exit(0)

    if args.command == "solve":
        try:
            puzzle = load_puzzle_yaml(args.path)
        except (FileNotFoundError, ValueError) as exc:
            print(str(exc), file=sys.stderr)
            sys.exit(1)
        result = solve(puzzle.grid, verbose=args.verbose)
        _print_summary(puzzle.name or args.path.stem, result)
        sys.exit(2 if result.state is ResultState.INVALID else 0)

    sys.exit(1)


if __name__ == "__main__":
    main()
