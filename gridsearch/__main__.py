"""Command-line runner for the grid search engine."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .app.controller import SearchController
from .app.fsm import RunState
from .app.settings import AppSettings
from .domain.types import CellKind, Coord
from .utils.grid_factory import (
    add_random_walls, add_walls, create_empty_grid, default_endpoints, parse_layout,
)
from .utils.rng import SeededRNG

EXIT_PATH_FOUND = 0
EXIT_ERROR = 1
EXIT_NO_PATH = 2


def parse_coord(text: str) -> Coord:
    """Parse an 'x,y' argument."""
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x,y but got {text!r}")
    return (x, y)


def build_parser(settings: AppSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridsearch", description="Step-wise Dijkstra / weighted A* grid search"
    )
    parser.add_argument("--layout", type=str, help="Text file with a grid layout (.#SG)")
    parser.add_argument("--size", type=int, default=settings.grid_count, help="Square grid size")
    parser.add_argument("--source", type=parse_coord, help="Source cell as x,y")
    parser.add_argument("--goal", type=parse_coord, help="Goal cell as x,y")
    parser.add_argument("--wall", type=parse_coord, action="append", default=[],
                        help="Blocked cell as x,y (repeatable)")
    parser.add_argument("--density", type=float, default=0.0, help="Share of random walls")
    parser.add_argument("--seed", type=int, help="Seed for random walls")
    parser.add_argument("--algorithm", choices=["dijkstra", "astar"], default="dijkstra")
    parser.add_argument("--weight", type=float, default=1.0, help="A* heuristic weight")
    parser.add_argument("--diagonal", action="store_true", help="Allow diagonal moves")
    parser.add_argument("--corner-cutting", action="store_true",
                        help="Allow diagonals between two blocked corners")
    parser.add_argument("--frontier", choices=["linear", "heap"], default="linear")
    parser.add_argument("--live", action="store_true", help="Pace the run with a Qt timer")
    parser.add_argument("--speed", type=float, default=settings.sim_speed,
                        help="Steps per second in live mode")
    parser.add_argument("--quiet", action="store_true", help="Do not print the final grid")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def build_grid(args):
    """Create the grid described by the command-line arguments."""
    if args.layout:
        return parse_layout(Path(args.layout).read_text())

    grid = create_empty_grid(args.size, args.size)
    source, goal = default_endpoints(grid.width, grid.height)
    grid.set_kind(args.source or source, CellKind.SOURCE)
    grid.set_kind(args.goal or goal, CellKind.GOAL)
    add_walls(grid, args.wall)
    if args.density > 0:
        add_random_walls(grid, args.density, SeededRNG(args.seed))
    return grid


def run_live(controller: SearchController, speed: float) -> None:
    """Run the search on a Qt event loop, one step per timer tick."""
    from PySide6.QtCore import QCoreApplication
    from .app.driver import TickDriver

    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    driver = TickDriver(controller, speed)

    def on_state(state):
        if state is not RunState.RUNNING and state is not RunState.PAUSED:
            app.quit()

    def on_step(report):
        stats = controller.statistics()
        print(f"step {stats['steps_taken']}: settled {report.settled}, "
              f"frontier {stats['open_set_size']}")

    controller.state_changed.connect(on_state)
    controller.step_completed.connect(on_step)
    if controller.start():
        app.exec()
    driver.stop()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line runner."""
    settings = AppSettings.from_env()
    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        grid = build_grid(args)
    except (OSError, ValueError) as e:
        print(f"Error building grid: {e}")
        return EXIT_ERROR

    controller = SearchController(grid, settings)
    controller.error_occurred.connect(lambda message: print(f"Error: {message}"))

    if not controller.configure(
        algorithm=args.algorithm,
        heuristic_weight=args.weight,
        allow_diagonal=args.diagonal,
        allow_corner_cutting=args.corner_cutting,
        frontier=args.frontier,
    ):
        return EXIT_ERROR

    if args.live:
        run_live(controller, args.speed)
    elif controller.start():
        controller.run_to_end()

    outcome = controller.outcome
    if outcome is None:
        return EXIT_ERROR

    if not args.quiet:
        print(controller.render_text())
        print()

    stats = controller.statistics()
    if outcome.success:
        print(f"Path found: {len(outcome.path)} cells, cost {outcome.path_cost}, "
              f"{stats['cells_settled']} cells settled")
        return EXIT_PATH_FOUND

    print(f"No path exists ({stats['cells_settled']} cells settled)")
    return EXIT_NO_PATH


if __name__ == "__main__":
    sys.exit(main())
