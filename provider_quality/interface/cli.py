"""
Command-line interface for the award simulator.

Main entry point and day loop.
"""

import argparse
import json
import logging
import sys
from typing import Callable

from ..simulation.runner import AwardSimulation
from .config import DisplayConfig, get_config_path, load_config, update_config
from .renderer import (
    console,
    render_rankings,
    render_table,
    show_banner,
    show_continue_prompt,
    show_error,
)

logger = logging.getLogger(__name__)

STOP_ANSWER = "q"


def should_stop(answer: str | None) -> bool:
    """
    True when the user typed q or input ran out.

    Case and surrounding whitespace are ignored, so " Q " also stops.
    """
    if answer is None:
        return True
    return answer.strip().lower() == STOP_ANSWER


def read_console_input() -> str | None:
    """Read one line from the console, or None at end of input."""
    try:
        return console.input()
    except EOFError:
        return None


def render_day(simulation: AwardSimulation, config: DisplayConfig) -> None:
    if config.table_view:
        render_table(simulation.snapshot(), clear=config.clear_screen)
    else:
        render_rankings(simulation.ranked(), clear=config.clear_screen)


def run_interactive(
    simulation: AwardSimulation,
    config: DisplayConfig,
    read_input: Callable[[], str | None] | None = None,
) -> int:
    """
    Advance and render one day per line of input until the user quits.

    Returns:
        Number of days simulated
    """
    read_input = read_input or read_console_input
    show_banner()
    logger.info("Starting interactive simulation with %d awards", len(simulation.awards))

    while True:
        simulation.advance_day()
        render_day(simulation, config)
        show_continue_prompt()
        if should_stop(read_input()):
            break

    logger.info("Stopped after %d days", simulation.day)
    return simulation.day


def run_batch(
    simulation: AwardSimulation,
    days: int,
    config: DisplayConfig,
    as_json: bool = False,
) -> None:
    """Simulate a fixed number of days without prompting."""
    if not as_json:
        show_banner()

    for _ in range(days):
        simulation.advance_day()
        if as_json:
            console.print(
                json.dumps(simulation.snapshot().model_dump()),
                markup=False,
                highlight=False,
                emoji=False,
                soft_wrap=True,
            )
        else:
            # Clearing would erase earlier days in a batch run
            render_day(simulation, config.model_copy(update={"clear_screen": False}))

    logger.info("Simulated %d days", days)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="provider-quality",
        description="Simulate daily award quality and expiration.",
    )
    parser.add_argument(
        "--days", type=int, default=None,
        help="Run this many days without prompting",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="With --days, print each day as a JSON line",
    )
    parser.add_argument(
        "--table", action="store_true", default=None,
        help="Render a table instead of plain lines",
    )
    parser.add_argument(
        "--no-clear", dest="clear_screen", action="store_false", default=None,
        help="Do not clear the screen between days",
    )
    parser.add_argument(
        "--save", action="store_true",
        help="Remember the display options for later runs",
    )
    parser.add_argument(
        "--config-dir", default=".",
        help="Directory holding the config file",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log each simulated day",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.days is not None and args.days < 0:
        parser.error("--days must be non-negative")
    if args.json and args.days is None:
        parser.error("--json requires --days")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(message)s',
        stream=sys.stderr,
    )

    config = load_config(args.config_dir)
    changes = {}
    if args.table is not None:
        changes["table_view"] = args.table
    if args.clear_screen is not None:
        changes["clear_screen"] = args.clear_screen
    config = config.model_copy(update=changes)

    exit_code = 0
    if args.save and not update_config(args.config_dir, **changes):
        show_error(f"Could not save display options to {get_config_path(args.config_dir)}")
        exit_code = 1

    simulation = AwardSimulation.default()

    if args.days is not None:
        run_batch(simulation, args.days, config, as_json=args.json)
    else:
        run_interactive(simulation, config)
    return exit_code
