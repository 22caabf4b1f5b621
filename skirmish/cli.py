"""
Skirmish CLI - Command-line interface for the simulation.

Usage:
    skirmish run                       Replay the built-in arena
    skirmish run --scenario <file>     Replay a scenario file
    skirmish validate <file>           Check a scenario file
"""

import argparse
import logging
import sys

from . import config


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Skirmish - Scripted turn-based combat",
        prog="skirmish",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        help="Diagnostic log level (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Run command
    run_parser = subparsers.add_parser("run", help="Replay a scripted game")
    run_parser.add_argument("--scenario", "-s", help="Path to scenario file")
    run_parser.add_argument(
        "--delay",
        type=int,
        default=config.TURN_DELAY_MS,
        help="Delay before each turn in milliseconds (default: %(default)s)",
    )
    run_parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        default=config.COLOR_OUTPUT,
        help="Disable colored output",
    )

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a scenario file")
    validate_parser.add_argument("scenario_file", help="Path to scenario file")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "run":
        cmd_run(args)
    elif args.command == "validate":
        cmd_validate(args)
    else:
        parser.print_help()
        sys.exit(1)


def _load(path):
    from .scenario import load_scenario, ScenarioLoadError

    try:
        return load_scenario(path)
    except ScenarioLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        for err in e.errors:
            print(f"  - {err}", file=sys.stderr)
        sys.exit(1)


def cmd_run(args):
    """Replay a scripted game."""
    from .engine_core import Store
    from .session import ConsoleNarrator, TurnDriver

    if args.scenario:
        scenario = _load(args.scenario)
        initial_state, turns = scenario.initial_state, scenario.turns
    else:
        from .games.arena import create_default_state, default_turns

        initial_state, turns = create_default_state(), default_turns()

    store = Store(initial_state)
    narrator = ConsoleNarrator(store, color=args.color)
    narrator.attach()

    driver = TurnDriver(
        store,
        turn_delay=max(args.delay, 0) / 1000,
        on_turn_start=lambda index: print(f"Turn NO: {index}"),
    )
    result = driver.run(turns)
    narrator.detach()

    if result.stopped_early:
        print("\n<<< The turn sequence was interrupted >>>")
    else:
        print("No Actions Left")


def cmd_validate(args):
    """Validate a scenario file."""
    scenario = _load(args.scenario_file)
    catalog = scenario.initial_state.available

    print(f"Scenario: {scenario.name}")
    print(f"Classes: {', '.join(c.name for c in catalog.classes) or '-'}")
    print(f"Weapons: {', '.join(f'{w.name} ({w.damage})' for w in catalog.weapons) or '-'}")
    print(f"Turns: {len(scenario.turns)}")
    print(f"Actions: {scenario.action_count}")


if __name__ == "__main__":
    main()
