"""Composition root for the Roster query system.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Repository instantiation
- Query service initialization
- Entry point selection (single command or interactive prompt)
"""

import argparse
import json
import logging
import sys
from typing import Any

from roster.adapters.cli.commands import COMMANDS, CLICommandHandler, run_command
from roster.adapters.repository.memory import InMemoryMemberRepository
from roster.config import Settings, load_settings
from roster.core.member_queries import MemberQueryService


def _parse_args_json(args_str: str) -> dict[str, Any]:
    """Parse a JSON object of command arguments.

    Raises:
        ValueError: If the text is not valid JSON or not an object.
    """
    if not args_str:
        return {}
    try:
        args = json.loads(args_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON arguments: {e}") from e
    if not isinstance(args, dict):
        raise ValueError("Command arguments must be a JSON object")
    return args


def _run_cli_interactive(cli_handler: CLICommandHandler) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for query commands.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    while True:
        try:
            command_line = input("roster> ").strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            # Parse command and arguments
            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = _parse_args_json(args_str)
            except ValueError as e:
                logger.error(f"{e}. Use 'help' for command syntax.")
                continue

            try:
                result = run_command(cli_handler, command, args)
                print(json.dumps(result, indent=2, default=str))
            except Exception as e:
                logger.error(f"Command execution error: {e}", exc_info=True)
                print(json.dumps({
                    "status": "error",
                    "message": str(e)
                }, indent=2))

        except EOFError:
            # Ctrl+D to exit
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  starting-with       Members whose name starts with a prefix, natural order.
                      Optional: prefix
  house               Members of a house sorted by name. Optional: house
  earning-less-than   Members under a salary threshold, sorted by house.
                      Optional: threshold
  sorted              All members by house name, then name.
  house-by-birthdate  Members of a house, oldest first. Optional: house
  title               Members with a title, name descending.
                      Optional: title (king, queen, lord, lady, knight)
  average-salary      Average salary of all members.
  house-names         Names of a house's members. Optional: house
  all-earn-more-than  Whether every salary exceeds a threshold.
                      Optional: threshold
  any-of-house        Whether a house has any members. Optional: house
  count-of-house      Number of members in a house. Optional: house
  sample              First few members of a house. Optional: house, limit
  joined-names        A house's names as one string. Optional: house, separator
  highest-paid        Member with the highest salary.
  partition           Members split into Men and Women.
  group-by-house      Members grouped by house.
  count-by-house      Member count per house.
  house-stats         Max, min and average salary per house.
  stats               Max, min and average salary across all members.
  houses              Every known house and its region.
  words               The word list exercises. Optional: words
                      (strings or nulls)

  Every command accepts "format": "json" or "text".

  Example: house {"house": "Lannister", "format": "text"}

  help                Show this help message.
  exit                Exit the CLI.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Logs go to stderr so stdout carries only command results
    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_cli_handler(settings: Settings) -> CLICommandHandler:
    """Wire the repository, query service and CLI handler together.

    Args:
        settings: Validated application settings.

    Returns:
        CLICommandHandler ready to execute commands.
    """
    repository = InMemoryMemberRepository()
    queries = MemberQueryService(repository)
    return CLICommandHandler(queries, settings)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roster",
        description="Query the noble house member dataset.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=COMMANDS,
        help="Command to run; omit for the interactive prompt",
    )
    parser.add_argument(
        "arguments",
        nargs="?",
        default="",
        help='Command arguments as a JSON object, e.g. \'{"house": "Tyrell"}\'',
    )
    return parser


def bootstrap(argv: list[str] | None = None) -> int:
    """Load configuration, wire components, and run the requested mode.

    Steps:
    1. Parse command-line arguments
    2. Load configuration from environment
    3. Configure logging
    4. Wire repository, query service and CLI handler
    5. Run a single command, or the interactive prompt if none was given

    Returns:
        Process exit code: 0 on success, 1 if the command reported an error.
    """
    # Step 1: Parse arguments
    parsed = build_parser().parse_args(argv)

    # Step 2: Load configuration
    settings = load_settings()

    # Step 3: Configure logging
    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.debug("Loading Roster query system...")

    # Step 4: Wire components
    cli_handler = build_cli_handler(settings)

    # Step 5: Run
    if parsed.command is None:
        _run_cli_interactive(cli_handler)
        return 0

    args = _parse_args_json(parsed.arguments)
    result = run_command(cli_handler, parsed.command, args)
    print(json.dumps(result, indent=2, default=str))
    return 0 if result.get("status") == "success" else 1


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful run
        1: Command error or fatal bootstrap error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        sys.exit(bootstrap())
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
