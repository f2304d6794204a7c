"""Sleep Tracker command-line entry point.

Wires together: config, logging, storage, prompts, reporting.
Maps tracker errors to console messages and exit codes.
"""

import argparse
import sys
from datetime import date

import structlog
from sqlalchemy.orm import Session, sessionmaker

from shared.config import settings
from shared.database import create_session_factory
from shared.exceptions import SleepTrackerError, UserExitError
from shared.logging import configure_logging
from sleep.prompts import InputFn, get_input, prompt_sleep_entry
from sleep.reporter import print_efficiency_report, print_entry_result
from sleep.tracker import build_efficiency_report, record_sleep_entry

logger = structlog.get_logger()

COMMANDS = ("enter", "report")


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sleep-tracker",
        description="Record nightly sleep and report 7- and 30-day efficiency averages.",
        epilog="Type 'exit', 'quit', 'q' or 'stop' at any prompt to leave.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=COMMANDS,
        help="Skip the menu: 'enter' new sleep data or show the 'report'",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help=f"SQLAlchemy database URL (default: {settings.database_url})",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=None,
        help="Emit structured JSON logs on stderr",
    )
    return parser


def enter_sleep_data(
    session_factory: sessionmaker[Session],
    input_fn: InputFn = input,
    today: date | None = None,
) -> None:
    entry_date = today or date.today()
    print(f"\n--- Enter Sleep Data for {entry_date.isoformat()} ---")
    print("💡 Reminder: Type 'exit', 'quit', or 'q' at any prompt to stop")

    entry = prompt_sleep_entry(input_fn)
    result = record_sleep_entry(session_factory, entry, entry_date=entry_date)
    print_entry_result(result)


def show_efficiency_averages(
    session_factory: sessionmaker[Session],
    input_fn: InputFn = input,
    today: date | None = None,
) -> None:
    report = build_efficiency_report(session_factory, today=today)
    print_efficiency_report(report)

    print("\nPress Enter to continue or type 'exit'/'quit'/'q' to stop...")
    get_input("", input_fn)


def choose_command(input_fn: InputFn = input) -> str:
    print("1. Enter new sleep data")
    print("2. View sleep efficiency averages")
    choice = get_input("Choose option (1 or 2): ", input_fn)
    if choice == "2":
        return "report"
    if choice != "1":
        print("Invalid choice. Defaulting to entering new sleep data.")
    return "enter"


def run(
    session_factory: sessionmaker[Session],
    command: str | None = None,
    input_fn: InputFn = input,
    today: date | None = None,
) -> None:
    print("--- Sleep Tracker ---")
    print("💡 Tip: Type 'exit', 'quit', or 'q' at any time to stop the program")
    print()

    if command is None:
        command = choose_command(input_fn)

    if command == "report":
        show_efficiency_averages(session_factory, input_fn, today)
    else:
        enter_sleep_data(session_factory, input_fn, today)


def main(argv: list[str] | None = None, input_fn: InputFn = input) -> int:
    args = create_parser().parse_args(argv)
    log_json = settings.log_json if args.log_json is None else args.log_json
    configure_logging(json_output=log_json, level=settings.log_level)

    database_url = args.database_url or settings.database_url
    logger.info("app_starting", database_url=database_url.split("@")[-1], command=args.command)

    try:
        session_factory = create_session_factory(database_url)
        run(session_factory, args.command, input_fn)
    except UserExitError:
        print("\nGoodbye! 👋")
        return 0
    except SleepTrackerError as e:
        print(f"{e.title}: {e.detail}", file=sys.stderr)
        return e.exit_code
    except OSError as e:
        print(f"IO error: {e}", file=sys.stderr)
        return 1

    print("Program completed successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
