"""Interactive prompts.

Every prompt honours the exit commands; numeric prompts retry until
they get an integer. The input function is injectable for tests.
"""

from collections.abc import Callable

from shared.exceptions import UserExitError
from sleep.domain.models import SleepEntryInput
from sleep.domain.timeutil import parse_int

InputFn = Callable[[str], str]

EXIT_COMMANDS = frozenset({"exit", "quit", "q", "stop"})


def is_exit_command(text: str) -> bool:
    return text.strip().lower() in EXIT_COMMANDS


def get_input(prompt: str, input_fn: InputFn = input) -> str:
    """Read one trimmed line. Raises UserExitError on an exit command or EOF."""
    try:
        answer = input_fn(prompt).strip()
    except EOFError:
        raise UserExitError() from None
    if is_exit_command(answer):
        raise UserExitError(answer)
    return answer


def get_number_input(prompt: str, input_fn: InputFn = input) -> int:
    """Read a signed 32-bit integer. Empty input counts as 0."""
    while True:
        answer = get_input(prompt, input_fn)
        if not answer:
            return 0
        value = parse_int(answer)
        if value is not None:
            return value
        print("Please enter a valid number (or 'exit' to quit).")


def prompt_sleep_entry(input_fn: InputFn = input) -> SleepEntryInput:
    """Ask for one night's sleep data."""
    bedtime = get_input(
        "What time did you go to bed last night? (HH:MM format, e.g., 22:30): ", input_fn
    )
    wake_target = get_input(
        "What time did you plan to wake up? (HH:MM format, e.g., 07:00): ", input_fn
    )
    wake_actual = get_input(
        "What time did you actually wake up this morning? (HH:MM format, e.g., 07:15): ",
        input_fn,
    )

    nap = get_number_input("How many minutes did you nap yesterday? (enter 0 if no naps): ", input_fn)
    quality = get_number_input(
        "Rate your sleep quality (1=very poor, 2=poor, 3=fair, 4=good, 5=excellent): ", input_fn
    )

    total_sleep = get_input(
        "How much total sleep did you get? (HH:MM format, e.g., 07:30): ", input_fn
    )
    awake = get_number_input(
        "How many minutes were you awake during the night "
        "(not counting time to fall asleep)? ",
        input_fn,
    )
    latency = get_number_input("How many minutes did it take you to fall asleep initially? ", input_fn)
    wake_count = get_number_input("How many times did you wake up during the night? ", input_fn)

    notes = get_input(
        "Any additional notes about your sleep (optional, press Enter to skip): ", input_fn
    )

    return SleepEntryInput(
        bedtime=bedtime,
        wake_time_target=wake_target,
        wake_time_actual=wake_actual,
        nap_minutes=nap,
        sleep_quality_score=quality,
        total_sleep=total_sleep,
        awake_minutes=awake,
        sleep_latency_minutes=latency,
        wake_count=wake_count,
        notes=notes,
    )
