"""Exception hierarchy for the tracker's I/O layer.

The metrics core never raises. Everything here belongs to the prompt
loop and the store, and is mapped to a console message and exit code
by main.main().
"""


class SleepTrackerError(Exception):
    def __init__(self, title: str, detail: str, exit_code: int = 1):
        self.title = title
        self.detail = detail
        self.exit_code = exit_code
        super().__init__(detail)


class UserExitError(SleepTrackerError):
    def __init__(self, command: str = ""):
        super().__init__(
            title="User Exit",
            detail=f"User requested exit with '{command}'" if command else "Input closed",
            exit_code=0,
        )
        self.command = command


class StorageError(SleepTrackerError):
    def __init__(self, detail: str):
        super().__init__(title="Database error", detail=detail)
