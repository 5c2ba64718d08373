"""Error codes for CLI exit status.

These map to shell exit codes and are used consistently throughout the
application to indicate the type of failure that occurred.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (bad input, unknown preference key)
    - 2: Environment error (unreadable config, missing tools)
    - 4: Network error (report upload failed)
    - 5: I/O error (preferences could not be written)
    - 6: Internal error (unexpected exception, crash reported)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    NETWORK_ERROR = 4
    IO_ERROR = 5
    INTERNAL_ERROR = 6

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
