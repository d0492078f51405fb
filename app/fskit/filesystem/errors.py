"""Error taxonomy for filesystem operations.

Every failure raised by fskit is a FskitError. Structurally invalid
caller input is reported as InvalidArgumentError before any OS call is
made; failed OS calls are reported as IOFailure, which carries the
targeted path and a reason taken from the native OSError.
"""


class FskitError(Exception):
    """Base exception for all fskit errors."""


class InvalidArgumentError(FskitError, ValueError):
    """Raised when caller-supplied input is structurally invalid."""


class IOFailure(FskitError):
    """Raised when an operating-system level filesystem operation fails.

    Attributes:
        message: Description of the attempted operation.
        path: Path of the file or directory the operation targeted.
        reason: Why the operation failed. Either supplied by the caller or
            taken from the underlying OSError; empty if neither is known.
        errno: Native OS error code, None if unavailable.
    """

    def __init__(
        self,
        message: str,
        path: str,
        reason: str | None = None,
        *,
        error: OSError | None = None,
    ) -> None:
        """Initialize the failure.

        Args:
            message: Description of the attempted operation.
            path: Path the operation targeted. Must not be empty.
            reason: Known failure reason. Takes precedence over ``error``.
            error: The OSError raised by the failed call, if any.

        Raises:
            InvalidArgumentError: If path is empty.
        """
        if not path:
            msg = "IOFailure path cannot be empty"
            raise InvalidArgumentError(msg)

        self.message = message
        self.path = path
        self.errno: int | None = error.errno if error is not None else None
        if reason:
            self.reason = reason
        elif error is not None and error.strerror:
            self.reason = error.strerror
        else:
            self.reason = ""

        super().__init__(self._format())

    def _format(self) -> str:
        if not self.reason:
            return self.message
        reason = self.reason[0].upper() + self.reason[1:]
        if not reason.endswith("."):
            reason += "."
        return f"{self.message} {reason}"
