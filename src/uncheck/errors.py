"""Unchecked error raised in place of an OSError."""

from __future__ import annotations


class UncheckedIOError(RuntimeError):
    """
    Raised when a fallible operation fails with OSError.

    The original OSError is kept as ``cause`` (and ``__cause__``), unmodified.
    Without an explicit message, the message is ``"<CauseClass>: <cause text>"``.
    """

    def __init__(self, message: str | None, cause: OSError) -> None:
        if not isinstance(cause, OSError):
            raise TypeError(f"cause must be an OSError, got {type(cause).__name__}")
        if message is None:
            message = f"{type(cause).__name__}: {cause}"
        super().__init__(message)
        self._cause = cause
        self.__cause__ = cause

    def __reduce__(self) -> tuple:
        return (type(self), (self.message, self._cause))

    @property
    def cause(self) -> OSError:
        """The original OSError; unaffected by later changes to ``__cause__``."""
        return self._cause

    @property
    def message(self) -> str:
        return self.args[0]
