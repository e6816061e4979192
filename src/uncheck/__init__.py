"""Run fallible I/O operations and rethrow OSError as UncheckedIOError."""

from uncheck.adapter import accept, apply, compare, get, run, test, unchecked
from uncheck.errors import UncheckedIOError

__version__ = "0.1.0"

__all__ = [
    "UncheckedIOError",
    "__version__",
    "accept",
    "apply",
    "compare",
    "get",
    "run",
    "test",
    "unchecked",
]
