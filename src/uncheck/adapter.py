"""Adapter functions: invoke an operation, rethrow OSError as UncheckedIOError."""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, TypeVar

from uncheck.errors import UncheckedIOError

logger = logging.getLogger(__name__)

T = TypeVar("T")

MessageSupplier = Callable[[], str]


def _wrap(error: OSError, message: MessageSupplier | None) -> UncheckedIOError:
    """Build the unchecked error. The message supplier is only called here."""
    text = message() if message is not None else None
    logger.debug("Unchecking %s: %s", type(error).__name__, error)
    return UncheckedIOError(text, error)


def run(action: Callable[[], Any], message: MessageSupplier | None = None) -> None:
    """
    Call a zero-argument action for its side effects.

    Raises UncheckedIOError (message from ``message()`` if given) if the action
    raises OSError.
    """
    try:
        action()
    except OSError as e:
        raise _wrap(e, message) from e


def get(supplier: Callable[[], T], message: MessageSupplier | None = None) -> T:
    """
    Call a zero-argument operation and return its result.

    Raises UncheckedIOError (message from ``message()`` if given) if the
    operation raises OSError.
    """
    try:
        return supplier()
    except OSError as e:
        raise _wrap(e, message) from e


def accept(consumer: Callable[..., Any], arg: Any, *args: Any) -> None:
    """Call consumer(arg, *args), discarding the result."""
    try:
        consumer(arg, *args)
    except OSError as e:
        raise _wrap(e, None) from e


def apply(function: Callable[..., T], arg: Any, *args: Any) -> T:
    """Call function(arg, *args) and return its result."""
    try:
        return function(arg, *args)
    except OSError as e:
        raise _wrap(e, None) from e


def test(predicate: Callable[[Any], bool], value: Any) -> bool:
    """Call predicate(value) and return its result."""
    try:
        return predicate(value)
    except OSError as e:
        raise _wrap(e, None) from e


def compare(comparator: Callable[[Any, Any], int], a: Any, b: Any) -> int:
    """Call comparator(a, b) and return its result."""
    try:
        return comparator(a, b)
    except OSError as e:
        raise _wrap(e, None) from e


def unchecked(
    operation: Callable[..., T] | None = None,
    *,
    message: MessageSupplier | None = None,
) -> Any:
    """
    Return a version of ``operation`` that raises UncheckedIOError instead of OSError.

    Works as a plain wrapper (``unchecked(path.read_bytes)``), a bare decorator
    (``@unchecked``) or a decorator with a message (``@unchecked(message=...)``).
    Positional and keyword arguments are forwarded as-is.
    """

    def decorate(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return func(*args, **kwargs)
            except OSError as e:
                raise _wrap(e, message) from e

        return wrapper

    if operation is None:
        return decorate
    return decorate(operation)
