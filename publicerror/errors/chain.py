# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Walking exception chains.

A chain is whatever :func:`unwrap` reaches one step at a time: an explicit
``unwrap()`` method first, then ``__cause__``, then ``__context__`` unless
it was suppressed. Chains are assumed to be acyclic.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from http import HTTPStatus
from typing import TypeVar

from .base import PublicError

E = TypeVar("E", bound=BaseException)

DEFAULT_STATUS = HTTPStatus.INTERNAL_SERVER_ERROR


def unwrap(err: BaseException | None) -> BaseException | None:
    if err is None:
        return None
    unwrap_method = getattr(err, "unwrap", None)
    if callable(unwrap_method):
        return unwrap_method()
    cause = getattr(err, "__cause__", None)
    if cause is not None:
        return cause
    if getattr(err, "__suppress_context__", False):
        return None
    return getattr(err, "__context__", None)


def iter_chain(err: BaseException | None) -> Iterator[BaseException]:
    while err is not None:
        yield err
        err = unwrap(err)


def _walk(err: BaseException | None) -> Iterator[BaseException]:
    # Exception groups fan out: every branch is searched before the group's own cause.
    while err is not None:
        yield err
        if isinstance(err, BaseExceptionGroup):
            for branch in err.exceptions:
                yield from _walk(branch)
        err = unwrap(err)


def _matches(err: BaseException, target: BaseException) -> bool:
    if err is target or err == target:
        return True
    is_ = getattr(err, "is_", None)
    return callable(is_) and bool(is_(target))


def is_error(err: BaseException | None, target: BaseException | None) -> bool:
    """Report whether ``target`` appears anywhere in ``err``'s chain."""
    if err is None or target is None:
        return err is target
    return any(_matches(layer, target) for layer in _walk(err))


def as_error(err: BaseException | None, exc_type: type[E]) -> E | None:
    """Return the first exception in ``err``'s chain that is an ``exc_type``."""
    for layer in _walk(err):
        if isinstance(layer, exc_type):
            return layer
    return None


def find(err: BaseException | None) -> PublicError | None:
    """Return the outermost :class:`PublicError` in the chain, if any.

    The search stops at the first annotation, so a later ``wrap`` closer to
    the boundary hides the deeper ones from :func:`status_of` and
    :func:`message_of` while leaving them in the chain for logging.
    """
    for layer in iter_chain(err):
        if isinstance(layer, PublicError):
            return layer
    return None


def status_of(err: BaseException | None) -> int:
    found = find(err)
    if found is not None:
        return found.status_code
    return int(DEFAULT_STATUS)


def message_of(err: BaseException | None) -> str:
    found = find(err)
    if found is not None:
        return found.message
    return DEFAULT_STATUS.phrase


def format_chain(err: BaseException | None, sep: str = ": ") -> str:
    """Render every layer of the chain for internal logs.

    Annotations render as their cause, so they are skipped to avoid
    repeating the same text.
    """
    parts = [str(layer) for layer in iter_chain(err) if not isinstance(layer, PublicError)]
    return sep.join(part for part in parts if part)


@contextmanager
def annotate(
    message: str,
    status_code: int,
    *,
    exceptions: type[BaseException] | tuple[type[BaseException], ...] = (Exception,),
) -> Iterator[None]:
    """Re-raise matching exceptions wrapped in a :class:`PublicError`.

    Works as a ``with`` block or as a decorator.
    """
    try:
        yield
    except exceptions as exc:
        raise PublicError(cause=exc, message=message, status_code=status_code) from exc


__all__ = [
    "DEFAULT_STATUS",
    "annotate",
    "as_error",
    "find",
    "format_chain",
    "is_error",
    "iter_chain",
    "message_of",
    "status_of",
    "unwrap",
]
