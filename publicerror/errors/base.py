# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Unwrapper(Protocol):
    """Anything that can hand back the error it wraps."""

    def unwrap(self) -> BaseException | None: ...


@dataclass(slots=True, eq=False)
class PublicError(Exception):
    """Public-safe message and status code layered over a private cause.

    ``str()`` renders the cause, never ``message``: the message is only
    reachable through :func:`publicerror.message_of` at the boundary.
    """

    cause: BaseException
    message: str
    status_code: int

    def __post_init__(self) -> None:
        Exception.__init__(self, self.cause, self.message, self.status_code)
        self.__cause__ = self.cause
        self.__suppress_context__ = True

    def __str__(self) -> str:
        return str(self.cause)

    def unwrap(self) -> BaseException:
        return self.cause


def wrap(cause: BaseException | None, message: str, status_code: int) -> PublicError | None:
    """Wrap ``cause`` with a public message and status code.

    Returns ``None`` when there is nothing to wrap, so callers can pass
    through an optional error without checking it first.
    """
    if cause is None:
        return None
    return PublicError(cause=cause, message=message, status_code=status_code)


__all__ = ["PublicError", "Unwrapper", "wrap"]
