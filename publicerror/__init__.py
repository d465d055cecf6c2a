# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Public-safe error messages without losing the private error chain.

Wrap an exception anywhere on its way up::

    raise wrap(exc, "Oops! Not found!", HTTPStatus.NOT_FOUND)

and at the boundary log ``format_chain(err)`` internally while sending the
client only ``message_of(err)`` with ``status_of(err)``. Without any
annotation in the chain the client gets ``500 Internal Server Error``.
"""

from .errors import (
    DEFAULT_STATUS,
    PublicError,
    Unwrapper,
    annotate,
    as_error,
    find,
    format_chain,
    is_error,
    iter_chain,
    message_of,
    status_of,
    unwrap,
    wrap,
)

__all__ = [
    "DEFAULT_STATUS",
    "PublicError",
    "Unwrapper",
    "annotate",
    "as_error",
    "find",
    "format_chain",
    "is_error",
    "iter_chain",
    "message_of",
    "status_of",
    "unwrap",
    "wrap",
]
