from .base import PublicError, Unwrapper, wrap
from .chain import (
    DEFAULT_STATUS,
    annotate,
    as_error,
    find,
    format_chain,
    is_error,
    iter_chain,
    message_of,
    status_of,
    unwrap,
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
