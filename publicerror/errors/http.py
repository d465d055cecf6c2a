# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from http import HTTPStatus

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from publicerror.config import load_config
from publicerror.logging import logger

from .chain import format_chain, message_of, status_of

ErrorHook = Callable[[BaseException], None]


def handle_error(exc: BaseException, *, response_format: str = "text") -> Response:
    """Build the client-facing response: public message and status only."""
    status = status_of(exc)
    message = message_of(exc)
    if response_format == "json":
        response = jsonify({"error": message})
    else:
        response = Response(message + "\n", mimetype="text/plain")
        response.headers["X-Content-Type-Options"] = "nosniff"
    response.status_code = status
    return response


def register_error_handler(app: Flask, *, on_error: ErrorHook | None = None) -> None:
    config = load_config()
    debug_mode = config.debug_logging
    response_format = config.response_format

    @app.errorhandler(Exception)
    def _handle_error(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc

        status = status_of(exc)
        level = "WARNING" if status < HTTPStatus.INTERNAL_SERVER_ERROR else "ERROR"
        log = logger.opt(exception=exc) if debug_mode else logger
        # Full private chain goes to the log; the client only sees message_of().
        log.log(level, f"HTTP {status} - {format_chain(exc)} on {request.method} {request.path}")

        if on_error is not None:
            on_error(exc)

        return handle_error(exc, response_format=response_format)


__all__ = ["ErrorHook", "handle_error", "register_error_handler"]
