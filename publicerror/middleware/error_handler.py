# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

from flask import Flask, request

from publicerror.errors.http import ErrorHook, register_error_handler
from publicerror.logging import clear_correlation_id, set_correlation_id


def configure_error_handling(app: Flask, *, on_error: ErrorHook | None = None) -> None:
    @app.before_request
    def _bind_correlation_id() -> None:
        set_correlation_id(request.headers.get("X-Request-ID") or secrets.token_urlsafe(8))

    @app.teardown_request
    def _teardown(_exc: BaseException | None) -> None:
        clear_correlation_id()

    register_error_handler(app, on_error=on_error)


__all__ = ["configure_error_handling"]
