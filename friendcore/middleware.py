"""Token authentication for the web application."""

from __future__ import annotations

import functools
import inspect
import math
from decimal import Decimal
from typing import Any, Awaitable, Callable

import jwt
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from .config import config

AUTH_SCHEME = "Bearer"
MALFORMED = "Missing or malformed JWT"
_ENV_NAME = "JWT_SECRET"


def _format_float(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    if x == 0:
        return "-0" if math.copysign(1.0, x) < 0 else "0"
    sign, digits, exponent = Decimal(repr(x)).as_tuple()
    point = len(digits) + exponent
    text = "".join(map(str, digits)).rstrip("0")
    count = len(text)
    exp = point - 1
    if exp < -4 or exp >= 6:
        mantissa = text[0] + ("." + text[1:] if count > 1 else "")
        body = f"{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp):02d}"
    elif point <= 0:
        body = "0." + "0" * -point + text
    elif point >= count:
        body = text + "0" * (point - count)
    else:
        body = text[:point] + "." + text[point:]
    return ("-" if sign else "") + body


def _format_value(value: Any) -> str:
    """Render a decoded claim the way the token's consumers expect to see it."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _format_float(float(value))
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return "[" + " ".join(_format_value(item) for item in value) + "]"
    if isinstance(value, dict):
        items = sorted(value.items())
        return "map[" + " ".join(f"{k}:{_format_value(v)}" for k, v in items) + "]"
    return str(value)


class AuthenticateMiddleware(BaseHTTPMiddleware):
    """Copy the claims of a valid bearer token into ``request.state``.

    Requests without a valid token pass through untouched.
    """

    def __init__(self, app: ASGIApp, secret: str | None = None) -> None:
        super().__init__(app)
        self.secret = config(_ENV_NAME) if secret is None else secret

    def _claims(self, request: Request) -> dict[str, Any] | None:
        header = request.headers.get("Authorization", "")
        size = len(AUTH_SCHEME)
        if len(header) <= size + 1 or header[:size] != AUTH_SCHEME:
            return None
        try:
            return jwt.decode(header[size + 1 :], self.secret, algorithms=["HS256"])
        except jwt.InvalidTokenError:
            return None

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        claims = self._claims(request)
        if claims is not None:
            request.state.user = claims
            for key, value in claims.items():
                setattr(request.state, key, _format_value(value))
        return await call_next(request)


def jwt_error(message: str) -> JSONResponse:
    """Return the JSON error response for a failed authentication."""
    if message == MALFORMED:
        return JSONResponse(
            {"status": "error", "message": MALFORMED, "data": None}, status_code=400
        )
    return JSONResponse(
        {"status": "error", "message": "Invalid or expired JWT", "data": None},
        status_code=401,
    )


def protected(
    handler: Callable[[Request], Response | Awaitable[Response]],
) -> Callable[[Request], Awaitable[Response]]:
    """Wrap an endpoint so that it only runs for authenticated requests."""

    @functools.wraps(handler)
    async def endpoint(request: Request) -> Response:
        if getattr(request.state, "user_id", None) is not None:
            if inspect.iscoroutinefunction(handler):
                return await handler(request)
            return await run_in_threadpool(handler, request)
        return jwt_error(MALFORMED + " ")

    return endpoint