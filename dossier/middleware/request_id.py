"""Request ID middleware.

Forwards a client-supplied request ID when it is safe to log, otherwise
issues a new ULID. The ID is stored on request.state.request_id and echoed
on the response. Raw ASGI, so streamed downloads are not buffered.
"""

import re
from typing import Callable

from ulid import ULID

from dossier.middleware._headers import get_header

REQUEST_ID_MAX_LENGTH = 64
_SAFE_REQUEST_ID = re.compile(r"^[A-Za-z0-9_-]{1,%d}$" % REQUEST_ID_MAX_LENGTH)


def resolve_request_id(raw: str | None) -> str:
    """Return raw (stripped) when it is a safe ID, else a fresh ULID."""
    candidate = (raw or "").strip()
    if _SAFE_REQUEST_ID.match(candidate):
        return candidate
    return str(ULID())


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Attach a request ID to every HTTP request and response."""
    encoded_name = header_name.lower().encode("latin-1")

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = resolve_request_id(get_header(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_with_request_id(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (encoded_name, request_id.encode("latin-1")),
                ]
            await send(message)

        await app(scope, receive, send_with_request_id)

    return asgi_app
