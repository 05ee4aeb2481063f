"""Request body size limit middleware.

Uploads are capped at settings.max_upload_size. A declared Content-Length
over the limit is rejected before the body is read; bodies without one
(chunked) are counted as they arrive and replayed to the app when they fit.
"""

import json
from typing import Any, Callable

from dossier.middleware._headers import get_header

_BODYLESS_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "DELETE"})


def _too_large_body(max_bytes: int, received: int) -> bytes:
    details: dict[str, Any] = {"max_bytes": max_bytes, "received_bytes": received}
    return json.dumps(
        {
            "error": "PAYLOAD_TOO_LARGE",
            "message": f"Request body must be at most {max_bytes} bytes",
            "details": details,
        }
    ).encode()


async def _reject(send: Callable, max_bytes: int, received: int) -> None:
    body = _too_large_body(max_bytes, received)
    await send(
        {
            "type": "http.response.start",
            "status": 413,
            "headers": [
                (b"content-type", b"application/json"),
                (b"content-length", str(len(body)).encode()),
            ],
        }
    )
    await send({"type": "http.response.body", "body": body, "more_body": False})


def RequestSizeLimitMiddleware(app: Callable, max_bytes: int) -> Callable:
    """Reject request bodies larger than max_bytes with 413."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http" or scope.get("method") in _BODYLESS_METHODS:
            await app(scope, receive, send)
            return

        declared = get_header(scope, "content-length")
        if declared is not None and declared.isdigit():
            if int(declared) > max_bytes:
                await _reject(send, max_bytes, int(declared))
                return
            await app(scope, receive, send)
            return

        buffered: list[dict] = []
        total = 0
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] != "http.request":
                # Client went away before finishing the body.
                buffered.append(message)
                break
            total += len(message.get("body", b""))
            if total > max_bytes:
                await _reject(send, max_bytes, total)
                return
            buffered.append(message)
            more_body = message.get("more_body", False)

        async def replay() -> dict:
            if buffered:
                return buffered.pop(0)
            return await receive()

        await app(scope, replay, send)

    return asgi_app
