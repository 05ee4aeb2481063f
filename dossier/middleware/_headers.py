"""Header lookup on raw ASGI scopes."""


def get_header(scope: dict, name: str) -> str | None:
    """Return the first value of header name (case-insensitive), or None."""
    wanted = name.lower().encode("latin-1")
    for key, value in scope.get("headers", []):
        if key.lower() == wanted:
            return value.decode("latin-1")
    return None
