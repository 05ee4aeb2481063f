"""HTTP middleware: request size limit and request ID.

Applied in dossier.main; first added = outermost.
"""

from dossier.middleware.request_id import RequestIDMiddleware
from dossier.middleware.request_size_limit import RequestSizeLimitMiddleware

__all__ = [
    "RequestIDMiddleware",
    "RequestSizeLimitMiddleware",
]
