"""HTTP middleware: timeout and request ID.

Applied in main app; order matters (last added = outermost).
Import and use from isp_translator.main.
"""

from isp_translator.middleware.request_id import RequestIDMiddleware
from isp_translator.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "TimeoutMiddleware",
]
