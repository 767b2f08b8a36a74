import hmac
from typing import Optional
from app.core.config import settings

UNAUTHORIZED_MESSAGE = "Unauthorized: Invalid or missing API key"


def verify_api_key(provided: Optional[str], expected: Optional[str] = None) -> bool:
    """Constant-time comparison of a header-supplied key against the shared secret."""
    expected = settings.api_key if expected is None else expected
    if not provided or not expected:
        return False
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))
