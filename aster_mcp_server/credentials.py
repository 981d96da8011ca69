"""Per-call API credentials taken from the Authorization header.

Clients send ``Authorization: <apikey>:<apisecret>``. The pair is parsed for
each tool call and passed down explicitly; it is never stored or logged.
"""
import logging
from dataclasses import dataclass, field
from typing import Optional

from .errors import InvalidRequestError

logger = logging.getLogger(__name__)

AUTH_HEADER = "authorization"
AUTH_ERROR_MESSAGE = (
    "Missing or invalid Authorization header. Expected format: 'apikey:apisecret'"
)


@dataclass(frozen=True)
class Credentials:
    key: str
    secret: str = field(repr=False)


def parse_authorization(header: Optional[str]) -> Credentials:
    """Split an ``apikey:apisecret`` header value into Credentials.

    Raises:
        InvalidRequestError: If the header is absent, does not have exactly
            two colon-separated parts, or either part is empty.
    """
    if header:
        parts = header.split(":")
        if len(parts) == 2 and parts[0] and parts[1]:
            return Credentials(key=parts[0], secret=parts[1])
        # Never log the value itself, it may contain the secret
        logger.warning("Invalid auth header: expected 2 colon-separated parts, got %d", len(parts))
    raise InvalidRequestError(AUTH_ERROR_MESSAGE, hint="send Authorization: <apikey>:<apisecret>")
