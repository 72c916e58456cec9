import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

import requests
from requests.structures import CaseInsensitiveDict

from .errors import UpstreamTransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpstreamRequest:
    """A single call to the Shopify webhooks API"""

    method: str
    url: str
    headers: Mapping[str, str]
    body: Optional[bytes] = None
    operation: str = "contact Shopify"


@dataclass
class UpstreamResponse:
    status_code: int
    body: bytes = b""
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)


class UpstreamClient:
    """Issues exactly one HTTP request per call to Shopify; never retries.

    Each call is a standalone ``requests.request`` with no shared session, so
    cookies from one response never reach another call. ``timeout`` is passed
    straight to requests; None blocks until the transport completes or fails.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def send(self, request: UpstreamRequest) -> UpstreamResponse:
        logger.info(f"{request.method} {request.url}")
        if request.body is not None:
            logger.debug(f"Upstream request body: {request.body!r}")

        try:
            response = requests.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                data=request.body,
                timeout=self.timeout,
                allow_redirects=False,
            )
            body = response.content
        except requests.RequestException as exc:
            logger.error(f"Error making request to Shopify ({request.method} {request.url}): {exc}")
            raise UpstreamTransportError(request.operation, exc) from exc

        logger.info(f"Shopify response status: {response.status_code}")
        logger.debug(f"Shopify response headers: {dict(response.headers)}")
        logger.debug(f"Shopify response body: {body!r}")

        return UpstreamResponse(
            status_code=response.status_code,
            body=body,
            headers=CaseInsensitiveDict(response.headers),
        )
