from fastapi import Response

from .upstream import UpstreamResponse

DEFAULT_CONTENT_TYPE = "application/json"


def _content_type(upstream: UpstreamResponse) -> str:
    return upstream.headers.get("Content-Type") or DEFAULT_CONTENT_TYPE


def relay_collection(upstream: UpstreamResponse) -> Response:
    """Forward a list response, keeping the pagination Link header when Shopify sent one"""
    response = relay_resource(upstream)
    link = upstream.headers.get("Link")
    if link:
        response.headers["Link"] = link
    return response


def relay_resource(upstream: UpstreamResponse) -> Response:
    """Forward status, content type and the exact body bytes"""
    response = Response(content=upstream.body, status_code=upstream.status_code)
    response.headers["Content-Type"] = _content_type(upstream)
    return response


def relay_status(upstream: UpstreamResponse) -> Response:
    """Forward only the status code (used for deletes)"""
    return Response(status_code=upstream.status_code)
