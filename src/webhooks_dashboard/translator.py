"""Maps local dashboard calls onto Shopify Admin REST webhook requests."""

from typing import Dict, List, Optional, Tuple
from urllib.parse import urlencode

from .config import Settings
from .upstream import UpstreamRequest

ACCESS_TOKEN_HEADER = "X-Shopify-Access-Token"
JSON_CONTENT_TYPE = "application/json"


def collection_url(settings: Settings) -> str:
    return f"https://{settings.store}/admin/api/{settings.api_version}/webhooks.json"


def resource_url(settings: Settings, webhook_id: str) -> str:
    return f"https://{settings.store}/admin/api/{settings.api_version}/webhooks/{webhook_id}.json"


def _headers(settings: Settings, with_body: bool = False) -> Dict[str, str]:
    headers = {
        ACCESS_TOKEN_HEADER: settings.access_token,
        "Accept": JSON_CONTENT_TYPE,
    }
    if with_body:
        headers["Content-Type"] = JSON_CONTENT_TYPE
    return headers


def pagination_query(limit: Optional[str] = None, page_info: Optional[str] = None) -> str:
    """Build the list query string; empty when neither parameter was supplied.

    ``limit`` always precedes ``page_info``.
    """
    params: List[Tuple[str, str]] = []
    if limit:
        params.append(("limit", limit))
    if page_info:
        params.append(("page_info", page_info))
    return urlencode(params)


def build_list_request(
    settings: Settings, limit: Optional[str] = None, page_info: Optional[str] = None
) -> UpstreamRequest:
    url = collection_url(settings)
    query = pagination_query(limit, page_info)
    if query:
        url = f"{url}?{query}"
    return UpstreamRequest("GET", url, _headers(settings), operation="fetch webhooks")


def build_create_request(settings: Settings, body: bytes) -> UpstreamRequest:
    return UpstreamRequest(
        "POST",
        collection_url(settings),
        _headers(settings, with_body=True),
        body=body,
        operation="create webhook",
    )


def build_update_request(settings: Settings, webhook_id: str, body: bytes) -> UpstreamRequest:
    return UpstreamRequest(
        "PUT",
        resource_url(settings, webhook_id),
        _headers(settings, with_body=True),
        body=body,
        operation="update webhook",
    )


def build_delete_request(settings: Settings, webhook_id: str) -> UpstreamRequest:
    return UpstreamRequest(
        "DELETE",
        resource_url(settings, webhook_id),
        _headers(settings),
        operation="delete webhook",
    )
