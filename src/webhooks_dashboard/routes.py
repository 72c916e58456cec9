"""Local /api/webhooks endpoints that proxy to the Shopify webhooks API.

Each path has a method -> handler table. A method missing from the table gets
a 405 and no upstream call; handlers validate the webhook id and body before
anything is sent to Shopify.
"""

import json
import logging
import re
from typing import Awaitable, Callable, Dict

from fastapi import APIRouter, HTTPException, Request, Response
from fastapi.concurrency import run_in_threadpool
from starlette.requests import ClientDisconnect

from .config import Settings
from .relay import relay_collection, relay_resource, relay_status
from .translator import (
    build_create_request,
    build_delete_request,
    build_list_request,
    build_update_request,
)
from .upstream import UpstreamClient, UpstreamRequest, UpstreamResponse

logger = logging.getLogger(__name__)

COLLECTION_PATH = "/api/webhooks"
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
WEBHOOK_ID_PATTERN = re.compile(r"^[0-9]+$")

Handler = Callable[..., Awaitable[Response]]

router = APIRouter(tags=["Webhooks"])


def _settings(request: Request) -> Settings:
    return request.app.state.settings


async def _call_upstream(request: Request, upstream_request: UpstreamRequest) -> UpstreamResponse:
    client: UpstreamClient = request.app.state.upstream_client
    # requests blocks; keep it off the event loop so other requests proceed
    return await run_in_threadpool(client.send, upstream_request)


def _method_not_allowed(request: Request, handlers: Dict[str, Handler]) -> HTTPException:
    logger.warning(f"Rejected {request.method} {request.url.path}: method not allowed")
    return HTTPException(
        status_code=405,
        detail="Method not allowed",
        headers={"Allow": ", ".join(handlers)},
    )


def _bad_request(request: Request, detail: str) -> HTTPException:
    logger.warning(f"Rejected {request.method} {request.url.path}: {detail}")
    return HTTPException(status_code=400, detail=detail)


def validate_webhook_id(request: Request, webhook_id: str) -> str:
    webhook_id = webhook_id.strip()
    if not webhook_id:
        raise _bad_request(request, "Webhook ID is required")
    if not WEBHOOK_ID_PATTERN.match(webhook_id):
        raise _bad_request(request, "Invalid webhook ID")
    return webhook_id


async def read_json_body(request: Request) -> bytes:
    """Return the raw request body after checking it decodes as JSON.

    The parsed value is discarded; the original bytes are what get forwarded.
    """
    try:
        body = await request.body()
    except ClientDisconnect:
        raise _bad_request(request, "Failed to read request body")

    if not body.strip():
        raise _bad_request(request, "Request body is required")
    try:
        json.loads(body)
    except ValueError:
        raise _bad_request(request, "Invalid JSON payload")
    return body


# --------- Collection: /api/webhooks ---------

async def list_webhooks(request: Request) -> Response:
    limit = request.query_params.get("limit")
    page_info = request.query_params.get("page_info")
    upstream_request = build_list_request(_settings(request), limit, page_info)
    upstream = await _call_upstream(request, upstream_request)
    return relay_collection(upstream)


async def create_webhook(request: Request) -> Response:
    body = await read_json_body(request)
    upstream_request = build_create_request(_settings(request), body)
    upstream = await _call_upstream(request, upstream_request)
    return relay_resource(upstream)


# --------- Single resource: /api/webhooks/{id} ---------

async def delete_webhook(request: Request, webhook_id: str) -> Response:
    webhook_id = validate_webhook_id(request, webhook_id)
    upstream_request = build_delete_request(_settings(request), webhook_id)
    upstream = await _call_upstream(request, upstream_request)
    return relay_status(upstream)


async def update_webhook(request: Request, webhook_id: str) -> Response:
    webhook_id = validate_webhook_id(request, webhook_id)
    body = await read_json_body(request)
    upstream_request = build_update_request(_settings(request), webhook_id, body)
    upstream = await _call_upstream(request, upstream_request)
    return relay_resource(upstream)


COLLECTION_HANDLERS: Dict[str, Handler] = {
    "GET": list_webhooks,
    "POST": create_webhook,
}

RESOURCE_HANDLERS: Dict[str, Handler] = {
    "DELETE": delete_webhook,
    "PUT": update_webhook,
}


@router.api_route(COLLECTION_PATH, methods=ALL_METHODS, include_in_schema=False)
async def webhooks_collection(request: Request):
    """Dispatch list/create calls"""
    handler = COLLECTION_HANDLERS.get(request.method)
    if handler is None:
        raise _method_not_allowed(request, COLLECTION_HANDLERS)
    return await handler(request)


@router.api_route(COLLECTION_PATH + "/", methods=ALL_METHODS, include_in_schema=False)
async def webhooks_missing_id(request: Request):
    """The id segment is empty: 405 for unsupported methods, otherwise 400"""
    if request.method not in RESOURCE_HANDLERS:
        raise _method_not_allowed(request, RESOURCE_HANDLERS)
    validate_webhook_id(request, "")


@router.api_route(COLLECTION_PATH + "/{webhook_id}", methods=ALL_METHODS, include_in_schema=False)
async def webhooks_resource(request: Request, webhook_id: str):
    """Dispatch delete/update calls for a single webhook"""
    handler = RESOURCE_HANDLERS.get(request.method)
    if handler is None:
        raise _method_not_allowed(request, RESOURCE_HANDLERS)
    return await handler(request, webhook_id)
