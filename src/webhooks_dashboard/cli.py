#!/usr/bin/env python3
"""Command-line launcher: validate config, open the browser, serve the dashboard."""

import argparse
import logging
import sys
import threading
import webbrowser
from typing import List, Optional

import uvicorn

from .app import create_app
from .config import load_settings
from .errors import ConfigError

logger = logging.getLogger(__name__)

USAGE = "Usage: webhooks-dashboard --store <store> --api-key <api-key>"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webhooks-dashboard",
        description="Manage Shopify webhook subscriptions from a local dashboard.",
    )
    parser.add_argument("--store", help="Shopify store domain (e.g., mystore.myshopify.com)")
    parser.add_argument("--api-key", dest="api_key", help="Shopify Admin API access token")
    parser.add_argument("--api-version", dest="api_version", help="Shopify Admin API version")
    parser.add_argument("--host", help="Interface to bind (default 127.0.0.1)")
    parser.add_argument("--port", type=int, help="Local port (default 3000)")
    parser.add_argument("--timeout", type=float, help="Upstream timeout in seconds (default: none)")
    parser.add_argument("--no-browser", action="store_true", help="Do not open a browser window")
    return parser


def open_browser(url: str, delay: float = 1.0) -> threading.Timer:
    """Open the dashboard once the server has had a moment to bind"""
    timer = threading.Timer(delay, webbrowser.open, args=(url,))
    timer.daemon = True
    timer.start()
    return timer


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    try:
        settings = load_settings(
            store=args.store,
            api_key=args.api_key,
            api_version=args.api_version,
            host=args.host,
            port=args.port,
            upstream_timeout=args.timeout,
        )
        app = create_app(settings)
    except ConfigError as exc:
        print(f"❌ {exc}")
        print(USAGE)
        return 1

    print("🚀 Starting Shopify Webhooks Dashboard")
    print(f"   Store: {settings.store}")
    print(f"   API version: {settings.api_version}")
    print(f"   Dashboard: {settings.base_url}")
    print(f"   Status: {settings.base_url}/api/status")

    if not args.no_browser:
        # No secrets in the URL
        logger.info(f"Launching dashboard for {settings.store}...")
        open_browser(settings.base_url)

    try:
        uvicorn.run(app, host=settings.host, port=settings.port)
    except KeyboardInterrupt:
        print("\n👋 Dashboard stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
