"""Local dashboard server for managing Shopify webhook subscriptions."""

__version__ = "1.0.0"
