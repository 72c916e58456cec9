import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigError

DEFAULT_API_VERSION = "2024-10"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_STATIC_DIR = Path(__file__).parent / "dist"


@dataclass(frozen=True)
class Settings:
    """Process configuration, built once at startup and passed to every component."""

    store: str
    access_token: str
    api_version: str = DEFAULT_API_VERSION
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    upstream_timeout: Optional[float] = None
    static_dir: Optional[Path] = None

    @property
    def base_url(self) -> str:
        return f"http://localhost:{self.port}"

    def __repr__(self) -> str:
        # The token must never reach logs or tracebacks
        return (
            f"Settings(store={self.store!r}, access_token='***', "
            f"api_version={self.api_version!r}, host={self.host!r}, port={self.port}, "
            f"upstream_timeout={self.upstream_timeout!r}, static_dir={self.static_dir!r})"
        )

    __str__ = __repr__


def normalize_store(store: str) -> str:
    """Strip scheme and trailing slashes so 'https://x.myshopify.com/' becomes 'x.myshopify.com'"""
    store = store.strip()
    for prefix in ("https://", "http://"):
        if store.lower().startswith(prefix):
            store = store[len(prefix):]
    return store.rstrip("/")


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number of seconds, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


def load_settings(
    store: Optional[str] = None,
    api_key: Optional[str] = None,
    api_version: Optional[str] = None,
    host: Optional[str] = None,
    port: Optional[int] = None,
    upstream_timeout: Optional[float] = None,
    static_dir: Optional[Path] = DEFAULT_STATIC_DIR,
    use_dotenv: bool = True,
) -> Settings:
    """Build Settings from explicit values, falling back to the environment.

    Explicit arguments (usually command-line flags) win over environment
    variables. A ``.env`` file in the working directory is loaded first when
    ``use_dotenv`` is set. Raises ConfigError when the store or the access
    token is missing.
    """
    if use_dotenv:
        load_dotenv()  # Load variables from .env if present

    store = store or os.getenv("SHOPIFY_STORE", "")
    access_token = (
        api_key
        or os.getenv("SHOPIFY_ACCESS_TOKEN", "")
        or os.getenv("SHOPIFY_API_KEY", "")
    )

    missing = []
    if not store or not normalize_store(store):
        missing.append("store")
    if not access_token or not access_token.strip():
        missing.append("api-key")
    if missing:
        raise ConfigError(f"Missing required configuration: {', '.join(missing)}")

    return Settings(
        store=normalize_store(store),
        access_token=access_token.strip(),
        api_version=api_version or os.getenv("SHOPIFY_API_VERSION", DEFAULT_API_VERSION),
        host=host or os.getenv("DASHBOARD_HOST", DEFAULT_HOST),
        port=port if port is not None else _env_int("DASHBOARD_PORT", DEFAULT_PORT),
        upstream_timeout=(
            upstream_timeout if upstream_timeout is not None else _env_float("UPSTREAM_TIMEOUT")
        ),
        static_dir=static_dir,
    )
