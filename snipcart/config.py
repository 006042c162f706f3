import os
import pathlib
from dataclasses import dataclass
from typing import Optional

# Load environment variables from a .env file if python-dotenv is available
try:
    from dotenv import load_dotenv, find_dotenv  # type: ignore
except Exception:
    load_dotenv = None  # type: ignore
else:
    try:
        # Prefer loading .env from the project root (one level above this file)
        package_dir = pathlib.Path(__file__).resolve().parent
        project_root = package_dir.parent
        root_env = project_root / ".env"
        if root_env.exists():
            load_dotenv(dotenv_path=str(root_env), override=False)
        else:
            _dotenv_path = find_dotenv(usecwd=True)
            if _dotenv_path:
                load_dotenv(_dotenv_path, override=False)
    except Exception:
        # Non-fatal: continue without .env
        pass

DEFAULT_API_URL = "https://app.snipcart.com"
DEFAULT_LIMIT = 50

ORDERS_PATH = "/api/orders"
PRODUCTS_PATH = "/api/products"
VALIDATION_PATH = "/api/requestvalidation"

# Credentials
API_KEY = os.getenv("SNIPCART_API_KEY")


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for a :class:`~snipcart.client.SnipcartClient`.

    ``limit`` is the page size sent with list calls; anything unset or not
    positive falls back to ``DEFAULT_LIMIT``. ``timeout`` of ``None`` leaves
    the request timeout to the HTTP stack.
    """

    base_url: str = DEFAULT_API_URL
    limit: Optional[int] = DEFAULT_LIMIT
    timeout: Optional[float] = None

    @property
    def page_limit(self) -> int:
        if not self.limit or self.limit <= 0:
            return DEFAULT_LIMIT
        return self.limit

    @classmethod
    def from_env(cls) -> "ClientConfig":
        return cls(
            base_url=os.getenv("SNIPCART_API_URL") or DEFAULT_API_URL,
            limit=_env_int("SNIPCART_LIMIT") or DEFAULT_LIMIT,
            timeout=_env_float("SNIPCART_TIMEOUT"),
        )
