"""Snipcart REST API client.

Modules:
- http: authenticated JSON transport used by every call
- orders / products / webhook: resource operations
- order_code: QR code for an order token
"""

from .auth import Credential
from .client import SnipcartClient
from .config import ClientConfig
from .enums import OrderStatus, NotificationType
from .errors import (
    SnipcartError,
    TransportError,
    StatusError,
    DecodeError,
    ValidationError,
)
from .models import build_order_update, build_notification
from .orders import (
    get_order,
    get_orders,
    get_orders_by_status,
    update_order,
    send_notification,
    get_notifications,
)
from .products import get_products, get_product_by_id
from .webhook import validate_webhook, parse_tax_webhook, build_tax_response
from .order_code import token_png_base64

__all__ = [
    "Credential",
    "SnipcartClient",
    "ClientConfig",
    "OrderStatus",
    "NotificationType",
    "SnipcartError",
    "TransportError",
    "StatusError",
    "DecodeError",
    "ValidationError",
    "build_order_update",
    "build_notification",
    "get_order",
    "get_orders",
    "get_orders_by_status",
    "update_order",
    "send_notification",
    "get_notifications",
    "get_products",
    "get_product_by_id",
    "validate_webhook",
    "parse_tax_webhook",
    "build_tax_response",
    "token_png_base64",
]
