from typing import Optional, Dict, Any, Union, cast
import logging

from .client import SnipcartClient
from .config import ORDERS_PATH
from .enums import OrderStatus
from .errors import ValidationError
from .http import QueryParams
from .models import (
    Order,
    Orders,
    OrderUpdate,
    Notification,
    NotificationResponse,
    Notifications,
    compact_notification,
    compact_order_update,
)

logger = logging.getLogger(__name__)


def _require_token(token: Optional[str]) -> str:
    if not token:
        raise ValidationError("token is not set")
    return token


def get_order(client: SnipcartClient, token: str) -> Order:
    token = _require_token(token)
    data = client.request("GET", client.url(ORDERS_PATH, token))
    return cast(Order, data)


def get_orders(client: SnipcartClient, queries: Optional[QueryParams] = None) -> Orders:
    """List orders, optionally filtered by any query the API accepts.

    ``limit`` defaults to the client's page size when the caller does not
    pass one.
    """
    data = client.request(
        "GET",
        client.url(ORDERS_PATH),
        queries=client.paged(queries),
    )
    return cast(Orders, data)


def get_orders_by_status(client: SnipcartClient, status: Union[OrderStatus, str, None]) -> Orders:
    if not status:
        raise ValidationError("status is not set")
    return get_orders(client, [("status", str(status))])


def update_order(
    client: SnipcartClient,
    token: str,
    update: Union[OrderUpdate, Dict[str, Any]],
) -> Order:
    token = _require_token(token)
    body = compact_order_update(dict(update))
    logger.info(f"Updating order {token}: {sorted(body)}")
    data = client.request("PUT", client.url(ORDERS_PATH, token), body=body)
    return cast(Order, data)


def send_notification(
    client: SnipcartClient,
    token: str,
    notification: Union[Notification, Dict[str, Any]],
) -> NotificationResponse:
    token = _require_token(token)
    body = compact_notification(dict(notification))
    data = client.request(
        "POST",
        client.url(ORDERS_PATH, token, "notifications"),
        body=body,
    )
    return cast(NotificationResponse, data)


def get_notifications(
    client: SnipcartClient,
    token: str,
    offset: int = 0,
    limit: Optional[int] = None,
) -> Notifications:
    token = _require_token(token)
    queries = [
        ("offset", str(offset)),
        ("limit", str(limit or client.limit)),
    ]
    data = client.request(
        "GET",
        client.url(ORDERS_PATH, token, "notifications"),
        queries=queries,
    )
    return cast(Notifications, data)
