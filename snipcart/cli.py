import argparse
import logging

from .client import SnipcartClient
from .config import API_KEY, ClientConfig
from .display import display_orders_table, display_products_table
from .enums import NotificationType, OrderStatus
from .errors import SnipcartError
from .models import build_notification, build_order_update
from .order_code import token_png_base64
from .orders import (
    get_order,
    get_orders,
    get_orders_by_status,
    update_order,
    send_notification,
    get_notifications,
)
from .printing import json_print, print_error
from .products import get_products, get_product_by_id
from .webhook import REQUEST_TOKEN_HEADER, validate_webhook

ORDER_STATUSES = [s.value for s in OrderStatus]
NOTIFICATION_TYPES = [t.value for t in NotificationType]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query and update Snipcart orders and products")
    parser.add_argument("--key", type=str, default=API_KEY, help="Snipcart secret API key (env: SNIPCART_API_KEY)")
    parser.add_argument("--api-url", type=str, help="Override API base URL (env: SNIPCART_API_URL)")
    parser.add_argument("--limit", type=int, help="Page size for list calls (default: 50)")
    parser.add_argument("--timeout", type=float, help="HTTP timeout seconds (default: none)")
    parser.add_argument("--verbose", action="store_true", help="Log requests and responses")
    subparsers = parser.add_subparsers(dest="command", required=True)

    order_parser = subparsers.add_parser("order", help="Get a single order by token")
    order_parser.add_argument("token", help="Order token")
    order_parser.add_argument("--items-only", action="store_true", help="Print only the items array")

    orders_parser = subparsers.add_parser("orders", help="List orders")
    orders_parser.add_argument("--status", choices=ORDER_STATUSES, help="Only orders with this status")
    orders_parser.add_argument("--summary", action="store_true", help="Print a summary table of orders")

    update_parser = subparsers.add_parser("update-order", help="Update order status and tracking")
    update_parser.add_argument("token", help="Order token")
    update_parser.add_argument("--status", required=True, choices=ORDER_STATUSES, help="New order status")
    update_parser.add_argument("--payment-status", type=str, help="New payment status")
    update_parser.add_argument("--tracking-number", type=str, help="Shipment tracking number")
    update_parser.add_argument("--tracking-url", type=str, help="Shipment tracking URL")
    update_parser.add_argument("--status-only", action="store_true", help="Print only the resulting status")

    notify_parser = subparsers.add_parser("notify", help="Send a notification for an order")
    notify_parser.add_argument("token", help="Order token")
    notify_parser.add_argument("--type", required=True, choices=NOTIFICATION_TYPES, help="Notification type")
    notify_parser.add_argument("--delivery-method", type=str, default="Email", help="Email or None (default: Email)")
    notify_parser.add_argument("--message", type=str, help="Message body")

    notifications_parser = subparsers.add_parser("notifications", help="List notifications of an order")
    notifications_parser.add_argument("token", help="Order token")
    notifications_parser.add_argument("--offset", type=int, default=0, help="Offset (default: 0)")

    products_parser = subparsers.add_parser("products", help="List products")
    products_parser.add_argument("--keywords", type=str, help="Filter by keywords")
    products_parser.add_argument("--summary", action="store_true", help="Print a summary table of products")

    product_parser = subparsers.add_parser("product", help="Get a product by its user defined id")
    product_parser.add_argument("product_id", help="userDefinedId of the product")

    webhook_parser = subparsers.add_parser("validate-webhook", help="Check a webhook request token with Snipcart")
    webhook_parser.add_argument("token", help=f"Value of the {REQUEST_TOKEN_HEADER} header")

    qr_parser = subparsers.add_parser("qr", help="Print the order QR code as base64 PNG")
    qr_parser.add_argument("token", help="Order token")
    return parser


def _make_client(args: argparse.Namespace) -> SnipcartClient:
    env_config = ClientConfig.from_env()
    config = ClientConfig(
        base_url=args.api_url or env_config.base_url,
        limit=args.limit or env_config.limit,
        timeout=args.timeout if args.timeout is not None else env_config.timeout,
    )
    return SnipcartClient(args.key, config)


def _dispatch(args: argparse.Namespace) -> int:
    if args.command == "qr":
        print(token_png_base64(args.token))
        return 0

    client = _make_client(args)

    if args.command == "order":
        order = get_order(client, args.token)
        if args.items_only:
            json_print(order.get("items", []))
        else:
            json_print(order)
    elif args.command == "orders":
        if args.status:
            orders = get_orders_by_status(client, args.status)
        else:
            orders = get_orders(client)
        if args.summary:
            display_orders_table(orders.get("items", []), total=orders.get("totalItems", 0))
        else:
            json_print(orders)
    elif args.command == "update-order":
        update = build_order_update(
            args.status,
            payment_status=args.payment_status,
            tracking_number=args.tracking_number,
            tracking_url=args.tracking_url,
        )
        order = update_order(client, args.token, update)
        if args.status_only:
            print(order.get("status", ""))
        else:
            json_print(order)
    elif args.command == "notify":
        notification = build_notification(args.type, args.delivery_method, args.message)
        json_print(send_notification(client, args.token, notification))
    elif args.command == "notifications":
        json_print(get_notifications(client, args.token, offset=args.offset))
    elif args.command == "products":
        queries = {"keywords": args.keywords} if args.keywords else None
        products = get_products(client, queries)
        if args.summary:
            display_products_table(products.get("items", []))
        else:
            json_print(products)
    elif args.command == "product":
        json_print(get_product_by_id(client, args.product_id))
    elif args.command == "validate-webhook":
        validate_webhook(client, args.token)
        print("Webhook token is valid.")
    else:
        return 2
    return 0


def run(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command != "qr" and not args.key:
        print_error("missing --key flag")
        return 1

    try:
        return _dispatch(args)
    except SnipcartError as exc:
        print_error(str(exc))
        return 1


def main() -> None:
    raise SystemExit(run())
