"""Tests for order and notification operations."""

from __future__ import annotations

import json
from datetime import datetime

import pytest

from snipcart import (
    ClientConfig,
    NotificationType,
    OrderStatus,
    SnipcartClient,
    StatusError,
    ValidationError,
    build_notification,
    build_order_update,
    get_notifications,
    get_order,
    get_orders,
    get_orders_by_status,
    send_notification,
    update_order,
)


ORDER = {
    "token": "b35990df-c0ca-4014-94de-1caa7bd7bb51",
    "invoiceNumber": "SNIP-1001",
    "status": "Processed",
    "grandTotal": 42.5,
    "items": [{"uniqueId": "u1", "id": "mug", "name": "Mug", "quantity": 2, "customFields": []}],
    "metadata": {"gift": True, "notes": ["a", "b"]},
}


class TestGetOrder:
    def test_builds_path_from_token(self, client, fake_request, respond):
        fake_request.return_value = respond(200, ORDER)
        order = get_order(client, ORDER["token"])
        args = fake_request.call_args.args
        assert args == ("GET", f"https://mock.snipcart.test/api/orders/{ORDER['token']}")
        assert order["invoiceNumber"] == "SNIP-1001"

    def test_metadata_passes_through(self, client, fake_request, respond):
        fake_request.return_value = respond(200, ORDER)
        assert get_order(client, ORDER["token"])["metadata"] == {"gift": True, "notes": ["a", "b"]}

    def test_empty_token_is_rejected_before_request(self, client, fake_request):
        with pytest.raises(ValidationError, match="token is not set"):
            get_order(client, "")
        fake_request.assert_not_called()

    def test_not_found_is_status_error(self, client, fake_request, respond):
        fake_request.return_value = respond(404, reason="Not Found")
        with pytest.raises(StatusError, match="404 Not Found"):
            get_order(client, "missing")


class TestGetOrders:
    def test_default_limit_is_appended(self, client, fake_request, respond):
        fake_request.return_value = respond(200, {"totalItems": 1, "items": [ORDER]})
        orders = get_orders(client)
        assert fake_request.call_args.kwargs["params"] == [("limit", "50")]
        assert orders["totalItems"] == 1

    def test_caller_limit_wins(self, client, fake_request):
        get_orders(client, {"limit": 5})
        assert fake_request.call_args.kwargs["params"] == [("limit", "5")]

    def test_configured_limit(self, fake_request):
        client = SnipcartClient("k", ClientConfig(base_url="https://mock.snipcart.test", limit=10))
        get_orders(client)
        assert fake_request.call_args.kwargs["params"] == [("limit", "10")]

    @pytest.mark.parametrize("limit", [0, -1, None])
    def test_unset_limit_falls_back_to_default(self, limit):
        assert SnipcartClient("k", ClientConfig(limit=limit)).limit == 50

    def test_by_status(self, client, fake_request):
        get_orders_by_status(client, OrderStatus.PROCESSED)
        assert fake_request.call_args.args[1] == "https://mock.snipcart.test/api/orders"
        assert fake_request.call_args.kwargs["params"] == [("status", "Processed"), ("limit", "50")]

    @pytest.mark.parametrize("status", ["", None])
    def test_by_empty_status_fails_before_request(self, client, fake_request, status):
        with pytest.raises(ValidationError, match="status is not set"):
            get_orders_by_status(client, status)
        fake_request.assert_not_called()


class TestUpdateOrder:
    def test_put_with_compact_body(self, client, fake_request, respond, sent_body):
        fake_request.return_value = respond(200, dict(ORDER, status="Delivered"))
        update = build_order_update(OrderStatus.DELIVERED, tracking_number="1Z999", tracking_url="")
        order = update_order(client, ORDER["token"], update)

        method, uri = fake_request.call_args.args
        assert method == "PUT"
        assert uri.endswith(f"/api/orders/{ORDER['token']}")
        assert sent_body(fake_request) == {"status": "Delivered", "trackingNumber": "1Z999"}
        assert order["status"] == "Delivered"

    def test_status_survives_json_round_trip(self, client, fake_request, respond):
        update = build_order_update(OrderStatus.SHIPPED, payment_status="Paid")
        fake_request.side_effect = lambda method, uri, **kw: respond(
            200, dict(ORDER, **json.loads(kw["data"]))
        )
        order = update_order(client, ORDER["token"], update)
        assert order["status"] == "Shipped"
        assert order["paymentStatus"] == "Paid"

    def test_plain_dict_update_drops_empty_fields(self, client, fake_request, sent_body):
        update_order(client, "tok", {"status": "Pending", "paymentStatus": None, "trackingUrl": ""})
        assert sent_body(fake_request) == {"status": "Pending"}

    def test_empty_token(self, client, fake_request):
        with pytest.raises(ValidationError):
            update_order(client, "", build_order_update(OrderStatus.SHIPPED))
        fake_request.assert_not_called()

    def test_unserializable_metadata(self, client, fake_request):
        update = build_order_update(OrderStatus.SHIPPED, metadata={"shippedAt": datetime(2024, 5, 1)})
        with pytest.raises(ValidationError, match="not JSON serializable"):
            update_order(client, "tok", update)
        fake_request.assert_not_called()


class TestNotifications:
    def test_send_notification(self, client, fake_request, respond, sent_body):
        fake_request.return_value = respond(
            201,
            {
                "id": "n-1",
                "creationDate": "2024-05-01T10:00:00Z",
                "type": "Comment",
                "deliveryMethod": "Email",
                "message": "On its way",
                "sentOn": "2024-05-01T10:00:01Z",
            },
            reason="Created",
        )
        notification = build_notification(NotificationType.COMMENT, message="On its way")
        receipt = send_notification(client, "tok", notification)

        method, uri = fake_request.call_args.args
        assert method == "POST"
        assert uri == "https://mock.snipcart.test/api/orders/tok/notifications"
        assert sent_body(fake_request) == {
            "type": "Comment",
            "deliveryMethod": "Email",
            "message": "On its way",
        }
        assert receipt["id"] == "n-1"

    def test_delivery_method_is_always_sent(self, client, fake_request, sent_body):
        send_notification(client, "tok", {"type": NotificationType.COMMENT, "deliveryMethod": "", "message": ""})
        assert sent_body(fake_request) == {"type": "Comment", "deliveryMethod": ""}

    def test_build_notification_without_message(self):
        assert build_notification(NotificationType.INVOICE) == {"type": "Invoice", "deliveryMethod": "Email"}

    def test_get_notifications_is_paginated(self, client, fake_request, respond):
        fake_request.return_value = respond(200, {"totalItems": 0, "offset": 20, "limit": 50, "items": []})
        result = get_notifications(client, "tok", offset=20)
        assert fake_request.call_args.args == ("GET", "https://mock.snipcart.test/api/orders/tok/notifications")
        assert fake_request.call_args.kwargs["params"] == [("offset", "20"), ("limit", "50")]
        assert result["offset"] == 20
