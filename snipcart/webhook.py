"""Inbound webhook helpers.

Snipcart sends an ``X-Snipcart-RequestToken`` header with each webhook call.
:func:`validate_webhook` asks the API whether that token is genuine; there is
no signature to check locally.
"""

from typing import Union, Dict, Any, Iterable, List, cast
import json
import logging

from .client import SnipcartClient
from .config import VALIDATION_PATH
from .errors import DecodeError, StatusError, TransportError, ValidationError
from .models import Tax, TaxResponse, TaxWebhook

logger = logging.getLogger(__name__)

REQUEST_TOKEN_HEADER = "X-Snipcart-RequestToken"


def validate_webhook(client: SnipcartClient, token: str) -> None:
    if not token:
        raise ValidationError("token is not set")
    try:
        response = client.open("GET", client.url(VALIDATION_PATH, token))
    except TransportError as exc:
        raise TransportError(f"error validating webhook: {exc}") from exc
    try:
        code = response.status_code
        if code < 200 or code >= 300:
            logger.warning(f"Webhook token rejected with status {code}")
            raise StatusError(f"non-2XX status code for validating webhook: {code}", code)
    finally:
        response.close()


def parse_tax_webhook(payload: Union[bytes, str, Dict[str, Any]]) -> TaxWebhook:
    if isinstance(payload, (bytes, str)):
        try:
            payload = json.loads(payload)
        except ValueError as exc:
            raise DecodeError(f"invalid tax webhook payload: {exc}") from exc
    if not isinstance(payload, dict):
        raise DecodeError("invalid tax webhook payload: expected a JSON object")
    content = payload.get("content")
    if not isinstance(content, dict):
        raise DecodeError("invalid tax webhook payload: missing content")
    return cast(TaxWebhook, payload)


def build_tax_response(taxes: Iterable[Tax]) -> TaxResponse:
    rows: List[Tax] = []
    for tax in taxes:
        row: Tax = {
            "name": tax["name"],
            "amount": float(tax.get("amount", 0.0)),
            "numberForInvoice": tax.get("numberForInvoice", ""),
            "rate": float(tax.get("rate", 0.0)),
        }
        rows.append(row)
    return {"taxes": rows}
