"""Tests for the order token QR code."""

from __future__ import annotations

import base64
import io
from unittest.mock import patch

import pytest
import qrcode
import zxingcpp
from qrcode.constants import ERROR_CORRECT_M
from PIL import Image

from snipcart import ValidationError, token_png_base64
from snipcart.order_code import order_payload


def decode_png(encoded: str) -> tuple[Image.Image, list[str]]:
    raw = base64.b64decode(encoded)
    assert raw.startswith(b"\x89PNG\r\n\x1a\n")
    img = Image.open(io.BytesIO(raw))
    img.load()
    return img, [result.text for result in zxingcpp.read_barcodes(img)]


def test_payload_is_prefixed_token():
    assert order_payload("b35990df") == "order:b35990df"


def test_base64_decodes_to_square_png():
    img, texts = decode_png(token_png_base64("b35990df-c0ca-4014-94de-1caa7bd7bb51"))
    assert img.format == "PNG"
    assert img.size == (128, 128)
    assert texts == ["order:b35990df-c0ca-4014-94de-1caa7bd7bb51"]


@pytest.mark.parametrize("length", [1, 36, 200, 600])
def test_code_scans_back_to_payload(length):
    token = ("0123456789abcdef" * 100)[:length]
    img, texts = decode_png(token_png_base64(token))
    assert img.size[0] == img.size[1] >= 128
    assert texts == [f"order:{token}"]


def test_long_token_grows_past_requested_size():
    token = "x" * 1500
    img, texts = decode_png(token_png_base64(token))
    assert img.size[0] > 128
    assert texts == [f"order:{token}"]


def test_encodes_payload_at_medium_correction():
    real_qrcode = qrcode.QRCode
    built = []

    def factory(*args, **kwargs):
        qr = real_qrcode(*args, **kwargs)
        built.append(qr)
        return qr

    with patch("snipcart.order_code.qrcode.QRCode", side_effect=factory):
        token_png_base64("T")

    assert len(built) == 1
    assert built[0].error_correction == ERROR_CORRECT_M
    assert b"".join(d.data for d in built[0].data_list) == b"order:T"


def test_empty_token():
    with pytest.raises(ValidationError):
        token_png_base64("")
