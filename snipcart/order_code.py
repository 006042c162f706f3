import base64
import io

import qrcode
from qrcode.constants import ERROR_CORRECT_M
from PIL import Image

from .errors import ValidationError

ORDER_CODE_PREFIX = "order:"
ORDER_CODE_SIZE = 128
ORDER_CODE_BORDER = 4


def order_payload(token: str) -> str:
    return ORDER_CODE_PREFIX + token


def token_png(token: str, size: int = ORDER_CODE_SIZE) -> bytes:
    """Render ``order:<token>`` as a QR code PNG.

    Modules are drawn with a whole number of pixels each and the code is
    centred on a ``size`` x ``size`` white canvas. When the code needs more
    than ``size`` pixels at one pixel per module, the larger image is
    returned as is.
    """
    if not token:
        raise ValidationError("token is not set")
    qr = qrcode.QRCode(error_correction=ERROR_CORRECT_M, border=ORDER_CODE_BORDER)
    qr.add_data(order_payload(token))
    qr.make(fit=True)
    qr.box_size = max(1, size // (qr.modules_count + 2 * ORDER_CODE_BORDER))

    raw = io.BytesIO()
    qr.make_image(fill_color="black", back_color="white").save(raw)
    raw.seek(0)
    with Image.open(raw) as img:
        code = img.convert("L")

    if code.width < size:
        canvas = Image.new("L", (size, size), 255)
        offset = (size - code.width) // 2
        canvas.paste(code, (offset, offset))
        code = canvas

    out = io.BytesIO()
    code.save(out, format="PNG")
    return out.getvalue()


def token_png_base64(token: str, size: int = ORDER_CODE_SIZE) -> str:
    return base64.b64encode(token_png(token, size)).decode("ascii")
