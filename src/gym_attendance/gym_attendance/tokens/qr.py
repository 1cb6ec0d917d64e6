from __future__ import annotations

import base64
import io
import json

import qrcode
import qrcode.constants

from .model import CheckInToken

QR_FILL_COLOR = "#0b5eff"
QR_BACK_COLOR = "#ffffff"


def encode_payload(token: CheckInToken) -> str:
    """Text stored inside the QR code; the desk scanner hands it back to ``validate_text``."""
    return json.dumps(token.to_payload(), separators=(",", ":"))


def render_qr_png(token: CheckInToken, *, box_size: int = 10, border: int = 2) -> bytes:
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=box_size,
        border=border,
    )
    qr.add_data(encode_payload(token))
    qr.make(fit=True)

    img = qr.make_image(fill_color=QR_FILL_COLOR, back_color=QR_BACK_COLOR)

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def render_qr_data_url(token: CheckInToken) -> str:
    png = render_qr_png(token)
    return "data:image/png;base64," + base64.b64encode(png).decode("ascii")
