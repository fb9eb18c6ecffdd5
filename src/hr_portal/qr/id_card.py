from __future__ import annotations

import io

import qrcode


def make_id_card_png(user_id: str) -> io.BytesIO:
    """PNG QR code carrying the employee id, as printed on the ID card."""

    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=2,
    )
    qr.add_data(str(user_id))
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return buf
