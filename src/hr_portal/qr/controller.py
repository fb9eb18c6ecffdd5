from __future__ import annotations

from flask import Flask, request, send_file, session

from ..common.web import current_user_id, fail, handle_errors, login_required, ok
from ..container import Container
from .decoder import decode_qr_image
from .id_card import make_id_card_png


def _float_or_none(value):
    if value in (None, ""):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def register(app: Flask, container: Container) -> None:
    def _scan(decoded_text: str, data):
        # An admin may have toggled WFH since login.
        session["is_wfh_enabled"] = container.auth_service.profile().is_wfh_enabled
        result = container.qr_scan_service.scan(
            user_id=session.get("user_id"),
            is_wfh_enabled=bool(session["is_wfh_enabled"]),
            decoded_text=decoded_text,
            latitude=_float_or_none(data.get("latitude")),
            longitude=_float_or_none(data.get("longitude")),
            late_checkout_reason=data.get("lateCheckoutReason"),
        )
        record = container.attendance_service.to_ui(result.record) if result.record else None
        return ok(
            result.message,
            outcome=result.outcome.value,
            record=record,
            hoursWorked=result.hours_worked,
        )

    @app.route("/api/qr/scan", methods=["POST"], endpoint="qr_scan")
    @login_required
    @handle_errors("Failed to process attendance. Please try again")
    def qr_scan():
        data = request.get_json(silent=True) or {}
        code = (data.get("code") or "").strip()
        if not code:
            return fail("QR code is required")
        return _scan(code, data)

    @app.route("/api/qr/scan/image", methods=["POST"], endpoint="qr_scan_image")
    @login_required
    @handle_errors("Failed to process attendance. Please try again")
    def qr_scan_image():
        if "image" not in request.files:
            return fail("Image file is missing")
        code = decode_qr_image(request.files["image"].stream)
        return _scan(code, request.form)

    @app.route("/api/me/id-card.png", endpoint="id_card_image")
    @login_required
    @handle_errors("Failed to generate ID card")
    def id_card_image():
        return send_file(make_id_card_png(current_user_id()), mimetype="image/png")
