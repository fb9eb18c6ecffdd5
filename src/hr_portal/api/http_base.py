from __future__ import annotations

from typing import Any, Dict, List, Optional


def _body(payload: Dict[str, Any]) -> Dict[str, Any]:
    data = payload.get("data")
    return data if isinstance(data, dict) else payload


def unwrap_one(payload: Dict[str, Any], key: str) -> Optional[Dict[str, Any]]:
    """Pick the entity out of a backend reply.

    The backend wraps entities either at the top level (``{"task": {...}}``)
    or under ``data`` (``{"data": {"task": {...}}}``). A bare entity under
    ``data`` is accepted as well.
    """

    if not payload:
        return None
    body = _body(payload)
    value = body.get(key)
    if isinstance(value, dict):
        return value
    if body is not payload and "id" in body:
        return body
    return None


def unwrap_list(payload: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    """Like `unwrap_one` for collections.

    Some endpoints reply with a bare JSON array, which the client hands over
    as ``{"data": [...]}``.
    """

    if not payload:
        return []
    value = payload.get("data") if isinstance(payload.get("data"), list) else _body(payload).get(key)
    return [v for v in (value or []) if isinstance(v, dict)]


def unwrap_count(payload: Dict[str, Any], key: str = "count") -> int:
    if not payload:
        return 0
    try:
        return int(_body(payload).get(key) or 0)
    except (TypeError, ValueError):
        return 0


def compact(values: Dict[str, Any]) -> Dict[str, Any]:
    """Drop None values so partial updates do not clear fields server-side."""

    return {k: v for k, v in values.items() if v is not None}
