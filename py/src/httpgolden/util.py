from __future__ import annotations

import http
from typing import Any


def normalize_path(path: str) -> str:
    value = str(path or "").strip()
    if not value:
        return "/"
    if "?" in value:
        value = value.split("?", 1)[0]
    if not value.startswith("/"):
        value = "/" + value
    return value or "/"


def canonicalize_headers(headers: dict[str, Any] | None) -> dict[str, list[str]]:
    if not headers:
        return {}
    out: dict[str, list[str]] = {}
    for key in sorted(headers.keys()):
        lower = str(key).strip().lower()
        if not lower:
            continue
        value = headers[key]
        values = value if isinstance(value, (list, tuple)) else [value]
        out.setdefault(lower, []).extend([str(v) for v in values])
    return out


def clone_query(query: dict[str, Any] | None) -> dict[str, list[str]]:
    if not query:
        return {}
    out: dict[str, list[str]] = {}
    for key, value in query.items():
        if isinstance(value, (list, tuple)):
            out[str(key)] = [str(v) for v in value]
        else:
            out[str(key)] = [str(value)]
    return out


def to_bytes(value: Any) -> bytes:
    if value is None:
        return b""
    if isinstance(value, bytes):
        return bytes(value)
    if isinstance(value, bytearray):
        return bytes(value)
    if isinstance(value, memoryview):
        return value.tobytes()
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError("body must be bytes-like or str")


def first_header_value(headers: dict[str, list[str]], key: str) -> str:
    values = headers.get(key.lower()) or []
    return str(values[0]) if values else ""


def is_json_content_type(content_type: str) -> bool:
    media_type = str(content_type or "").split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def canonical_header_key(key: str) -> str:
    return "-".join(part[:1].upper() + part[1:].lower() for part in str(key).split("-"))


def status_text(status: int) -> str:
    try:
        return http.HTTPStatus(int(status)).phrase
    except ValueError:
        return f"status code {int(status)}"
