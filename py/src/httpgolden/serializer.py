from __future__ import annotations

import json as jsonlib

from httpgolden.errors import FixtureError
from httpgolden.exchange import Exchange
from httpgolden.response import Response
from httpgolden.util import canonical_header_key, status_text


def dump_response(resp: Response | Exchange, *, include_body: bool = True) -> bytes:
    """Serialize status line, headers and (optionally) body to stable bytes.

    Headers are emitted in sorted order with canonical casing, one line per
    value; the body is written verbatim after the blank separator line.
    """
    if isinstance(resp, Exchange):
        resp = resp.response

    status = int(resp.status)
    lines = [f"HTTP/1.1 {status} {status_text(status)}"]
    for key in sorted(resp.headers or {}):
        name = canonical_header_key(key)
        for value in resp.headers[key]:
            lines.append(f"{name}: {value}")

    head = ("\r\n".join(lines) + "\r\n\r\n").encode("utf-8")
    if not include_body:
        return head
    return head + bytes(resp.body or b"")


def decode_json(body: bytes) -> object:
    try:
        return jsonlib.loads(bytes(body or b"").decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise FixtureError("golden.invalid_json", f"invalid JSON body: {exc}") from exc


def decode_json_object(body: bytes) -> dict[str, object]:
    value = decode_json(body)
    if not isinstance(value, dict):
        raise FixtureError("golden.not_object", f"JSON body is {type(value).__name__}, want object")
    return value


def indent_json(body: bytes) -> bytes:
    value = decode_json(body)
    return jsonlib.dumps(value, indent=2, sort_keys=True, ensure_ascii=False).encode("utf-8")


def compact_json(value: object) -> bytes:
    return jsonlib.dumps(value, sort_keys=True, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
