from __future__ import annotations

import json as jsonlib
from dataclasses import dataclass, field
from typing import Any

from httpgolden.util import canonicalize_headers, first_header_value, to_bytes


@dataclass(slots=True)
class Response:
    status: int
    headers: dict[str, list[str]] = field(default_factory=dict)
    body: bytes = b""

    @property
    def content_type(self) -> str:
        return first_header_value(self.headers, "content-type")


def text(status: int, body: str) -> Response:
    return normalize_response(
        Response(
            status=status,
            headers={"content-type": ["text/plain; charset=utf-8"]},
            body=str(body).encode("utf-8"),
        )
    )


def json(status: int, value: Any) -> Response:
    body = jsonlib.dumps(value, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
    return normalize_response(
        Response(
            status=status,
            headers={"content-type": ["application/json"]},
            body=body,
        )
    )


def no_content() -> Response:
    return Response(status=204, headers={}, body=b"")


def normalize_response(resp: Response) -> Response:
    status = int(resp.status or 200)
    headers = canonicalize_headers(resp.headers)
    body = to_bytes(resp.body)
    return Response(status=status, headers=headers, body=body)
