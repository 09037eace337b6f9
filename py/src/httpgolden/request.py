from __future__ import annotations

import json as jsonlib
import urllib.parse
from dataclasses import dataclass, field
from typing import Any, Callable

from httpgolden.util import canonicalize_headers, clone_query, normalize_path, to_bytes


@dataclass(slots=True)
class Request:
    method: str
    path: str
    query: dict[str, list[str]] = field(default_factory=dict)
    headers: dict[str, list[str]] = field(default_factory=dict)
    body: bytes = b""

    @property
    def query_string(self) -> str:
        pairs = [(key, value) for key in sorted(self.query) for value in self.query[key]]
        return urllib.parse.urlencode(pairs)

    @property
    def url(self) -> str:
        query = self.query_string
        return f"{self.path}?{query}" if query else self.path


RequestOption = Callable[[Request], None]


def with_query(key: str, *values: str) -> RequestOption:
    """Append query parameter values, keeping values already on the request."""

    def apply(request: Request) -> None:
        request.query.setdefault(str(key), []).extend([str(v) for v in values])

    return apply


def with_header(key: str, value: str) -> RequestOption:
    """Set a header, replacing any earlier values."""

    def apply(request: Request) -> None:
        request.headers[str(key).strip().lower()] = [str(value)]

    return apply


def new_request(method: str, target: str, body: Any = None, *options: RequestOption) -> Request:
    """Build a request for ``target``, which may carry its own query string.

    Options are applied in order after the target has been parsed.
    """
    parts = urllib.parse.urlsplit(str(target or ""))
    query = clone_query(urllib.parse.parse_qs(parts.query, keep_blank_values=True))

    request = Request(
        method=str(method or "").strip().upper() or "GET",
        path=normalize_path(parts.path),
        query=query,
        headers={},
        body=to_bytes(body),
    )
    for option in options:
        option(request)
    return request


def normalize_request(request: Request) -> Request:
    return Request(
        method=str(request.method or "").strip().upper() or "GET",
        path=normalize_path(request.path),
        query=clone_query(request.query),
        headers=canonicalize_headers(request.headers),
        body=to_bytes(request.body),
    )


def json_body(value: Any) -> bytes:
    return (jsonlib.dumps(value, ensure_ascii=False) + "\n").encode("utf-8")
