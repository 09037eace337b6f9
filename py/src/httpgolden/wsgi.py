from __future__ import annotations

import io
import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from httpgolden.request import Request
from httpgolden.response import Response, normalize_response
from httpgolden.util import canonicalize_headers

WSGIApp = Callable[[dict[str, Any], Callable[..., Any]], Iterable[bytes]]


@dataclass(slots=True)
class WSGIHandler:
    """Serve requests in-process through a PEP 3333 application."""

    app: WSGIApp
    server_name: str = "example.com"
    server_port: str = "80"
    url_scheme: str = "http"

    def serve(self, request: Request) -> Response:
        environ = environ_from_request(
            request,
            server_name=self.server_name,
            server_port=self.server_port,
            url_scheme=self.url_scheme,
        )

        started: dict[str, Any] = {}

        def start_response(status: str, headers: list[tuple[str, str]], exc_info: Any = None) -> Callable[[bytes], None]:
            if exc_info is not None and started:
                raise exc_info[1].with_traceback(exc_info[2])
            started["status"] = status
            started["headers"] = headers
            return written.append

        written: list[bytes] = []
        result = self.app(environ, start_response)
        try:
            chunks = [bytes(chunk) for chunk in result]
        finally:
            close = getattr(result, "close", None)
            if close is not None:
                close()

        if "status" not in started:
            raise RuntimeError("httpgolden: wsgi application did not call start_response")

        return response_from_wsgi(started["status"], started["headers"], b"".join(written + chunks))


def environ_from_request(
    request: Request,
    *,
    server_name: str = "example.com",
    server_port: str = "80",
    url_scheme: str = "http",
) -> dict[str, Any]:
    headers = canonicalize_headers(request.headers)
    body = bytes(request.body or b"")

    environ: dict[str, Any] = {
        "REQUEST_METHOD": str(request.method or "GET").upper(),
        "SCRIPT_NAME": "",
        "PATH_INFO": request.path,
        "QUERY_STRING": request.query_string,
        "SERVER_NAME": server_name,
        "SERVER_PORT": server_port,
        "SERVER_PROTOCOL": "HTTP/1.1",
        "REMOTE_ADDR": "192.0.2.1",
        "wsgi.version": (1, 0),
        "wsgi.url_scheme": url_scheme,
        "wsgi.input": io.BytesIO(body),
        "wsgi.errors": sys.stderr,
        "wsgi.multithread": False,
        "wsgi.multiprocess": False,
        "wsgi.run_once": False,
    }
    if body:
        environ["CONTENT_LENGTH"] = str(len(body))

    for key, values in headers.items():
        value = ",".join(values)
        if key == "content-type":
            environ["CONTENT_TYPE"] = value
        elif key == "content-length":
            environ["CONTENT_LENGTH"] = value
        else:
            environ["HTTP_" + key.upper().replace("-", "_")] = value
    return environ


def response_from_wsgi(status: str, headers: list[tuple[str, str]], body: bytes) -> Response:
    code = int(str(status).split(" ", 1)[0])
    multi: dict[str, list[str]] = {}
    for key, value in headers or []:
        multi.setdefault(str(key).lower(), []).append(str(value))
    return normalize_response(Response(status=code, headers=multi, body=body))
