from __future__ import annotations

from typing import Callable, Protocol, Union, runtime_checkable

from httpgolden.request import Request, normalize_request
from httpgolden.response import Response, normalize_response


@runtime_checkable
class Servable(Protocol):
    def serve(self, request: Request) -> Response: ...


Handler = Union[Servable, Callable[[Request], Response]]


def dispatch(handler: Handler, request: Request) -> Response:
    """Hand ``request`` to the handler under test and return its normalized response."""
    normalized = normalize_request(request)
    if isinstance(handler, Servable):
        resp = handler.serve(normalized)
    elif callable(handler):
        resp = handler(normalized)
    else:
        raise TypeError("handler must be callable or provide serve(request)")
    if not isinstance(resp, Response):
        raise TypeError(f"handler returned {type(resp).__name__}, want Response")
    return normalize_response(resp)
