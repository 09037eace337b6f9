from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, TypeVar

from httpgolden.errors import FixtureError, not_json
from httpgolden.exchange import Exchange
from httpgolden.rewrite import FieldOverwrite, rewrite_fields
from httpgolden.serializer import compact_json, decode_json, decode_json_object, indent_json
from httpgolden.util import is_json_content_type

T = TypeVar("T")

ResponseFilter = Callable[[Exchange], Exchange]


def pretty_json(exchange: Exchange) -> Exchange:
    """Indent a JSON body; 204 responses pass through untouched."""
    if exchange.status == 204:
        return exchange
    if not is_json_content_type(exchange.response.content_type):
        raise not_json()
    return exchange.with_body(indent_json(exchange.body))


def modify_json(overwrite: FieldOverwrite) -> ResponseFilter:
    """Overwrite existing fields of a JSON object body.

    Nested dicts patch nested objects and lists of dicts patch arrays of
    objects element by element; see ``httpgolden.rewrite``.
    """

    def apply(exchange: Exchange) -> Exchange:
        value = decode_json_object(exchange.body)
        rewrite_fields(value, overwrite)
        return exchange.with_body(compact_json(value))

    return apply


class Capture(Generic[T]):
    """Holds a value decoded from a response for later steps of a scenario."""

    def __init__(self, into: type[T] | Callable[[Any], T] | None = None) -> None:
        self._into = into
        self._value: T | None = None
        self._captured = False

    @property
    def captured(self) -> bool:
        return self._captured

    @property
    def value(self) -> T:
        if not self._captured:
            raise FixtureError("golden.capture", "response was not captured")
        return self._value  # type: ignore[return-value]

    def set(self, decoded: Any) -> None:
        self._value = self._convert(decoded)
        self._captured = True

    def _convert(self, decoded: Any) -> Any:
        if self._into is None:
            return decoded
        try:
            if isinstance(self._into, type) and dataclasses.is_dataclass(self._into):
                return self._into(**_dataclass_kwargs(self._into, decoded))
            return self._into(decoded)
        except FixtureError:
            raise
        except (TypeError, ValueError, KeyError) as exc:
            raise FixtureError("golden.capture", f"could not capture response: {exc}") from exc


def capture_response(capture: Capture[Any]) -> ResponseFilter:
    def apply(exchange: Exchange) -> Exchange:
        capture.set(decode_json(exchange.body))
        return exchange

    return apply


def _dataclass_kwargs(cls: type, decoded: Any) -> dict[str, Any]:
    if not isinstance(decoded, dict):
        raise FixtureError("golden.capture", f"cannot capture {type(decoded).__name__} into {cls.__name__}")

    folded = {str(key).lower(): key for key in decoded}
    kwargs: dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        if f.name in decoded:
            kwargs[f.name] = decoded[f.name]
        elif f.name.lower() in folded:
            kwargs[f.name] = decoded[folded[f.name.lower()]]
    return kwargs
