"""Pin non-deterministic fields of a decoded JSON document before comparison.

An overwrite spec mirrors the shape of the response it patches::

    {
        "created_time": 1677136520,          # literal: replaced as-is
        "owner": {"updated_at": "-"},         # dict: recurse into the object
        "items": [{"id": 0}, {"id": 0}],      # list of dicts: recurse by index
    }

Only keys already present in the target are touched, so one spec can be
shared across response variants where some fields are absent.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Union

from httpgolden.errors import FixtureError

JSONValue = Union[None, bool, int, float, str, list["JSONValue"], dict[str, "JSONValue"]]
FieldOverwrite = dict[str, Any]


@dataclass(frozen=True, slots=True)
class Literal:
    """Replace a field with ``value`` even when it looks like a nested overwrite."""

    value: Any


def rewrite_fields(target: dict[str, JSONValue], overwrite: FieldOverwrite, *parents: str) -> None:
    for key, value in overwrite.items():
        if key not in target:
            continue

        match value:
            case Literal(value=literal):
                target[key] = deepcopy(literal)
            case dict():
                sub = target[key]
                if not isinstance(sub, dict):
                    raise FixtureError("golden.rewrite_type", f"could not rewrite map: key = {_key_path(parents, key)!r}")
                rewrite_fields(sub, value, *parents, key)
            case list() if _is_object_list(value):
                _rewrite_array(target[key], value, parents, key)
            case _:
                target[key] = deepcopy(value)


def _rewrite_array(current: JSONValue, overwrites: list[FieldOverwrite], parents: tuple[str, ...], key: str) -> None:
    if not isinstance(current, list):
        raise FixtureError("golden.rewrite_type", f"could not rewrite array map: key = {_key_path(parents, key)!r}")
    if len(current) != len(overwrites):
        raise FixtureError(
            "golden.rewrite_length",
            f"could not rewrite array map: len(sub)={len(current)} != len(v)={len(overwrites)}: "
            f"key = {_key_path(parents, key)!r}",
        )

    for idx, item_overwrite in enumerate(overwrites):
        item_key = f"{key}#{idx}"
        item = current[idx]
        if not isinstance(item, dict):
            raise FixtureError(
                "golden.rewrite_type", f"could not rewrite array map: key = {_key_path(parents, item_key)!r}"
            )
        rewrite_fields(item, item_overwrite, *parents, item_key)


def _is_object_list(value: list[Any]) -> bool:
    return bool(value) and all(isinstance(item, dict) for item in value)


def _key_path(parents: tuple[str, ...], key: str) -> str:
    return ".".join((*parents, key))
