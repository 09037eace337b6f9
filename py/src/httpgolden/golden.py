from __future__ import annotations

import re
from pathlib import Path, PurePosixPath

from httpgolden.errors import FixtureError, missing_golden

GOLDEN_SUFFIX = ".golden"

_WHITESPACE = re.compile(r"\s")


def join_test_name(*parts: str) -> str:
    """Join hierarchical test name parts with ``/``, whitespace -> ``_``."""
    cleaned = [_WHITESPACE.sub("_", str(part).strip()) for part in parts]
    return "/".join(part for part in cleaned if part)


def api_test_name(endpoint: str, code: int, *description: str) -> str:
    """Name like ``v1_health_200_success`` for ``/v1/health``."""
    value = str(endpoint or "")
    if value.startswith("/"):
        value = value[1:]
    return "_".join([value.replace("/", "_"), str(int(code)), *[str(d) for d in description]])


class GoldenStore:
    def __init__(self, root: str | Path = "testdata") -> None:
        self.root = Path(root)

    def path_for(self, name: str) -> Path:
        relative = PurePosixPath(str(name or "").strip())
        if not relative.parts or relative.is_absolute() or ".." in relative.parts:
            raise FixtureError("golden.bad_name", f"invalid golden name: {name!r}")
        return self.root.joinpath(*relative.parts[:-1], relative.parts[-1] + GOLDEN_SUFFIX)

    def read(self, name: str) -> bytes:
        path = self.path_for(name)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise missing_golden(str(path)) from None
        except OSError as exc:
            raise FixtureError("golden.io", f"could not read {path}: {exc}") from exc

    def write(self, name: str, data: bytes) -> Path:
        path = self.path_for(name)
        try:
            path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
            path.write_bytes(bytes(data))
        except OSError as exc:
            raise FixtureError("golden.io", f"could not write {path}: {exc}") from exc
        return path
