from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class FixtureError(Exception):
    """A broken fixture or overwrite spec; aborts the current test."""

    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


@dataclass(slots=True)
class ExchangeFailure(AssertionError):
    """Every assertion failure recorded while running one exchange."""

    name: str
    failures: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        lines = [f"{self.name}: {len(self.failures)} failure(s)"]
        lines.extend(self.failures)
        return "\n".join(lines)


def missing_golden(path: str) -> FixtureError:
    return FixtureError("golden.missing", f"golden file {path} does not exist; run with HTTPGOLDEN_UPDATE=1 first")


def not_json() -> FixtureError:
    return FixtureError("golden.not_json", "Response is not JSON")
