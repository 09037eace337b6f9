from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class StructuredLogger(Protocol):
    def debug(self, message: str, *fields: dict[str, Any]) -> None: ...

    def info(self, message: str, *fields: dict[str, Any]) -> None: ...

    def warn(self, message: str, *fields: dict[str, Any]) -> None: ...

    def error(self, message: str, *fields: dict[str, Any]) -> None: ...

    def with_field(self, key: str, value: Any) -> StructuredLogger: ...

    def with_fields(self, fields: dict[str, Any]) -> StructuredLogger: ...


class NoOpLogger:
    def debug(self, _message: str, *fields: dict[str, Any]) -> None:
        return None

    def info(self, _message: str, *fields: dict[str, Any]) -> None:
        return None

    def warn(self, _message: str, *fields: dict[str, Any]) -> None:
        return None

    def error(self, _message: str, *fields: dict[str, Any]) -> None:
        return None

    def with_field(self, _key: str, _value: Any) -> StructuredLogger:
        return self

    def with_fields(self, _fields: dict[str, Any]) -> StructuredLogger:
        return self


class StandardLogger:
    """Forwards to a ``logging.Logger`` so test runners capture the output."""

    def __init__(self, logger: logging.Logger | None = None, fields: dict[str, Any] | None = None) -> None:
        self._logger = logger or logging.getLogger("httpgolden")
        self._fields = dict(fields or {})

    def debug(self, message: str, *fields: dict[str, Any]) -> None:
        self._log(logging.DEBUG, message, fields)

    def info(self, message: str, *fields: dict[str, Any]) -> None:
        self._log(logging.INFO, message, fields)

    def warn(self, message: str, *fields: dict[str, Any]) -> None:
        self._log(logging.WARNING, message, fields)

    def error(self, message: str, *fields: dict[str, Any]) -> None:
        self._log(logging.ERROR, message, fields)

    def with_field(self, key: str, value: Any) -> StructuredLogger:
        return self.with_fields({key: value})

    def with_fields(self, fields: dict[str, Any]) -> StructuredLogger:
        merged = dict(self._fields)
        merged.update(fields or {})
        return StandardLogger(self._logger, merged)

    def _log(self, level: int, message: str, extra: tuple[dict[str, Any], ...]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        merged = dict(self._fields)
        for item in extra:
            merged.update(item or {})
        suffix = " ".join(f"{key}={merged[key]}" for key in sorted(merged))
        self._logger.log(level, f"{message} [{suffix}]" if suffix else message)


_global_logger: StructuredLogger = StandardLogger()


def get_logger() -> StructuredLogger:
    return _global_logger


def set_logger(logger: StructuredLogger | None) -> None:
    global _global_logger
    _global_logger = logger if logger is not None else StandardLogger()


__all__ = [
    "NoOpLogger",
    "StandardLogger",
    "StructuredLogger",
    "get_logger",
    "set_logger",
]
