from __future__ import annotations

import difflib

from httpgolden.config import RunConfig, normalize_run_config
from httpgolden.errors import ExchangeFailure, FixtureError
from httpgolden.exchange import Exchange
from httpgolden.filters import ResponseFilter
from httpgolden.golden import GoldenStore
from httpgolden.handler import Handler, dispatch
from httpgolden.logger import StructuredLogger, get_logger
from httpgolden.request import Request
from httpgolden.serializer import dump_response, indent_json
from httpgolden.util import is_json_content_type


class Driver:
    """Runs exchanges against one handler and checks them against golden files.

    Status mismatches and golden diffs are collected and raised together as
    ``ExchangeFailure`` once the exchange has finished; ``FixtureError`` aborts
    immediately and never leaves a partial golden file behind.
    """

    def __init__(
        self,
        handler: Handler,
        config: RunConfig | None = None,
        *,
        store: GoldenStore | None = None,
        logger: StructuredLogger | None = None,
    ) -> None:
        self._handler = handler
        self._config = normalize_run_config(config)
        self._store = store or GoldenStore(self._config.golden_dir)
        self._logger = logger or get_logger()

    @property
    def config(self) -> RunConfig:
        return self._config

    @property
    def store(self) -> GoldenStore:
        return self._store

    def run(self, name: str, request: Request, want: int, *filters: ResponseFilter) -> Exchange:
        log = self._logger.with_field("test", name)
        # dump mode traces at WARNING, which logging emits without any setup
        trace = log.warn if self._config.dump_raw else log.info
        trace(f">>> {request.method} {request.url}")

        exchange = Exchange(request=request, response=dispatch(self._handler, request))

        failures: list[str] = []
        if exchange.status != int(want):
            failures.append(f"HTTP StatusCode: {exchange.status}, want: {int(want)}")

        try:
            if self._config.dump_raw:
                trace(f"Raw response:\n{_raw_dump(exchange, log)}")

            for response_filter in filters:
                exchange = response_filter(exchange)

            dump = dump_response(exchange)

            if self._config.update_golden:
                path = self._store.write(name, dump)
            else:
                path = self._store.path_for(name)
                diff = diff_golden(self._store.read(name), dump)
                if diff:
                    failures.append(f"HTTP Response mismatch (-want +got):\n{diff}")
        except FixtureError as exc:
            for failure in failures:
                exc.add_note(failure)
            raise

        trace(f"<<< {path}")

        if failures:
            for failure in failures:
                log.error(failure)
            raise ExchangeFailure(name=name, failures=failures)
        return exchange


def diff_golden(want: bytes, got: bytes) -> str:
    if want == got:
        return ""
    lines = difflib.unified_diff(
        want.decode("utf-8", errors="replace").splitlines(),
        got.decode("utf-8", errors="replace").splitlines(),
        fromfile="want",
        tofile="got",
        lineterm="",
    )
    diff = "\n".join(lines)
    if diff:
        return diff
    return f"-{want!r}\n+{got!r}"


def _raw_dump(exchange: Exchange, log: StructuredLogger) -> str:
    body = exchange.body
    if is_json_content_type(exchange.response.content_type) and exchange.status in (200, 201):
        try:
            body = indent_json(body)
        except FixtureError as exc:
            log.warn(f"raw response body left unformatted: {exc}")
    head = dump_response(exchange, include_body=False)
    return (head + body).decode("utf-8", errors="replace")
