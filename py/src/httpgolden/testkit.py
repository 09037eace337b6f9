from __future__ import annotations

import contextlib
import inspect
import unittest
from collections.abc import Iterator
from pathlib import Path
from typing import ClassVar

from httpgolden.config import RunConfig, normalize_run_config
from httpgolden.driver import Driver
from httpgolden.exchange import Exchange
from httpgolden.filters import ResponseFilter
from httpgolden.golden import GoldenStore, join_test_name
from httpgolden.handler import Handler
from httpgolden.logger import StructuredLogger
from httpgolden.request import Request


class GoldenTestCase(unittest.TestCase):
    """``unittest`` base class for golden-file HTTP tests.

    Subclasses set ``handler``; ``config`` defaults to ``RunConfig.from_env()``.
    Golden files are named ``<TestClass>/<test_method>[/<step>...]`` under a
    ``golden_dir`` resolved next to the test module when relative::

        class TestUser(GoldenTestCase):
            handler = staticmethod(new_router())

            def test_scenario(self) -> None:
                with self.step("1 UserPost registration"):
                    self.run_golden(new_request("POST", "/v1/user"), 201, pretty_json)
    """

    handler: ClassVar[Handler | None] = None
    config: ClassVar[RunConfig | None] = None
    logger: ClassVar[StructuredLogger | None] = None

    def setUp(self) -> None:
        super().setUp()
        self._steps: list[str] = []

    @contextlib.contextmanager
    def step(self, name: str) -> Iterator[None]:
        """Run a named step as a subtest; a failing step does not stop the next."""
        with self.subTest(name):
            self._steps.append(name)
            try:
                yield
            finally:
                self._steps.pop()

    def golden_name(self) -> str:
        return join_test_name(type(self).__name__, self._testMethodName, *self._steps)

    def golden_driver(self) -> Driver:
        handler = type(self).handler
        if handler is None:
            raise TypeError(f"{type(self).__name__}.handler is not set")

        config = normalize_run_config(type(self).config or RunConfig.from_env())
        root = Path(config.golden_dir)
        if not root.is_absolute():
            root = Path(inspect.getfile(type(self))).resolve().parent / root

        return Driver(handler, config, store=GoldenStore(root), logger=type(self).logger)

    def run_golden(self, request: Request, want: int, *filters: ResponseFilter) -> Exchange:
        return self.golden_driver().run(self.golden_name(), request, want, *filters)
