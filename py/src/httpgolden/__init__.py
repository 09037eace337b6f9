"""httpgolden: golden-file assertions for in-process HTTP handlers."""

from __future__ import annotations

from httpgolden.config import RunConfig
from httpgolden.driver import Driver, diff_golden
from httpgolden.errors import ExchangeFailure, FixtureError
from httpgolden.exchange import Exchange
from httpgolden.filters import Capture, ResponseFilter, capture_response, modify_json, pretty_json
from httpgolden.golden import GoldenStore, api_test_name, join_test_name
from httpgolden.handler import Handler, dispatch
from httpgolden.logger import NoOpLogger, StandardLogger, StructuredLogger, get_logger, set_logger
from httpgolden.request import Request, RequestOption, json_body, new_request, with_header, with_query
from httpgolden.response import Response, json, no_content, text
from httpgolden.rewrite import FieldOverwrite, Literal, rewrite_fields
from httpgolden.serializer import dump_response, indent_json
from httpgolden.testkit import GoldenTestCase
from httpgolden.wsgi import WSGIHandler

__all__ = [
    "Capture",
    "Driver",
    "Exchange",
    "ExchangeFailure",
    "FieldOverwrite",
    "FixtureError",
    "GoldenStore",
    "GoldenTestCase",
    "Handler",
    "Literal",
    "NoOpLogger",
    "Request",
    "RequestOption",
    "Response",
    "ResponseFilter",
    "RunConfig",
    "StandardLogger",
    "StructuredLogger",
    "WSGIHandler",
    "api_test_name",
    "capture_response",
    "diff_golden",
    "dispatch",
    "dump_response",
    "get_logger",
    "indent_json",
    "join_test_name",
    "json",
    "json_body",
    "modify_json",
    "new_request",
    "no_content",
    "pretty_json",
    "rewrite_fields",
    "set_logger",
    "text",
    "with_header",
    "with_query",
]
