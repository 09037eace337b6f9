from __future__ import annotations

import json as jsonlib
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(REPO_ROOT / "py" / "src"))

from httpgolden.request import Request, json_body, new_request, normalize_request, with_header, with_query  # noqa: E402


class TestRequest(unittest.TestCase):
    def test_new_request_parses_target_and_applies_options_in_order(self) -> None:
        req = new_request(
            "get",
            "/v1/user/1?typ=new",
            None,
            with_query("page", "1", "2"),
            with_header("X-Request-Id", "a"),
            with_header("x-request-id", "b"),
        )
        self.assertEqual(req.method, "GET")
        self.assertEqual(req.path, "/v1/user/1")
        self.assertEqual(req.query, {"typ": ["new"], "page": ["1", "2"]})
        self.assertEqual(req.headers, {"x-request-id": ["b"]})
        self.assertEqual(req.body, b"")

    def test_url_encodes_query_sorted_by_key(self) -> None:
        req = new_request("GET", "/search", None, with_query("q", "a b"), with_query("a", "1"))
        self.assertEqual(req.url, "/search?a=1&q=a+b")
        self.assertEqual(new_request("GET", "/plain").url, "/plain")

    def test_blank_query_values_are_kept(self) -> None:
        req = new_request("GET", "/x?flag=&v=1")
        self.assertEqual(req.query, {"flag": [""], "v": ["1"]})

    def test_json_body_encodes_with_trailing_newline(self) -> None:
        body = json_body({"name": "Jonathan Joestar"})
        self.assertTrue(body.endswith(b"\n"))
        self.assertEqual(jsonlib.loads(body), {"name": "Jonathan Joestar"})

        req = new_request("POST", "/v1/user", body)
        self.assertEqual(req.body, body)

    def test_normalize_request_canonicalizes_fields(self) -> None:
        req = normalize_request(
            Request(method=" post ", path="v1/user", query={"a": "1"}, headers={"X-A": "1"}, body="x")
        )
        self.assertEqual(req.method, "POST")
        self.assertEqual(req.path, "/v1/user")
        self.assertEqual(req.query, {"a": ["1"]})
        self.assertEqual(req.headers, {"x-a": ["1"]})
        self.assertEqual(req.body, b"x")
