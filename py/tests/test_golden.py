from __future__ import annotations

import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(REPO_ROOT / "py" / "src"))

from httpgolden.errors import FixtureError  # noqa: E402
from httpgolden.golden import GoldenStore, api_test_name, join_test_name  # noqa: E402


class TestNaming(unittest.TestCase):
    def test_join_test_name_uses_slashes_and_underscores(self) -> None:
        self.assertEqual(
            join_test_name("TestUserScenario", "test_scenario", "1 UserPost registration"),
            "TestUserScenario/test_scenario/1_UserPost_registration",
        )
        self.assertEqual(join_test_name("A", "", "B"), "A/B")

    def test_api_test_name(self) -> None:
        self.assertEqual(api_test_name("/v1/health", 200), "v1_health_200")
        self.assertEqual(api_test_name("/v1/user", 500, "exception"), "v1_user_500_exception")
        self.assertEqual(api_test_name("/v1/user", 201, "success", "admin"), "v1_user_201_success_admin")


class TestGoldenStore(unittest.TestCase):
    def test_path_for_maps_hierarchical_names(self) -> None:
        store = GoldenStore("testdata")
        self.assertEqual(store.path_for("TestHealth/v1_health_200"), Path("testdata") / "TestHealth" / "v1_health_200.golden")
        self.assertEqual(store.path_for("flat"), Path("testdata") / "flat.golden")

    def test_path_for_rejects_escaping_names(self) -> None:
        store = GoldenStore("testdata")
        for name in ("", "/etc/passwd", "../outside", "a/../../b"):
            with self.subTest(name=name):
                with self.assertRaises(FixtureError) as ctx:
                    store.path_for(name)
                self.assertEqual(ctx.exception.code, "golden.bad_name")

    def test_write_creates_parents_and_overwrites(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            store = GoldenStore(tmp)
            path = store.write("TestUser/step/1_post", b"first")
            self.assertTrue(path.is_file())
            self.assertEqual(store.read("TestUser/step/1_post"), b"first")

            store.write("TestUser/step/1_post", b"second")
            self.assertEqual(path.read_bytes(), b"second")

    def test_read_missing_is_fatal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FixtureError) as ctx:
                GoldenStore(tmp).read("TestMissing/none")
            self.assertEqual(ctx.exception.code, "golden.missing")
            self.assertIn("HTTPGOLDEN_UPDATE=1", ctx.exception.message)

    def test_io_failures_are_fatal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "blocked"
            blocker.write_bytes(b"")
            store = GoldenStore(blocker)
            with self.assertRaises(FixtureError) as ctx:
                store.write("x", b"data")
            self.assertEqual(ctx.exception.code, "golden.io")
