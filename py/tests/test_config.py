from __future__ import annotations

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(REPO_ROOT / "py" / "src"))

from httpgolden.config import RunConfig, normalize_run_config  # noqa: E402


class TestRunConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = RunConfig.from_env({})
        self.assertFalse(cfg.update_golden)
        self.assertFalse(cfg.dump_raw)
        self.assertEqual(cfg.golden_dir, "testdata")

    def test_from_env_reads_flags_and_dir(self) -> None:
        cfg = RunConfig.from_env({"HTTPGOLDEN_UPDATE": "True", "HTTPGOLDEN_DUMP": " 1 ", "HTTPGOLDEN_DIR": "golden"})
        self.assertTrue(cfg.update_golden)
        self.assertTrue(cfg.dump_raw)
        self.assertEqual(cfg.golden_dir, "golden")

    def test_from_env_treats_other_values_as_false(self) -> None:
        for value in ("", "0", "false", "off", "nope"):
            with self.subTest(value=value):
                self.assertFalse(RunConfig.from_env({"HTTPGOLDEN_UPDATE": value}).update_golden)

    def test_normalize_run_config(self) -> None:
        self.assertEqual(normalize_run_config(None), RunConfig())
        self.assertEqual(normalize_run_config(RunConfig(golden_dir="  ")).golden_dir, "testdata")
        self.assertTrue(normalize_run_config(RunConfig(update_golden=True)).update_golden)
