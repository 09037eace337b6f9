from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "y", "on"}

UPDATE_ENV = "HTTPGOLDEN_UPDATE"
DUMP_ENV = "HTTPGOLDEN_DUMP"
DIR_ENV = "HTTPGOLDEN_DIR"


@dataclass(frozen=True, slots=True)
class RunConfig:
    update_golden: bool = False
    dump_raw: bool = False
    golden_dir: str = "testdata"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RunConfig:
        env = os.environ if environ is None else environ
        return normalize_run_config(
            cls(
                update_golden=_flag(env.get(UPDATE_ENV)),
                dump_raw=_flag(env.get(DUMP_ENV)),
                golden_dir=str(env.get(DIR_ENV) or ""),
            )
        )


def normalize_run_config(config: RunConfig | None) -> RunConfig:
    if config is None:
        return RunConfig()
    golden_dir = str(getattr(config, "golden_dir", "") or "").strip() or "testdata"
    return RunConfig(
        update_golden=bool(getattr(config, "update_golden", False)),
        dump_raw=bool(getattr(config, "dump_raw", False)),
        golden_dir=golden_dir,
    )


def _flag(value: str | None) -> bool:
    return str(value or "").strip().lower() in _TRUTHY
