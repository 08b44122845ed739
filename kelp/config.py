from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List

from kelp.errors import KelpConfigError


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (kelp package directory)
_KELP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _KELP_DIR / 'prelude'
_DEFAULT_PROMPT = 'user> '
_DEFAULT_LOG_LEVEL = 'WARNING'

PRELUDE_FILE = 'core.lisp'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_root() -> Path:
    roots = paths_from_env('KELP_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR])
    # treat as single directory; if a file path is set, return its parent
    p = roots[0]
    return p if p.is_dir() else p.parent


def get_prompt() -> str:
    return os.environ.get('KELP_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    name = os.environ.get('KELP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise KelpConfigError(f"Unknown log level '{name}' in KELP_LOG_LEVEL")
    return level
