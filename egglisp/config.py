from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (egglisp package directory)
_EGGLISP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _EGGLISP_DIR / 'prelude'
_DEFAULT_LOGLEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_root() -> Path:
    roots = paths_from_env('EGGLISP_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR])
    # treat as single directory; if a file path is set, return its parent
    p = roots[0]
    return p if p.is_dir() else p.parent


def get_log_level() -> int:
    name = os.environ.get('EGGLISP_LOGLEVEL', _DEFAULT_LOGLEVEL).upper()
    level = getattr(logging, name, None)
    return level if isinstance(level, int) else logging.WARNING
