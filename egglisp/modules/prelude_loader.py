from __future__ import annotations
import logging
from pathlib import Path
from typing import Protocol

from egglisp.config import get_prelude_root

logger = logging.getLogger(__name__)

PRELUDE_FILES = ('std.egg',)


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def prelude_paths(root: Path | None = None) -> list[Path]:
    root = root if root is not None else get_prelude_root()
    return [root / name for name in PRELUDE_FILES]


def load_prelude(itp: _HasEvalPrelude) -> None:
    """Evaluate the standard library files into the interpreter's global scope."""
    paths = prelude_paths()
    if not any(p.exists() for p in paths):
        raise FileNotFoundError(f"No prelude found under {get_prelude_root()}")
    for p in paths:
        if not p.exists():
            continue
        logger.debug("Loading prelude %s", p)
        itp.eval_prelude(p.read_text(encoding='utf-8'))
