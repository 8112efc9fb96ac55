# src/chipdrop/log.py

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional, Union

from loguru import logger

from chipdrop.config import LOG_DIR, LOG_LEVEL, LOG_ROTATION


def log_dir(base: Union[str, Path] = LOG_DIR) -> Path:
    path = Path(base)
    path.mkdir(parents=True, exist_ok=True)
    return path


def configure_logging(level: str = LOG_LEVEL, log_file: Optional[Union[str, Path]] = None) -> List[int]:
    """
    Turn on chipdrop's log output.

    The package disables its loguru records on import; this re-enables them,
    replaces loguru's handlers with a stderr sink at `level` and, if `log_file`
    is given, a rotating file sink (a bare filename lands under LOG_DIR).
    Returns the sink ids.
    """
    logger.remove()
    logger.enable("chipdrop")

    sink_ids = [
        logger.add(sys.stderr, level=level, format="{time:HH:mm:ss} | {level: <7} | {name} | {message}")
    ]

    if log_file is not None:
        path = Path(log_file)
        if path.parent == Path("."):
            path = log_dir() / path
        sink_ids.append(logger.add(path, level=level, rotation=LOG_ROTATION, encoding="utf-8"))

    return sink_ids
