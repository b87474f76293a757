"""
Model discovery.

Turns model sources (files or directories) into the ordered list of model
paths passed to the validator. Directories are passed as-is; the validator
walks them itself.
"""

import logging
from pathlib import Path
from typing import Iterable

from modval.domain.constants import DEFAULT_MODEL_SOURCES

logger = logging.getLogger(__name__)


def _absolute(source: Path | str, project_root: Path) -> Path:
    path = Path(source).expanduser()
    return path if path.is_absolute() else project_root / path


def discover_models(sources: Iterable[Path | str], project_root: Path) -> list[Path]:
    """Return existing model sources in order, without duplicates.

    If sources is empty, the default model directories under project_root are
    used instead. Configured sources that do not exist are skipped with a
    warning; missing default directories are skipped silently.
    """
    configured = list(sources)
    explicit = bool(configured)
    if not explicit:
        configured = list(DEFAULT_MODEL_SOURCES)

    discovered: list[Path] = []
    for source in configured:
        path = _absolute(source, project_root)
        if not path.exists():
            if explicit:
                logger.warning(f"Model source not found, skipping: {path}")
            continue
        if path not in discovered:
            discovered.append(path)

    logger.debug(f"Discovered {len(discovered)} model source(s)")
    return discovered
