#===============================================================================
#  dmenu_drun | invalidation.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Decides whether the cache file is stale compared to the watched directories.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

EPOCH_NS = 0


def mtime_ns(path: Path) -> Optional[int]:
    """Modification time in nanoseconds, or None if the path cannot be stat'ed."""
    try:
        return os.stat(path).st_mtime_ns
    except OSError:
        return None


def needs_rebuild(cache_path: Path, watched_dirs: Iterable[Path]) -> bool:
    """True when the cache file is missing or any watched directory is strictly newer.

    Directories that cannot be stat'ed never force a rebuild. Only the
    directories themselves are compared, not the files below them.
    """
    if not cache_path.exists():
        logger.debug("Cache %s missing, rebuilding", cache_path)
        return True

    cache_mtime = mtime_ns(cache_path)
    if cache_mtime is None:
        cache_mtime = EPOCH_NS

    for d in watched_dirs:
        dir_mtime = mtime_ns(d)
        if dir_mtime is not None and dir_mtime > cache_mtime:
            logger.debug("%s is newer than the cache, rebuilding", d)
            return True
    return False
