#===============================================================================
#  dmenu_drun | filters.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Optional post-build trimming of the cache (hide path entries / hide desktop entries).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Callable

from .constants import DESKTOP_SUFFIX
from .models import Cache, is_direct_entry

EntryPredicate = Callable[[str, str], bool]


def retain(cache: Cache, keep: EntryPredicate) -> Cache:
    """New mapping with only the entries for which keep(name, target) is true."""
    return {k: v for k, v in cache.items() if keep(k, v)}


def hide_path_entries(cache: Cache) -> Cache:
    """Drop entries that map a name onto itself (search-path executables)."""
    return retain(cache, lambda k, v: not is_direct_entry(k, v))


def hide_desktop_entries(cache: Cache) -> Cache:
    """Drop entries whose target is a desktop file."""
    return retain(cache, lambda _k, v: not v.endswith(DESKTOP_SUFFIX))


def apply_filters(cache: Cache, hide_path: bool = False, hide_desktop: bool = False) -> Cache:
    if hide_path:
        cache = hide_path_entries(cache)
    if hide_desktop:
        cache = hide_desktop_entries(cache)
    return cache
