#===============================================================================
#  dmenu_drun | cache_store.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Load/save of the name -> target cache (one NUL-separated record per line).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from typing import TextIO

from .constants import FIELD_SEP, LINE_SEP
from .models import Cache

logger = logging.getLogger(__name__)


def serialize_cache(cache: Cache) -> str:
    """One '<name>\\0<target>\\n' line per entry."""
    return "".join(f"{k}{FIELD_SEP}{v}{LINE_SEP}" for k, v in cache.items())


def parse_cache(text: str) -> Cache:
    """Parse serialized cache text.

    Lines that do not split into exactly two fields are dropped on their own;
    they never fail the whole load. Later lines win on duplicate names.
    """
    cache: Cache = {}
    for line in text.split(LINE_SEP):
        line = line.rstrip("\r")
        fields = line.split(FIELD_SEP)
        if len(fields) != 2:
            if line:
                logger.debug("Dropping malformed cache line: %r", line)
            continue
        cache[fields[0]] = fields[1]
    return cache


def write_cache(cache_file: TextIO, cache: Cache) -> None:
    """Append *cache* to an open cache file."""
    cache_file.write(serialize_cache(cache))
    cache_file.flush()


def read_cache(cache_file: TextIO) -> Cache:
    """Parse the whole of an open cache file, from the start."""
    cache_file.seek(0)
    return parse_cache(cache_file.read())
