#===============================================================================
#  dmenu_drun | fs_discovery.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Filesystem discovery of executables on the search path and of desktop entries.
#  Both builders append what they found to the open cache file.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Callable, Iterable, List, TextIO

from .cache_store import write_cache
from .constants import DESKTOP_NAME_KEY, DESKTOP_SUFFIX
from .models import Cache

logger = logging.getLogger(__name__)

EntryPredicate = Callable[[os.DirEntry], bool]
# (file name, open file) -> display name
Localizer = Callable[[str, TextIO], str]


def read_dir_exists(dirs: Iterable[Path], predicate: EntryPredicate) -> List[os.DirEntry]:
    """Return entries of every listable directory in *dirs* that satisfy *predicate*.

    Directories that are missing or unreadable are skipped.
    """
    found: List[os.DirEntry] = []
    for d in dirs:
        try:
            with os.scandir(d) as it:
                for entry in it:
                    if predicate(entry):
                        found.append(entry)
        except OSError as e:
            logger.debug("Skipping directory %s: %s", d, e)
    return found


def is_executable_file(entry: os.DirEntry) -> bool:
    """Regular file with at least one execute bit (owner, group or other)."""
    try:
        st = entry.stat()
    except OSError:
        return False
    return stat.S_ISREG(st.st_mode) and bool(st.st_mode & 0o111)


def is_desktop_file(entry: os.DirEntry) -> bool:
    if os.path.splitext(entry.name)[1] != DESKTOP_SUFFIX:
        return False
    try:
        return entry.is_file()
    except OSError:
        return False


def read_desktop_name(fh: TextIO) -> str:
    """Value of the first Name= line, or "" when the file has none."""
    for line in fh:
        line = line.rstrip("\r\n")
        if line.startswith(DESKTOP_NAME_KEY):
            return line[len(DESKTOP_NAME_KEY):]
    return ""


def create_cache(
    cache_file: TextIO,
    dirs: Iterable[Path],
    predicate: EntryPredicate,
    localizer: Localizer,
) -> Cache:
    """Scan *dirs*, map each matching file through *localizer* and append the result to *cache_file*.

    Later directories overwrite earlier ones on equal display names.
    Files that cannot be opened are skipped.
    """
    cache: Cache = {}
    for entry in read_dir_exists(dirs, predicate):
        try:
            with open(entry.path, "r", encoding="utf-8", errors="replace") as fh:
                name = localizer(entry.name, fh)
        except OSError as e:
            logger.debug("Skipping unreadable file %s: %s", entry.path, e)
            continue
        cache[name] = entry.name

    write_cache(cache_file, cache)
    return cache


def _desktop_localizer(file_name: str, fh: TextIO) -> str:
    name = read_desktop_name(fh)
    if not name:
        logger.debug("%s has no %s line", file_name, DESKTOP_NAME_KEY)
    return name


def create_path_cache(cache_file: TextIO, path_dirs: Iterable[Path]) -> Cache:
    """Executables on the search path, keyed by their own file name."""
    return create_cache(cache_file, path_dirs, is_executable_file, lambda name, _fh: name)


def create_desktop_cache(cache_file: TextIO, desktop_dirs: Iterable[Path]) -> Cache:
    """Desktop entries keyed by their Name= value."""
    return create_cache(cache_file, desktop_dirs, is_desktop_file, _desktop_localizer)
