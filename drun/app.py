#===============================================================================
#  dmenu_drun | app.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Command line entry point: invalidate -> (rebuild | load) -> filter -> select -> dispatch.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Mapping, Optional, TextIO

from .cache_store import read_cache
from .config import LauncherConfig
from .constants import PROG_NAME
from .errors import CacheError, LauncherError
from .filters import apply_filters
from .fs_discovery import create_desktop_cache, create_path_cache
from .invalidation import needs_rebuild
from .launcher import Dispatcher, exit_status
from .models import Cache
from .selector import run_selector

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description="Pick an executable from $PATH or a desktop application with dmenu and run it.",
    )
    parser.add_argument("-p", dest="hide_path", action="store_true", help="hide files in $PATH")
    parser.add_argument("-d", dest="hide_desktop", action="store_true", help="hide desktop files")
    parser.add_argument(
        "--rebuild",
        action="store_true",
        help="rebuild the cache even if no watched directory changed",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    return parser


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def open_cache_file(cache_path: Path, rebuild: bool) -> TextIO:
    """Open the cache file in the mode chosen up front.

    rebuild: truncate + read/write. reuse: append + read. If that fails, fall
    back to creating the file; if that fails too the run cannot continue.
    """
    mode = "w+" if rebuild else "a+"
    try:
        return open(cache_path, mode, encoding="utf-8", errors="surrogateescape", newline="")
    except OSError as e:
        logger.debug("Opening %s with mode %s failed: %s", cache_path, mode, e)
    try:
        return open(cache_path, "w+", encoding="utf-8", errors="surrogateescape", newline="")
    except OSError as e:
        raise CacheError(f"Could not create cache file {cache_path}: {e}") from e


def load_cache(config: LauncherConfig, force_rebuild: bool = False) -> Cache:
    """Rebuild the cache from disk scans when stale, otherwise parse the persisted one."""
    try:
        config.cache_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise CacheError(f"Could not create cache directory {config.cache_dir}: {e}") from e

    rebuild = force_rebuild or needs_rebuild(config.cache_path, config.watched_dirs)

    with open_cache_file(config.cache_path, rebuild) as cache_file:
        if not rebuild:
            return read_cache(cache_file)

        logger.debug("Rebuilding %s", config.cache_path)
        cache = create_path_cache(cache_file, config.path_dirs)
        # desktop entries are built second and win on equal names
        cache.update(create_desktop_cache(cache_file, config.desktop_dirs))
        return cache


def run(
    args: argparse.Namespace,
    environ: Mapping[str, str],
    dispatcher: Optional[Dispatcher] = None,
) -> int:
    config = LauncherConfig.from_environ(environ)
    cache = load_cache(config, force_rebuild=args.rebuild)
    cache = apply_filters(cache, hide_path=args.hide_path, hide_desktop=args.hide_desktop)

    result = run_selector(config, cache.keys())

    if dispatcher is None:
        dispatcher = Dispatcher(desktop_launcher=config.desktop_launcher)
    launched = dispatcher.dispatch(result.selection, cache)
    return exit_status(launched, result.returncode)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        return run(args, os.environ)
    except LauncherError as e:
        print(f"{PROG_NAME}: {e}", file=sys.stderr)
        return 1
