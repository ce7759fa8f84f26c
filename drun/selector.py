#===============================================================================
#  dmenu_drun | selector.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Feeds display names to the interactive selector (dmenu) and reads back the choice.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import subprocess
from typing import Iterable, List

from .config import LauncherConfig
from .constants import DESKTOP_SUFFIX, SELECTOR_HISTORY_FLAG
from .errors import SelectorError
from .models import SelectorResult

logger = logging.getLogger(__name__)


def format_menu(names: Iterable[str]) -> str:
    return "\n".join(sorted(set(names)))


def clean_selection(raw: str) -> str:
    """Trim whitespace, then every trailing .desktop suffix."""
    selection = raw.strip()
    while selection.endswith(DESKTOP_SUFFIX):
        selection = selection[: -len(DESKTOP_SUFFIX)]
    return selection


def selector_command(config: LauncherConfig) -> List[str]:
    return [config.selector_cmd, SELECTOR_HISTORY_FLAG, str(config.histfile)]


def run_selector(config: LauncherConfig, names: Iterable[str]) -> SelectorResult:
    """Show *names* in the selector and block until the user picks or types something."""
    cmd = selector_command(config)
    try:
        p = subprocess.Popen(cmd, stdin=subprocess.PIPE, stdout=subprocess.PIPE)
    except OSError as e:
        raise SelectorError(f"Could not spawn {config.selector_cmd}: {e}") from e

    menu = format_menu(names) + "\n"
    out, _ = p.communicate(menu.encode("utf-8", errors="surrogateescape"))
    # same error handler as the cache file, so non-UTF-8 names still match their entry
    selection = clean_selection(out.decode("utf-8", errors="surrogateescape"))
    logger.debug("%s exited with %s, selection %r", config.selector_cmd, p.returncode, selection)
    return SelectorResult(selection=selection, returncode=p.returncode)
