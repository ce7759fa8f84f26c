#===============================================================================
#  dmenu_drun | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Resolves the selector's output against the cache and launches it:
#  direct executables in the foreground, desktop entries through gtk-launch from a
#  detached background session, anything else as a typed command line.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import subprocess
import sys
from typing import Callable, Optional, Sequence

from .constants import DESKTOP_LAUNCHER, FALLBACK_EXIT_CODE
from .errors import EmptySelectionError, LaunchError
from .models import Cache, LaunchPlan, is_direct_entry

logger = logging.getLogger(__name__)

Spawner = Callable[[Sequence[str]], Optional[int]]


def resolve(selection: str, cache: Cache, desktop_launcher: str = DESKTOP_LAUNCHER) -> LaunchPlan:
    """Decide how *selection* is executed.

    kinds:
      - direct  : cached executable, run with no arguments
      - desktop : cached desktop entry, handed to the desktop launcher after detaching
      - freeform: not cached, split on whitespace into program + arguments
    """
    target = cache.get(selection)
    if target is None:
        argv = tuple(selection.split())
        if not argv:
            raise EmptySelectionError("Got empty output from the selector")
        return LaunchPlan(kind="freeform", argv=argv)

    if is_direct_entry(selection, target):
        return LaunchPlan(kind="direct", argv=(target,))

    # gtk-launch forks the application and returns immediately
    return LaunchPlan(kind="desktop", argv=(desktop_launcher, target), detach=True)


def _known_status(returncode: Optional[int]) -> Optional[int]:
    # negative return codes mean "killed by signal", which has no exit status
    if returncode is None or returncode < 0:
        return None
    return returncode


def spawn_and_wait(argv: Sequence[str]) -> Optional[int]:
    """Run *argv* in the foreground and return its exit status, if it has one."""
    try:
        p = subprocess.Popen(list(argv))
    except OSError as e:
        raise LaunchError(f"Could not start {argv[0]}: {e}") from e
    return _known_status(p.wait())


def detach_into_background() -> None:
    """Double fork into a new session. Only the grandchild returns.

    The original foreground process and the intermediate session leader both
    exit with status 0.
    """
    sys.stdout.flush()
    sys.stderr.flush()
    if os.fork() > 0:
        os._exit(0)
    os.setsid()
    if os.fork() > 0:
        os._exit(0)


class Dispatcher:
    """Executes whatever the user picked or typed."""

    def __init__(
        self,
        desktop_launcher: str = DESKTOP_LAUNCHER,
        spawn: Spawner = spawn_and_wait,
        detach: Callable[[], None] = detach_into_background,
    ):
        self.desktop_launcher = desktop_launcher
        self.spawn = spawn
        self.detach = detach

    def dispatch(self, selection: str, cache: Cache) -> Optional[int]:
        """Launch *selection* and return the launched program's exit status (None if unknown)."""
        plan = resolve(selection, cache, self.desktop_launcher)
        logger.debug("Launching %s: %s", plan.kind, list(plan.argv))
        if plan.detach:
            self.detach()
        return self.spawn(plan.argv)


def exit_status(launched: Optional[int], selector_status: Optional[int]) -> int:
    """Launched program's status if known, else the selector's, else FALLBACK_EXIT_CODE."""
    for status in (launched, selector_status):
        status = _known_status(status)
        if status is not None:
            return status
    return FALLBACK_EXIT_CODE
