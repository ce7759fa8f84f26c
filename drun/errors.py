#===============================================================================
#  dmenu_drun | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Failures that abort a run. Lower layers raise them; only the CLI decides they are fatal.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations


class LauncherError(RuntimeError):
    """Base class for failures that end the run with a diagnostic."""


class CacheError(LauncherError):
    """Cache directory or cache file could not be created or opened."""


class SelectorError(LauncherError):
    """The interactive selector could not be spawned."""


class LaunchError(LauncherError):
    """The chosen or typed target could not be spawned."""


class EmptySelectionError(LaunchError):
    """Freeform input did not contain a program name."""
