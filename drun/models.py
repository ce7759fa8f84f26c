#===============================================================================
#  dmenu_drun | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Shared data models used across the launcher backend.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

# display name -> target (executable file name OR desktop file name)
Cache = Dict[str, str]


def is_direct_entry(name: str, target: str) -> bool:
    """Direct entries map an executable's file name onto itself."""
    return name == target


@dataclass(frozen=True)
class LaunchPlan:
    """How a selection is going to be executed."""
    kind: str               # "direct" | "desktop" | "freeform"
    argv: Tuple[str, ...]   # program followed by its arguments
    detach: bool = False    # background the dispatcher before spawning


@dataclass(frozen=True)
class SelectorResult:
    """What the selector handed back once it exited."""
    selection: str              # trimmed, trailing .desktop removed
    returncode: Optional[int]   # None when the selector was killed by a signal
