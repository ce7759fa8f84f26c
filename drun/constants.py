#===============================================================================
#  dmenu_drun | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Central place for file names, separators and external program names.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

PROG_NAME = "dmenu_drun"
CACHE_FILE_NAME = ".dmenu_drun_cache"
HISTFILE_NAME = ".dmenu_drun_histfile"

# --- On-disk cache format ---
FIELD_SEP = "\0"
LINE_SEP = "\n"

# --- Desktop entries ---
DESKTOP_SUFFIX = ".desktop"
DESKTOP_NAME_KEY = "Name="
SYSTEM_APPLICATIONS_DIR = "/usr/share/applications"

# --- External programs ---
SELECTOR_CMD = "dmenu"
SELECTOR_HISTORY_FLAG = "-H"
DESKTOP_LAUNCHER = "gtk-launch"

# Exit status when neither the launched target nor the selector reported one
FALLBACK_EXIT_CODE = -1
