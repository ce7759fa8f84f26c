#===============================================================================
#  dmenu_drun  |  dmenu Application Launcher
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Launcher backend for dmenu. Discovers executables on $PATH and desktop
#  applications, keeps a disk cache of "display name -> target", shows the
#  names in dmenu and runs whatever was picked or typed.
#  Supports:
#    - Executables in $PATH (run in the foreground)
#    - Desktop entries from ~/Desktop, /usr/share/applications and
#      ~/.local/share/applications (started through gtk-launch, detached)
#    - Free-typed command lines
#
#  Cache
#  -----
#    $XDG_CACHE_HOME/.dmenu_drun_cache   -> rebuilt whenever a watched
#                                           directory is newer than the file
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Permission Notice (Personal/Internal Use)
#  -----------------------------------------
#  You may use, copy, and modify this software for personal or internal use.
#  Redistribution or public release should include this header and credit the
#  author. If you plan to open-source this project, consider replacing this
#  section with an OSI-approved license (e.g., MIT) for clarity.
#===============================================================================

import sys

from drun.app import main


if __name__ == "__main__":
    sys.exit(main())
