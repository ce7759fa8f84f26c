#===============================================================================
#  dmenu_drun | config.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Resolves search-path, desktop, cache and history locations once at startup.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from .constants import (
    CACHE_FILE_NAME,
    DESKTOP_LAUNCHER,
    HISTFILE_NAME,
    SELECTOR_CMD,
    SYSTEM_APPLICATIONS_DIR,
)


def split_search_path(path_string: str) -> Tuple[Path, ...]:
    """Split a colon-separated PATH value, keeping order and dropping empty segments."""
    return tuple(Path(p) for p in path_string.split(":") if p)


def _xdg_dir(environ: Mapping[str, str], var: str, home: Path, fallback: str) -> Path:
    value = environ.get(var, "")
    # XDG base dir spec: relative values are invalid and must be ignored
    if value and Path(value).is_absolute():
        return Path(value)
    return home / fallback


@dataclass(frozen=True)
class LauncherConfig:
    """Everything the pipeline needs to know about the environment.

    Built once by from_environ() and handed to each component explicitly.
    """
    path_string: str
    path_dirs: Tuple[Path, ...]
    desktop_dirs: Tuple[Path, ...]
    cache_dir: Path
    histfile: Path
    selector_cmd: str = SELECTOR_CMD
    desktop_launcher: str = DESKTOP_LAUNCHER

    @property
    def cache_path(self) -> Path:
        return self.cache_dir / CACHE_FILE_NAME

    @property
    def watched_dirs(self) -> Tuple[Path, ...]:
        """Directories whose modification time invalidates the cache."""
        return self.path_dirs + self.desktop_dirs

    @classmethod
    def from_environ(cls, environ: Mapping[str, str], home: Optional[Path] = None) -> "LauncherConfig":
        """Resolve locations from an environment mapping.

        Resolution:
          - search path   : $PATH (empty when unset)
          - home          : $HOME, otherwise the account's home directory
          - desktop dirs  : ~/Desktop, /usr/share/applications, <data-local>/applications
                            (later directories win on name collisions)
          - data-local    : $XDG_DATA_HOME or ~/.local/share
          - cache dir     : $XDG_CACHE_HOME or ~/.cache
          - history file  : $HOME/.dmenu_drun_histfile
        """
        path_string = environ.get("PATH", "")
        raw_home = environ.get("HOME", "")
        if home is None:
            home = Path(raw_home) if raw_home else Path.home()

        data_local = _xdg_dir(environ, "XDG_DATA_HOME", home, ".local/share")
        cache_dir = _xdg_dir(environ, "XDG_CACHE_HOME", home, ".cache")

        return cls(
            path_string=path_string,
            path_dirs=split_search_path(path_string),
            desktop_dirs=(
                home / "Desktop",
                Path(SYSTEM_APPLICATIONS_DIR),
                data_local / "applications",
            ),
            cache_dir=cache_dir,
            # an unset HOME leaves the history file relative to the cwd
            histfile=Path(raw_home) / HISTFILE_NAME,
        )
