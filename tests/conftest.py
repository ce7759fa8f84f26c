"""Shared fixtures: throwaway search-path and desktop directories."""

import os
from pathlib import Path

import pytest

from drun.config import LauncherConfig


def make_executable(folder: Path, name: str, mode: int = 0o755) -> Path:
    folder.mkdir(parents=True, exist_ok=True)
    p = folder / name
    p.write_text("#!/bin/sh\nexit 0\n")
    os.chmod(p, mode)
    return p


def make_desktop(folder: Path, file_name: str, name: str = None, extra: str = "") -> Path:
    folder.mkdir(parents=True, exist_ok=True)
    lines = ["[Desktop Entry]", "Type=Application"]
    if name is not None:
        lines.append(f"Name={name}")
    lines.append(f"Exec={file_name.split('.')[0]}")
    p = folder / file_name
    p.write_text("\n".join(lines) + "\n" + extra)
    return p


def set_mtime(path: Path, seconds: int) -> None:
    ns = seconds * 1_000_000_000
    os.utime(path, ns=(ns, ns))


@pytest.fixture
def layout(tmp_path: Path) -> LauncherConfig:
    """A config whose every directory lives under tmp_path."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    desktop = tmp_path / "home" / "Desktop"
    system_apps = tmp_path / "usr" / "share" / "applications"
    local_apps = tmp_path / "home" / ".local" / "share" / "applications"
    for d in (desktop, system_apps, local_apps):
        d.mkdir(parents=True)
    return LauncherConfig(
        path_string=str(bin_dir),
        path_dirs=(bin_dir,),
        desktop_dirs=(desktop, system_apps, local_apps),
        cache_dir=tmp_path / "home" / ".cache",
        histfile=tmp_path / "home" / ".dmenu_drun_histfile",
    )
