# aurwalk/modules/build.py
"""
Build executor: runs makepkg inside a cached working copy.

makepkg -s installs missing official-repo dependencies through pacman and
-i installs the resulting package(s). The exit status decides success.
"""

from __future__ import annotations
import os
import subprocess
from typing import List, Optional

from aurwalk.modules import logger as _logger


class BuildExecutor:
    def __init__(self, makepkg: str = "makepkg", extra_args: Optional[List[str]] = None):
        self.makepkg = makepkg
        self.extra_args = extra_args or []
        self.log = _logger.Logger("build")

    def command(self, no_confirm: bool = False) -> List[str]:
        cmd = [self.makepkg, "-si"] + self.extra_args
        if no_confirm:
            cmd.append("--noconfirm")
        return cmd

    def build(self, path: str, no_confirm: bool = False) -> bool:
        if not os.path.isdir(path):
            self.log.error(f"Build directory missing: {path}")
            return False
        cmd = self.command(no_confirm)
        self.log.info(f"Running {' '.join(cmd)} in {path}")
        try:
            res = subprocess.run(cmd, cwd=path)
        except OSError as e:
            self.log.error(f"Could not run {self.makepkg}: {e}")
            return False
        if res.returncode != 0:
            self.log.error(f"{' '.join(cmd)} exited with {res.returncode} in {path}")
            return False
        self.log.success(f"Build finished in {path}")
        return True
