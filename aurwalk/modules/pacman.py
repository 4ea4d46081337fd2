# aurwalk/modules/pacman.py
"""
Queries against the system package manager.

- is_repo_package(dep): satisfiable from the official sync repositories
  (`pacman -Sp` also resolves providers such as "sh").
- foreign_packages(): installed packages not found in any sync repository
  (`pacman -Qm`), i.e. the ones this tool manages.
"""

from __future__ import annotations
import subprocess
from typing import Dict, List

from aurwalk.modules import logger as _logger


class PacmanError(Exception):
    pass


class PacmanOracle:
    def __init__(self, pacman: str = "pacman"):
        self.pacman = pacman
        self.log = _logger.Logger("pacman")
        self._repo_cache: Dict[str, bool] = {}

    def _run(self, args: List[str]) -> subprocess.CompletedProcess:
        cmd = [self.pacman] + args
        self.log.debug(f"Running: {' '.join(cmd)}")
        try:
            return subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)
        except OSError as e:
            raise PacmanError(f"Could not run {self.pacman}: {e}")

    def is_repo_package(self, dep: str) -> bool:
        if dep not in self._repo_cache:
            res = self._run(["-Sp", "--print-format", "%n", dep])
            self._repo_cache[dep] = res.returncode == 0
            self.log.debug(f"{dep}: {'repo' if self._repo_cache[dep] else 'not in repos'}")
        return self._repo_cache[dep]

    def foreign_packages(self) -> Dict[str, str]:
        """Return {name: installed version} of the foreign packages."""
        res = self._run(["-Qm"])
        if res.returncode != 0:
            # pacman exits 1 with no output when nothing matches
            if not res.stdout.strip() and not res.stderr.strip():
                return {}
            raise PacmanError(f"pacman -Qm failed: {res.stderr.strip()}")
        installed = {}
        for line in res.stdout.splitlines():
            parts = line.split()
            if len(parts) >= 2:
                installed[parts[0]] = parts[1]
        return installed
