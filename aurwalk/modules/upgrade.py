# aurwalk/modules/upgrade.py
"""
upgrade.py - upgrade installed AUR packages.

Principal behaviors:
 - Lists foreign installed packages (pacman -Qm) with their local versions.
 - Looks each one up in the AUR; packages missing there (renamed or deleted
   upstream) are reported and skipped.
 - Sanitizes and compares versions; non-standard versions are reported and
   left out of the automatic decision.
 - One confirmation for the whole batch, then every candidate is refetched
   and handed to the Installer with a single shared session.
"""

from __future__ import annotations
from typing import Dict, List, Tuple

from aurwalk.modules import logger as _logger
from aurwalk.modules.resolver import InstallSession, Options
from aurwalk.modules.version import NonStandardVersion, compare


class UpgradeScanner:
    def __init__(self, aur, oracle, fetcher, installer, ui):
        self.aur = aur
        self.oracle = oracle
        self.fetcher = fetcher
        self.installer = installer
        self.ui = ui
        self.log = _logger.Logger("upgrade")

    def scan(self) -> List[Tuple[str, str, str]]:
        """Return [(name, installed version, AUR version)] for outdated packages."""
        installed = self.oracle.foreign_packages()
        self.log.info(f"Checking {len(installed)} foreign packages")
        candidates = []
        for name in sorted(installed):
            local = installed[name]
            record = self.aur.info(name)
            if record is None:
                self.ui.warning(f"{name} not found in the AUR, skipping")
                self.log.warning(f"{name} not found in the AUR")
                continue
            try:
                res = compare(record.version, local)
            except NonStandardVersion:
                self.ui.warning(f"{name}: cannot compare {local} with {record.version}, skipping")
                self.log.warning(f"{name}: non-standard versions {local} / {record.version}")
                continue
            if res > 0:
                self.log.debug(f"{name}: {local} -> {record.version}")
                candidates.append((name, local, record.version))
        return candidates

    def upgrade(self, session: InstallSession, options: Options) -> Dict[str, str]:
        candidates = self.scan()
        if not candidates:
            self.ui.success("All AUR packages are up to date")
            return {}

        self.ui.show_upgrades(candidates)
        if not self.ui.confirm(f"Upgrade {len(candidates)} package(s)?", options.no_confirm):
            self.log.info("Upgrade declined")
            return {}

        # the whole completed set is dropped, not only the candidates
        session.reset()
        results = {}
        for name, _, _ in candidates:
            self.fetcher.clear(name)
            results[name] = self.installer.process(name, session, options)
        return results
