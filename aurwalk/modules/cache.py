# aurwalk/modules/cache.py

"""
Cache sweeper for the recipe cache.

Every cache entry is a working copy named after the package it was cloned
for. Entries whose package is no longer installed are listed (optionally with
their total disk usage) and removed after a single confirmation.
"""

import os
import shutil
from typing import List, Optional

from aurwalk.modules import logger as _logger
from aurwalk.modules.config import config
from aurwalk.modules.utils import Utils


class CacheSweeper:
    def __init__(self, oracle, ui, cache_dir: Optional[str] = None,
                 show_disk_usage: Optional[bool] = None):
        self.oracle = oracle
        self.ui = ui
        self.cache_dir = cache_dir or config.getpath("general", "cache_dir", fallback="~/.cache/aurwalk")
        if show_disk_usage is None:
            show_disk_usage = config.getboolean("general", "show_disk_usage", fallback=True)
        self.show_disk_usage = show_disk_usage
        self.log = _logger.Logger("cache")

    def stale_entries(self) -> List[str]:
        cached = set(Utils.list_subdirs(self.cache_dir))
        installed = set(self.oracle.foreign_packages())
        return sorted(cached - installed)

    def sweep(self, assume_yes: bool = False) -> List[str]:
        """
        Remove cache entries of packages that are not installed.
        Returns the names removed.
        """
        stale = self.stale_entries()
        if not stale:
            self.ui.success("Cache is clean")
            return []

        total = None
        if self.show_disk_usage:
            total = Utils.format_size(sum(Utils.dir_size(os.path.join(self.cache_dir, n)) for n in stale))
        self.ui.show_cache_entries(stale, total)

        if not self.ui.confirm(f"Remove {len(stale)} cached recipe(s)?", assume_yes):
            self.log.info("Cache cleaning declined")
            return []

        removed = []
        for name in stale:
            path = os.path.join(self.cache_dir, name)
            shutil.rmtree(path)
            self.log.info(f"Removed {path}")
            removed.append(name)
        self.ui.success(f"Removed {len(removed)} cached recipe(s)")
        return removed
