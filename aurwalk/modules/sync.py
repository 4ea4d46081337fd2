# aurwalk/modules/sync.py
"""
sync.py - materializes AUR build recipes in the local cache.

- Each cache entry is a git working copy at <cache_dir>/<pkgname>.
- Clone only when the entry is absent; existing entries are reused as-is.
- clear() removes an entry so the next fetch starts from a fresh clone.
"""

import os
import shutil
from typing import Optional

from git import Repo, GitCommandError

from aurwalk.modules import logger as _logger
from aurwalk.modules.config import config
from aurwalk.modules.utils import Utils


RECIPE_FILES = (".SRCINFO", "PKGBUILD")


class FetchError(Exception):
    pass


class SourceFetcher:
    def __init__(self, cache_dir: Optional[str] = None, aur_url: Optional[str] = None):
        self.cache_dir = cache_dir or config.getpath("general", "cache_dir", fallback="~/.cache/aurwalk")
        self.aur_url = (aur_url or config.get("aur", "url", fallback="https://aur.archlinux.org")).rstrip("/")
        self.log = _logger.Logger("sync")

    def path_for(self, name: str) -> str:
        return os.path.join(self.cache_dir, name)

    def clone_url(self, name: str) -> str:
        return f"{self.aur_url}/{name}.git"

    def has_cache(self, name: str) -> bool:
        return os.path.isdir(self.path_for(name))

    def fetch(self, name: str) -> str:
        """Clone the recipe repository for name unless it is already cached; returns its path."""
        path = self.path_for(name)
        if os.path.isdir(path):
            self.log.debug(f"{name} already cached at {path}")
            return path
        Utils.ensure_dir(self.cache_dir)
        url = self.clone_url(name)
        self.log.info(f"Cloning {url} into {path}")
        try:
            Repo.clone_from(url, path)
        except GitCommandError as e:
            if os.path.isdir(path):
                shutil.rmtree(path, ignore_errors=True)
            raise FetchError(f"Could not clone {name}: {e}")
        if not any(os.path.isfile(os.path.join(path, f)) for f in RECIPE_FILES):
            # the AUR answers unknown names with an empty repository
            shutil.rmtree(path, ignore_errors=True)
            raise FetchError(f"{name} has no build recipe in the AUR")
        return path

    def clear(self, name: str) -> bool:
        path = self.path_for(name)
        if not os.path.isdir(path):
            return False
        shutil.rmtree(path)
        self.log.info(f"Removed cache entry {path}")
        return True
