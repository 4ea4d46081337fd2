# aurwalk/modules/search.py
"""
Maps a requested name to an AUR package name.

An exact package (info lookup or a case-insensitive match among the search
results) is used directly. Otherwise the most popular results, up to
general.max_results, are offered for interactive selection. Skipped requests
return None and never abort the batch.
"""

from __future__ import annotations
from typing import Optional

from aurwalk.modules import logger as _logger
from aurwalk.modules.aur import exact_match
from aurwalk.modules.config import config


class PackageSelector:
    def __init__(self, aur, ui, max_results: Optional[int] = None):
        self.aur = aur
        self.ui = ui
        self.max_results = max_results or config.getint("general", "max_results", fallback=20)
        self.log = _logger.Logger("search")

    def resolve(self, term: str) -> Optional[str]:
        record = self.aur.info(term)
        if record is not None:
            return record.name

        results = self.aur.search(term)
        exact = exact_match(results, term)
        if exact is not None:
            return exact.name
        if not results:
            self.ui.warning(f"No AUR package matches '{term}'")
            self.log.warning(f"no results for {term}")
            return None

        results.sort(key=lambda r: r.popularity, reverse=True)
        shown = results[:self.max_results]
        self.ui.info(f"'{term}' is not an AUR package; {len(results)} results, showing {len(shown)}")
        chosen = self.ui.choose(shown)
        if chosen is None:
            self.ui.warning(f"Skipping '{term}'")
            return None
        self.log.info(f"{term} resolved to {chosen.name} by selection")
        return chosen.name
