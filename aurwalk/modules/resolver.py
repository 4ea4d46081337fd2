# aurwalk/modules/resolver.py
"""
Recursive AUR dependency resolution and installation.

Installer.process() walks the dependency graph depth first: every AUR
dependency is fetched and built before its dependent reaches the build step,
so builds happen in dependency order. The InstallSession carries the state
shared by all root requests of one invocation:

- completed: packages already built (or fetched in download-only mode)
- stack:     the current recursion path, used to detect cycles
"""

from __future__ import annotations
from collections import namedtuple
from typing import Dict, Iterable, List

from aurwalk.modules import logger as _logger

CONSTRAINT_CHARS = "<>="

Options = namedtuple("Options", ["force", "download_only", "no_confirm"],
                     defaults=(False, False, False))


class Outcome:
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


class DependencyCycleError(Exception):
    def __init__(self, path: List[str]):
        self.path = list(path)
        super().__init__("Dependency cycle detected: " + " -> ".join(self.path))


def strip_constraint(dep: str) -> str:
    """'foo>=1.2' -> 'foo'"""
    for idx, ch in enumerate(dep):
        if ch in CONSTRAINT_CHARS:
            return dep[:idx].strip()
    return dep.strip()


def dependency_names(deps: Iterable[str]) -> List[str]:
    """Bare names in first-seen order, without duplicates."""
    names: List[str] = []
    for dep in deps:
        name = strip_constraint(dep)
        if name and name not in names:
            names.append(name)
    return names


class InstallSession:
    def __init__(self):
        self.completed = set()
        self.stack: List[str] = []

    def reset(self):
        self.completed.clear()

    def cycle_path(self, name: str) -> List[str]:
        return self.stack + [name]


class Installer:
    def __init__(self, fetcher, parser, oracle, builder, ui):
        self.fetcher = fetcher
        self.parser = parser
        self.oracle = oracle
        self.builder = builder
        self.ui = ui
        self.log = _logger.Logger("resolver")

    def install(self, names: Iterable[str], session: InstallSession, options: Options) -> Dict[str, str]:
        """
        Process every root request with one shared session.
        Fatal errors (cycle, fetch, parse) propagate and abort the rest of the batch.
        """
        if options.force:
            session.reset()
        results = {}
        for name in names:
            results[name] = self.process(name, session, options)
        return results

    def process(self, name: str, session: InstallSession, options: Options) -> str:
        if name in session.completed:
            self.log.debug(f"{name} already handled in this session")
            return Outcome.SKIPPED
        if name in session.stack:
            raise DependencyCycleError(session.cycle_path(name))

        is_root = not session.stack
        session.stack.append(name)
        try:
            if options.force and is_root:
                self.fetcher.clear(name)
            if not self.fetcher.has_cache(name):
                self.ui.info(f"Fetching {name}")
                self.fetcher.fetch(name)
            path = self.fetcher.path_for(name)
            info = self.parser.parse(path)

            for dep in dependency_names(info.all_dependencies()):
                if self.oracle.is_repo_package(dep):
                    continue
                if dep in session.completed:
                    continue
                self.log.info(f"{name} requires AUR package {dep}")
                self.process(dep, session, options)

            if options.download_only:
                session.completed.add(name)
                self.ui.info(f"{name} downloaded to {path}")
                return Outcome.SKIPPED

            if not self.ui.confirm(f"Build and install {name}?", options.no_confirm):
                self.log.info(f"User declined building {name}")
                return Outcome.SKIPPED

            if self.builder.build(path, options.no_confirm):
                session.completed.add(name)
                self.log.success(f"{name} installed")
                self.ui.success(f"{name} installed")
                extra = [p for p in info.pkgnames if p != name]
                if extra:
                    self.ui.info(f"{name} also built: {', '.join(extra)}")
                return Outcome.SUCCESS

            self.log.error(f"Build of {name} failed")
            self.ui.error(f"Build of {name} failed")
            return Outcome.FAILED
        finally:
            session.stack.pop()
