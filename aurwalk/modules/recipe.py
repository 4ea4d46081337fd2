# aurwalk/modules/recipe.py
"""
Recipe parser - reads the package metadata of a cached AUR working copy.

The .SRCINFO file shipped with every AUR repository is the source of truth.
When only a PKGBUILD is present, the metadata is generated with
`makepkg --printsrcinfo`; the PKGBUILD itself is never sourced here.
"""

from __future__ import annotations
import os
import platform
import subprocess
from typing import List, Optional

from aurwalk.modules import logger as _logger

SRCINFO = ".SRCINFO"
PKGBUILD = "PKGBUILD"


class RecipeError(Exception):
    pass


class RecipeInfo:
    def __init__(self, pkgnames: List[str], depends: List[str], makedepends: List[str],
                 pkgbase: Optional[str] = None, version: Optional[str] = None):
        self.pkgnames = pkgnames
        self.depends = depends
        self.makedepends = makedepends
        self.pkgbase = pkgbase
        self.version = version

    def all_dependencies(self) -> List[str]:
        return self.depends + self.makedepends

    def __repr__(self) -> str:
        return f"RecipeInfo(pkgnames={self.pkgnames!r}, depends={self.depends!r}, makedepends={self.makedepends!r})"


def parse_srcinfo(text: str, arch: Optional[str] = None) -> RecipeInfo:
    """
    Parse the `key = value` lines of a .SRCINFO document.
    Dependencies of the pkgbase and of every pkgname section are merged;
    architecture specific entries are kept only for `arch`.
    """
    arch = arch or platform.machine()
    pkgnames: List[str] = []
    depends: List[str] = []
    makedepends: List[str] = []
    pkgbase = None
    fields = {}

    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = (part.strip() for part in line.split("=", 1))
        if not value:
            continue
        if key == "pkgbase":
            pkgbase = value
        elif key == "pkgname":
            pkgnames.append(value)
        elif key in ("depends", f"depends_{arch}"):
            depends.append(value)
        elif key in ("makedepends", f"makedepends_{arch}"):
            makedepends.append(value)
        else:
            fields.setdefault(key, value)

    if not pkgnames:
        raise RecipeError("no pkgname entry found")

    version = None
    if "pkgver" in fields:
        version = fields["pkgver"]
        if "pkgrel" in fields:
            version += "-" + fields["pkgrel"]
        if "epoch" in fields:
            version = fields["epoch"] + ":" + version

    return RecipeInfo(pkgnames, depends, makedepends, pkgbase=pkgbase, version=version)


class RecipeParser:
    def __init__(self, arch: Optional[str] = None):
        self.arch = arch
        self.log = _logger.Logger("recipe")

    def _generate_srcinfo(self, path: str) -> str:
        self.log.debug(f"Running makepkg --printsrcinfo in {path}")
        try:
            res = subprocess.run(["makepkg", "--printsrcinfo"], cwd=path,
                                 stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)
        except OSError as e:
            raise RecipeError(f"Could not run makepkg in {path}: {e}")
        if res.returncode != 0:
            raise RecipeError(f"makepkg --printsrcinfo failed in {path}: {res.stderr.strip()}")
        return res.stdout

    def parse(self, path: str) -> RecipeInfo:
        """Return the RecipeInfo of the working copy at path; raises RecipeError when there is none."""
        srcinfo = os.path.join(path, SRCINFO)
        if os.path.isfile(srcinfo):
            with open(srcinfo, "r", encoding="utf-8") as f:
                text = f.read()
        elif os.path.isfile(os.path.join(path, PKGBUILD)):
            text = self._generate_srcinfo(path)
        else:
            raise RecipeError(f"No {SRCINFO} or {PKGBUILD} in {path}")

        try:
            info = parse_srcinfo(text, arch=self.arch)
        except RecipeError as e:
            raise RecipeError(f"Unparseable recipe in {path}: {e}")
        self.log.info(f"Recipe loaded from {path}: {', '.join(info.pkgnames)}")
        return info
