# aurwalk/modules/cli.py
"""
Command line front end.

Usage examples:
  aurwalk yay                 # resolve, fetch and build yay and its AUR deps
  aurwalk -d foo bar          # fetch foo and bar (and their AUR deps) only
  aurwalk -f -y foo           # refetch foo, no prompts
  aurwalk -u                  # upgrade outdated AUR packages
  aurwalk -c                  # remove cached recipes of uninstalled packages

Exit status: 0 on completion (individual build failures included),
1 on usage errors and on fatal errors (dependency cycle, fetch, recipe,
AUR or pacman query failures).
"""

from __future__ import annotations
import argparse
import sys
import traceback
from typing import List, Optional

from aurwalk.modules import logger as _logger
from aurwalk.modules.aur import AurClient, AurError
from aurwalk.modules.build import BuildExecutor
from aurwalk.modules.cache import CacheSweeper
from aurwalk.modules.config import ConfigError, config
from aurwalk.modules.pacman import PacmanError, PacmanOracle
from aurwalk.modules.recipe import RecipeError, RecipeParser
from aurwalk.modules.resolver import DependencyCycleError, Installer, InstallSession, Options, Outcome
from aurwalk.modules.search import PackageSelector
from aurwalk.modules.sync import FetchError, SourceFetcher
from aurwalk.modules.ui import ConsoleUI, make_console
from aurwalk.modules.upgrade import UpgradeScanner

FATAL_ERRORS = (DependencyCycleError, AurError, FetchError, RecipeError, PacmanError, ConfigError)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="aurwalk", description="Resolve, fetch and build AUR packages")
    ap.add_argument("-f", "--force", action="store_true",
                    help="Discard cached recipes of the requested packages before processing")
    ap.add_argument("-d", "--download-only", action="store_true",
                    help="Fetch recipes and resolve dependencies without building")
    ap.add_argument("-y", "--yes", "--noconfirm", dest="no_confirm", action="store_true",
                    help="Answer yes to every confirmation")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("-u", "--upgrade", action="store_true", help="Upgrade installed AUR packages")
    mode.add_argument("-c", "--clean-cache", action="store_true",
                      help="Remove cached recipes of packages that are not installed")
    ap.add_argument("--config", help="Path to an alternative config.yaml")
    ap.add_argument("--no-color", action="store_true", help="Disable color output")
    ap.add_argument("packages", nargs="*", help="Package names to install")
    return ap


class App:
    def __init__(self, ui: ConsoleUI):
        self.ui = ui
        self.aur = AurClient()
        self.fetcher = SourceFetcher()
        self.oracle = PacmanOracle()
        self.installer = Installer(self.fetcher, RecipeParser(), self.oracle, BuildExecutor(), ui)
        self.session = InstallSession()

    def install(self, terms: List[str], options: Options) -> int:
        selector = PackageSelector(self.aur, self.ui)
        names = []
        for term in terms:
            name = selector.resolve(term)
            if name is not None and name not in names:
                names.append(name)
        if not names:
            self.ui.warning("Nothing to do")
            return 0
        results = self.installer.install(names, self.session, options)
        self.report(results)
        return 0

    def upgrade(self, options: Options) -> int:
        scanner = UpgradeScanner(self.aur, self.oracle, self.fetcher, self.installer, self.ui)
        self.report(scanner.upgrade(self.session, options))
        return 0

    def clean_cache(self, options: Options) -> int:
        CacheSweeper(self.oracle, self.ui).sweep(assume_yes=options.no_confirm)
        return 0

    def report(self, results):
        failed = [name for name, outcome in results.items() if outcome == Outcome.FAILED]
        if failed:
            self.ui.error(f"Failed to build: {', '.join(failed)}")


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_argparser()
    args = parser.parse_args(argv)
    if not args.packages and not args.upgrade and not args.clean_cache:
        parser.print_usage()
        return 1

    ui = ConsoleUI(make_console(args.no_color))
    options = Options(force=args.force, download_only=args.download_only, no_confirm=args.no_confirm)
    log = None
    try:
        if args.config:
            config.load_file(args.config)
        else:
            config.ensure_loaded()
        log = _logger.Logger("cli")
        app = App(ui)
        if args.clean_cache:
            return app.clean_cache(options)
        if args.upgrade:
            return app.upgrade(options)
        return app.install(args.packages, options)
    except FATAL_ERRORS as e:
        ui.error(str(e))
        if log:
            log.error(f"{type(e).__name__}: {e}")
            log.debug(traceback.format_exc())
        return 1
    except KeyboardInterrupt:
        ui.error("Interrupted")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
