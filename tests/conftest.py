import os

import pytest

from aurwalk.modules.config import config
from aurwalk.modules.recipe import RecipeError, RecipeInfo
from aurwalk.modules.resolver import Installer
from aurwalk.modules.sync import FetchError


@pytest.fixture(autouse=True)
def no_log_file(monkeypatch):
    monkeypatch.setitem(config.data["logging"], "log_to_file", False)
    monkeypatch.setitem(config.data["logging"], "log_to_console", False)


class FakeFetcher:
    def __init__(self, graph, events, cached=()):
        self.graph = graph
        self.events = events
        self.cached = set(cached)

    def path_for(self, name):
        return f"/cache/{name}"

    def has_cache(self, name):
        return name in self.cached

    def fetch(self, name):
        self.events.append(("fetch", name))
        if name not in self.graph:
            raise FetchError(f"Could not clone {name}")
        self.cached.add(name)
        return self.path_for(name)

    def clear(self, name):
        self.events.append(("clear", name))
        was_cached = name in self.cached
        self.cached.discard(name)
        return was_cached


class FakeParser:
    def __init__(self, graph, events):
        self.graph = graph
        self.events = events

    def parse(self, path):
        name = os.path.basename(path)
        self.events.append(("parse", name))
        if name not in self.graph:
            raise RecipeError(f"No .SRCINFO in {path}")
        node = self.graph[name]
        return RecipeInfo(list(node.get("pkgnames", [name])),
                          list(node.get("depends", [])),
                          list(node.get("makedepends", [])))


class FakeOracle:
    def __init__(self, official=(), foreign=None):
        self.official = set(official)
        self.foreign = dict(foreign or {})
        self.queried = []

    def is_repo_package(self, dep):
        self.queried.append(dep)
        return dep in self.official

    def foreign_packages(self):
        return dict(self.foreign)


class FakeBuilder:
    def __init__(self, events, failing=()):
        self.events = events
        self.failing = set(failing)

    def build(self, path, no_confirm=False):
        name = os.path.basename(path)
        self.events.append(("build", name))
        return name not in self.failing


class FakeUI:
    def __init__(self, confirm=True, choice=None):
        self.answer = confirm
        self.choice = choice
        self.messages = []
        self.questions = []
        self.offered = None
        self.upgrades = None
        self.cache_entries = None
        self.cache_total = None

    def info(self, message):
        self.messages.append(("info", message))

    def success(self, message):
        self.messages.append(("success", message))

    def warning(self, message):
        self.messages.append(("warning", message))

    def error(self, message):
        self.messages.append(("error", message))

    def confirm(self, question, assume_yes=False):
        self.questions.append(question)
        return True if assume_yes else self.answer

    def choose(self, records):
        self.offered = list(records)
        if self.choice is None:
            return None
        return records[self.choice]

    def show_upgrades(self, candidates):
        self.upgrades = list(candidates)

    def show_cache_entries(self, names, total_size=None):
        self.cache_entries = list(names)
        self.cache_total = total_size


class Harness:
    def __init__(self, graph, official=(), failing=(), cached=(), confirm=True):
        self.events = []
        self.fetcher = FakeFetcher(graph, self.events, cached)
        self.parser = FakeParser(graph, self.events)
        self.oracle = FakeOracle(official)
        self.builder = FakeBuilder(self.events, failing)
        self.ui = FakeUI(confirm=confirm)
        self.installer = Installer(self.fetcher, self.parser, self.oracle, self.builder, self.ui)

    def of(self, kind):
        return [name for event, name in self.events if event == kind]


@pytest.fixture
def harness():
    return Harness
