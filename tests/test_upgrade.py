"""Tests for the upgrade scanner."""

from aurwalk.modules.aur import PackageRecord
from aurwalk.modules.resolver import InstallSession, Options, Outcome
from aurwalk.modules.upgrade import UpgradeScanner


class FakeAur:
    def __init__(self, versions):
        self.versions = versions
        self.looked_up = []

    def info(self, name):
        self.looked_up.append(name)
        if name not in self.versions:
            return None
        return PackageRecord(name, version=self.versions[name])


def make_scanner(h, installed, remote):
    h.oracle.foreign = installed
    return UpgradeScanner(FakeAur(remote), h.oracle, h.fetcher, h.installer, h.ui)


class TestScan:

    def test_finds_outdated_packages(self, harness):
        h = harness({})
        scanner = make_scanner(h, {"a": "1.0-1", "b": "2.0-1"}, {"a": "1.1-1", "b": "2.0-1"})
        assert scanner.scan() == [("a", "1.0-1", "1.1-1")]

    def test_missing_from_index_is_reported(self, harness):
        h = harness({})
        scanner = make_scanner(h, {"gone": "1.0-1"}, {})

        assert scanner.scan() == []
        assert ("warning", "gone not found in the AUR, skipping") in h.ui.messages

    def test_non_standard_version_is_skipped(self, harness):
        h = harness({})
        scanner = make_scanner(h, {"weird": "latest"}, {"weird": "2.0-1"})

        assert scanner.scan() == []
        assert any(kind == "warning" and "weird" in msg for kind, msg in h.ui.messages)

    def test_older_remote_is_ignored(self, harness):
        h = harness({})
        scanner = make_scanner(h, {"a": "3.0-1"}, {"a": "2.9-1"})
        assert scanner.scan() == []


class TestUpgrade:

    def test_refetches_and_processes_candidates(self, harness):
        h = harness({"a": {}, "c": {}}, cached=["a", "c"])
        scanner = make_scanner(h, {"a": "1.0-1", "c": "1.0-1"}, {"a": "1.1-1", "c": "1.2-1"})
        session = InstallSession()

        results = scanner.upgrade(session, Options())

        assert results == {"a": Outcome.SUCCESS, "c": Outcome.SUCCESS}
        assert h.events.index(("clear", "a")) < h.events.index(("fetch", "a"))
        assert h.of("build") == ["a", "c"]

    def test_clears_whole_completed_set(self, harness):
        h = harness({"a": {}})
        scanner = make_scanner(h, {"a": "1.0-1"}, {"a": "1.1-1"})
        session = InstallSession()
        session.completed.update({"a", "unrelated"})

        scanner.upgrade(session, Options())
        assert session.completed == {"a"}

    def test_declined_batch_does_nothing(self, harness):
        h = harness({"a": {}}, confirm=False)
        scanner = make_scanner(h, {"a": "1.0-1"}, {"a": "1.1-1"})

        assert scanner.upgrade(InstallSession(), Options()) == {}
        assert h.events == []
        assert h.ui.upgrades == [("a", "1.0-1", "1.1-1")]

    def test_nothing_to_upgrade(self, harness):
        h = harness({})
        scanner = make_scanner(h, {"a": "1.0-1"}, {"a": "1.0-1"})

        assert scanner.upgrade(InstallSession(), Options()) == {}
        assert h.ui.questions == []
