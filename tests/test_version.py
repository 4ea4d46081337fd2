"""Tests for version sanitizing and ordering."""

import pytest

from aurwalk.modules.version import NonStandardVersion, compare, compare_versions, sanitize


class TestSanitize:

    def test_strips_revision_tag_and_release(self):
        assert sanitize("1.2.3+git.r5.abcdef-2") == "1.2.3"

    def test_strips_vcs_snapshot_marker(self):
        assert sanitize("r20230101") == "20230101"

    def test_strips_leading_v(self):
        assert sanitize("v2.0.1-1") == "2.0.1"

    def test_non_digit_start_is_rejected(self):
        assert sanitize("abcv1.0") is None
        assert sanitize("latest") is None
        assert sanitize("") is None
        assert sanitize(None) is None

    def test_plain_release(self):
        assert sanitize("0.9.14-3") == "0.9.14"


class TestCompareVersions:

    def test_numeric_segments(self):
        assert compare_versions("1.10", "1.9") == 1
        assert compare_versions("1.9", "1.10") == -1

    def test_equal(self):
        assert compare_versions("1.2", "1.2") == 0

    def test_trailing_zero_ignored(self):
        assert compare_versions("1.2", "1.2.0") == 0
        assert compare_versions("1.2", "1.2.1") == -1

    def test_alphabetic_segments(self):
        assert compare_versions("1.0.b", "1.0.a") == 1
        assert compare_versions("1.0.1", "1.0.rc") == 1

    def test_snapshot_counter_is_numeric(self):
        assert compare_versions("2.0.r100.gabc", "2.0.r99.gdef") == 1
        assert compare_versions("2.0.r99.gdef", "2.0.r100.gabc") == -1

    def test_mixed_segment_split_into_runs(self):
        assert compare_versions("1.1rc1", "1.0") == 1
        assert compare_versions("1.1rc2", "1.1rc10") == -1

    def test_epoch_decides_first(self):
        assert compare_versions("1:1.0", "2.5") == 1
        assert compare_versions("2.5", "1:1.0") == -1
        assert compare_versions("1:1.0", "1:1.0.0") == 0


class TestCompare:

    def test_sanitizes_first(self):
        assert compare("1.1-1", "1.0-3") == 1
        assert compare("v1.0", "1.0-2") == 0

    def test_non_standard_raises(self):
        with pytest.raises(NonStandardVersion):
            compare("latest", "1.0")

    def test_release_tags_with_snapshot_counter(self):
        assert compare("2.0.r100.gabc-1", "2.0.r99.gdef-1") == 1
        assert compare("1.1rc1-1", "1.0-1") == 1
        assert compare("1:0.9-1", "1.0-1") == 1
