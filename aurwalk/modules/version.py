# aurwalk/modules/version.py
"""
Version utilities used by the upgrade scanner.

AUR versions look like ``[epoch:]pkgver-pkgrel`` and VCS packages often carry
``+git.r123.abcdef`` or ``r1234.abcdef`` style snapshot markers. ``sanitize``
reduces them to a plain dotted version; anything that does not start with a
digit afterwards is considered non-standard and cannot be ordered.
"""

from __future__ import annotations
import re
from typing import List, Optional, Tuple, Union

_RELEASE_SUFFIX = re.compile(r"-\d+$")


class NonStandardVersion(ValueError):
    pass


def sanitize(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    s = str(raw).strip()
    s = s.split("+", 1)[0]
    if s.startswith("r"):
        s = s[1:]
    if s.startswith("v"):
        s = s[1:]
    s = _RELEASE_SUFFIX.sub("", s)
    if not s or not s[0].isdigit():
        return None
    return s


_TOKEN = re.compile(r"\d+|[a-zA-Z]+")


def split_epoch(v: str) -> Tuple[int, str]:
    """'1:2.0' -> (1, '2.0'); no epoch means 0."""
    epoch, sep, rest = v.partition(":")
    if sep and epoch.isdigit():
        return int(epoch), rest
    return 0, v


def version_key(v: str) -> List[Union[int, str]]:
    """
    Digit and letter runs between separators: '2.0.r100.gabc' -> [2, 0, 'r', 100, 'gabc'],
    '1.1rc1' -> [1, 1, 'rc', 1].
    """
    key: List[Union[int, str]] = []
    for part in re.split(r"[.\-_+]", v):
        for tok in _TOKEN.findall(part):
            key.append(int(tok) if tok.isdigit() else tok.lower())
    return key


def _compare_segment(x, y) -> int:
    if type(x) == type(y):
        return (x > y) - (x < y)
    # numeric segments sort above alphabetic ones
    return 1 if isinstance(x, int) else -1


def _is_empty(segment) -> bool:
    return segment == 0 or segment == ""


def compare_versions(a: str, b: str) -> int:
    """
    Compare two sanitized versions; returns -1, 0 or 1.
    The epoch decides first. Trailing zero segments are ignored, so "1.2" == "1.2.0".
    """
    epoch_a, a = split_epoch(a)
    epoch_b, b = split_epoch(b)
    if epoch_a != epoch_b:
        return 1 if epoch_a > epoch_b else -1
    ka = version_key(a)
    kb = version_key(b)
    for x, y in zip(ka, kb):
        res = _compare_segment(x, y)
        if res:
            return res
    if len(ka) < len(kb):
        return 0 if all(_is_empty(r) for r in kb[len(ka):]) else -1
    if len(ka) > len(kb):
        return 0 if all(_is_empty(r) for r in ka[len(kb):]) else 1
    return 0


def compare(raw_a: str, raw_b: str) -> int:
    """Sanitize both sides then compare; raises NonStandardVersion when either cannot be ordered."""
    a = sanitize(raw_a)
    b = sanitize(raw_b)
    if a is None or b is None:
        raise NonStandardVersion(f"cannot compare '{raw_a}' with '{raw_b}'")
    return compare_versions(a, b)
