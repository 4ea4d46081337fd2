# aurwalk/modules/aur.py
"""
Client for the AUR RPC interface (v5).

- search(term)  -> list of PackageRecord (may be empty)
- info(name)    -> PackageRecord or None when the package does not exist
- exact_match() -> case-insensitive name lookup inside a result list

Transport failures and RPC error replies raise AurError; callers treat them
as fatal for the invocation.
"""

from __future__ import annotations
import json
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Dict, List, Optional

from aurwalk.modules import logger as _logger
from aurwalk.modules.config import config

RPC_VERSION = 5


class AurError(Exception):
    pass


class PackageRecord:
    def __init__(self, name: str, description: str = "", version: str = "",
                 popularity: float = 0.0, votes: int = 0):
        self.name = name
        self.description = description
        self.version = version
        self.popularity = popularity
        self.votes = votes

    @classmethod
    def from_rpc(cls, data: Dict[str, Any]) -> "PackageRecord":
        return cls(
            name=data["Name"],
            description=data.get("Description") or "",
            version=data.get("Version") or "",
            popularity=float(data.get("Popularity") or 0.0),
            votes=int(data.get("NumVotes") or 0),
        )

    def __repr__(self) -> str:
        return f"PackageRecord({self.name!r}, {self.version!r})"


def exact_match(records: List[PackageRecord], name: str) -> Optional[PackageRecord]:
    wanted = name.lower()
    for rec in records:
        if rec.name.lower() == wanted:
            return rec
    return None


class AurClient:
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None):
        self.base_url = (base_url or config.get("aur", "url", fallback="https://aur.archlinux.org")).rstrip("/")
        self.timeout = timeout or config.getint("aur", "timeout", fallback=15)
        self.log = _logger.Logger("aur")

    def _query(self, params: List[tuple]) -> List[Dict[str, Any]]:
        url = f"{self.base_url}/rpc/?" + urllib.parse.urlencode([("v", RPC_VERSION)] + params)
        self.log.debug(f"GET {url}")
        try:
            with urllib.request.urlopen(url, timeout=self.timeout) as resp:
                payload = json.loads(resp.read().decode("utf-8"))
        except (urllib.error.URLError, OSError) as e:
            raise AurError(f"AUR request failed: {e}")
        except ValueError as e:
            raise AurError(f"AUR returned invalid JSON: {e}")
        if payload.get("type") == "error":
            raise AurError(f"AUR error: {payload.get('error', 'unknown error')}")
        return payload.get("results") or []

    def search(self, term: str) -> List[PackageRecord]:
        results = [PackageRecord.from_rpc(r) for r in self._query([("type", "search"), ("arg", term)])]
        self.log.info(f"search '{term}': {len(results)} results")
        return results

    def info(self, name: str) -> Optional[PackageRecord]:
        results = self._query([("type", "info"), ("arg[]", name)])
        if not results:
            self.log.debug(f"{name} not found in the AUR")
            return None
        return PackageRecord.from_rpc(results[0])
