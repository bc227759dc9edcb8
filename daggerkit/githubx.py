"""Access to GitHub release information."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from dataclasses import dataclass
from urllib.parse import quote

_API_URL = "https://api.github.com"
_TIMEOUT_SECONDS = 30


@dataclass(frozen=True)
class ClientConfig:
    """Repository owner and name, and an optional access token."""

    owner: str
    repo: str
    token: str = ""


class GHClient:
    """Client for reading release data of one GitHub repository."""

    def __init__(self, config: ClientConfig) -> None:
        self.config = config

    def _latest_release_request(self) -> urllib.request.Request:
        url = (
            f"{_API_URL}/repos/{quote(self.config.owner, safe='')}"
            f"/{quote(self.config.repo, safe='')}/releases/latest"
        )
        headers = {"Accept": "application/vnd.github+json", "User-Agent": "daggerkit"}
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"
        return urllib.request.Request(url, headers=headers)

    def fetch_latest_release(self) -> str:
        """Return the tag name of the repository's latest release.

        Raises ``RuntimeError`` when the release cannot be fetched.
        """
        request = self._latest_release_request()
        try:
            with urllib.request.urlopen(request, timeout=_TIMEOUT_SECONDS) as response:
                payload = json.load(response)
        except (urllib.error.URLError, OSError, ValueError) as exc:
            raise RuntimeError(f"failed to fetch the latest release: {exc}") from exc

        if not isinstance(payload, dict):
            return ""
        tag = payload.get("tag_name")
        return tag if isinstance(tag, str) else ""