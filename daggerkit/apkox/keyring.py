"""Parsing and validation of apk keyring specifications.

A keyring is given either as ``path=url`` or as a bare ``url``. The path,
when present, must lie under ``/etc/apk/keys/``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

KEYRING_PATH_PREFIX = "/etc/apk/keys/"


@dataclass(frozen=True)
class KeyringSkeleton:
    """The parts of a keyring entry; ``path`` is empty when only a URL is given."""

    path: str = ""
    url: str = ""


def _split_pair(keyring: str) -> tuple[str, str]:
    if not keyring:
        raise ValueError("keyring string is empty")
    path, sep, url = keyring.partition("=")
    if not sep:
        raise ValueError(f"invalid keyring format: {keyring}")
    return path, url


@dataclass
class KeyringPars:
    """A keyring file path and the URL it is downloaded from."""

    path: str = ""
    url: str = ""

    def get_path_from_keyring(self, keyring: str) -> str:
        """Return the path part of a ``path=url`` keyring string."""
        path, _ = _split_pair(keyring)
        return path

    def get_url_from_keyring(self, keyring: str, enforce_https: bool) -> str:
        """Return the URL part of a ``path=url`` keyring string.

        With ``enforce_https`` the URL must start with ``https://``.
        """
        _, url = _split_pair(keyring)
        if enforce_https and not url.startswith("https://"):
            raise ValueError(f"URL does not use HTTPS: {url}")
        return url


def _url_scheme(url: str) -> str:
    """Return the lower-cased scheme of ``url``, or ``""`` when it has none."""
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in url):
        raise ValueError("invalid control character in URL")
    for index, ch in enumerate(url):
        if ch.isascii() and ch.isalpha():
            continue
        if ch.isascii() and (ch.isdigit() or ch in "+-."):
            if index == 0:
                return ""
            continue
        if ch == ":":
            if index == 0:
                raise ValueError("missing protocol scheme")
            return url[:index].lower()
        return ""
    return ""


def _validate_url(url: str, enforce_https: bool) -> None:
    scheme = _url_scheme(url)
    if not scheme:
        raise ValueError("missing URL scheme")
    if enforce_https and scheme != "https":
        raise ValueError("HTTPS is required")


def parse_keyring(keyring: str) -> KeyringSkeleton:
    """Split a keyring string into its path and URL.

    Raises ``ValueError`` when a path is given outside ``/etc/apk/keys/``.
    """
    path, sep, url = keyring.partition("=")
    if not sep:
        return KeyringSkeleton(url=path)
    if not path.startswith(KEYRING_PATH_PREFIX):
        raise ValueError(f"invalid keyring path: {path}")
    return KeyringSkeleton(path=path, url=url)


def validate_keyring(keyring: str, enforce_https: bool) -> None:
    """Raise ``ValueError`` unless the keyring has a valid path and URL."""
    skeleton = parse_keyring(keyring)
    _validate_url(skeleton.url, enforce_https)


def is_keyring_format_valid(keyrings: Iterable[str], enforce_https: bool = True) -> None:
    """Raise ``ValueError`` for the first keyring that is not well formed.

    Each entry must be ``path=url`` or ``url``, with exactly one ``=`` at most.
    HTTPS is required unless ``enforce_https`` is false.
    """
    for keyring in keyrings:
        parts = keyring.split("=")
        if len(parts) == 2:
            path, url = parts
            if not path.startswith(KEYRING_PATH_PREFIX):
                raise ValueError(f"invalid keyring path: {path}")
        elif len(parts) == 1:
            url = parts[0]
        else:
            raise ValueError(f"invalid keyring format: {keyring}")

        try:
            _validate_url(url, enforce_https)
        except ValueError as exc:
            raise ValueError(f"invalid keyring URL: {url}, error: {exc}") from exc