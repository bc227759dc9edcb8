"""Container image naming defaults and image reference validation."""

from __future__ import annotations

import re
from dataclasses import dataclass

from daggerkit.fixtures import IMAGE

_REGISTRY_RE = re.compile(r"[a-zA-Z0-9]+(?:[.-][a-zA-Z0-9]+)*(:[0-9]+)?")
_NAME_RE = re.compile(r"[a-zA-Z0-9]+(?:[._-][a-zA-Z0-9]+)*")
_TAG_RE = re.compile(r"[a-zA-Z0-9_.-]+")
_DIGEST_RE = re.compile(r"[A-Za-z0-9_+.-]+:[a-fA-F0-9]{64}")

_MAX_COMPONENTS = 4


@dataclass
class BaseContainerOpts:
    """Image name and version, each with a fallback used when it is empty."""

    image: str = ""
    version: str = ""
    fallback_image: str = ""
    fallback_version: str = ""


def set_default_image_name_if_empty(image: str, fallback_image: str) -> str:
    """Return ``image``, else ``fallback_image``, else the default image."""
    return image or fallback_image or IMAGE


def set_default_image_version_if_empty(version: str, fallback_version: str) -> str:
    """Return ``version``, else ``fallback_version``, else ``"latest"``."""
    return version or fallback_version or "latest"


def get_image_url(opts: BaseContainerOpts | None) -> str:
    """Return ``image:version`` built from ``opts`` with fallbacks applied."""
    if opts is None:
        raise ValueError("failed to create base container: opts is nil")
    image = set_default_image_name_if_empty(opts.image, opts.fallback_image)
    version = set_default_image_version_if_empty(opts.version, opts.fallback_version)
    return f"{image}:{version}"


def validate_image_url(image_url: str) -> bool:
    """Return ``True`` for a well-formed image reference; raise ``ValueError`` otherwise."""
    if not image_url:
        raise ValueError("image URL cannot be empty")

    parts = image_url.split("/")
    for part in parts[:-1]:
        if "@" in part:
            raise ValueError(f"invalid '@' character in repository name: {part}")

    if len(parts) > _MAX_COMPONENTS:
        raise ValueError("too many components in image URL")

    has_registry = len(parts) >= 2 and "." in parts[0]
    if has_registry and not _REGISTRY_RE.fullmatch(parts[0]):
        raise ValueError(f"invalid registry: {parts[0]}")

    start = 1 if has_registry else 0
    for index, part in enumerate(parts[start:-1], start=start):
        if not _NAME_RE.fullmatch(part):
            raise ValueError(f"invalid {_component_name(index, len(parts))}: {part}")

    _validate_last_part(parts[-1])
    return True


def _component_name(index: int, total: int) -> str:
    return "repository" if index == total - 2 else "namespace"


def _validate_last_part(last_part: str) -> None:
    tag_part, at, digest = last_part.partition("@")
    if at and not digest.startswith(("sha256:", "sha512:")):
        raise ValueError(f"invalid repository name: {last_part}")

    repo_name, colon, tag = tag_part.partition(":")
    if not _NAME_RE.fullmatch(repo_name):
        raise ValueError(f"invalid repository name: {repo_name}")

    if colon:
        if not tag:
            raise ValueError("tag cannot be empty")
        if not _TAG_RE.fullmatch(tag):
            raise ValueError(f"invalid tag: {tag}")

    if digest and not _DIGEST_RE.fullmatch(digest):
        raise ValueError(f"invalid digest: {digest}")