"""Configuration and command-line generation for apko image builds."""

from __future__ import annotations

import posixpath
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from daggerkit.fixtures import MNT_PREFIX

APKO_DEFAULT_REPOSITORY_URL = "cgr.dev/chainguard/apko"
APKO_WOLFI_SIGNING_RSA_KEY_PATH = "/etc/apk/keys/wolfi-signing.rsa.pub"
APKO_ALPINE_SIGNING_RSA_KEY_PATH = "/etc/apk/keys/[email]"


class Architecture(str, Enum):
    """CPU architectures supported by apko builds."""

    X86_64 = "x86_64"
    AARCH64 = "aarch64"
    ARMV7 = "armv7"
    PPC64LE = "ppc64le"
    S390X = "s390x"


@dataclass(frozen=True)
class KeyringInfo:
    """Where a signing key is downloaded from and where it is installed."""

    key_url: str
    key_path: str


_PRESETS = {
    "alpine": KeyringInfo(
        key_url="https://alpinelinux.org/keys/[email]",
        key_path="/etc/apk/keys/[email]",
    ),
    "wolfi": KeyringInfo(
        key_url="https://packages.wolfi.dev/os/wolfi-signing.rsa.pub",
        key_path="/etc/apk/keys/wolfi-signing.rsa.pub",
    ),
}


def _join(*parts: str) -> str:
    joined = posixpath.join(*parts)
    return posixpath.normpath(joined) if joined else ""


def _extension(path: str) -> str:
    name = path.rsplit("/", 1)[-1]
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


@dataclass
class ApkoBuilder:
    """Collects apko build settings and turns them into a command line."""

    config_file: str = ""
    output_image: str = ""
    tag: str = ""
    output_tarball: str = ""
    keyring_paths: list[str] = field(default_factory=list)
    cache_dir: str = ""
    extra_args: list[str] = field(default_factory=list)
    wolfi_keyring: bool = False
    alpine_keyring: bool = False
    build_arch: str = ""
    build_context: str = ""
    debug: bool = False
    keyring_append_plaintext: list[str] = field(default_factory=list)
    no_network: bool = False
    repository_append: list[str] = field(default_factory=list)
    timestamp: str = ""
    annotations: dict[str, str] = field(default_factory=dict)
    build_date: str = ""
    lockfile: str = ""
    offline: bool = False
    package_append: list[str] = field(default_factory=list)
    sbom: bool = False
    sbom_formats: list[str] = field(default_factory=list)
    sbom_path: str = ""
    vcs: bool = False
    log_level: str = ""
    log_policy: list[str] = field(default_factory=list)
    workdir: str = ""

    def with_build_arch(self, arch: Architecture | str) -> ApkoBuilder:
        """Set the target architecture."""
        self.build_arch = arch.value if isinstance(arch, Architecture) else str(arch)
        return self

    def with_config_file(self, config_file: str) -> ApkoBuilder:
        """Set the apko configuration file."""
        self.config_file = config_file
        return self

    def with_output_image(self, output_image: str) -> ApkoBuilder:
        """Set the output image name."""
        self.output_image = output_image
        return self

    def with_output_tarball(self, output_tarball: str) -> ApkoBuilder:
        """Set the path of the output tarball."""
        self.output_tarball = output_tarball
        return self

    def with_keyring(self, keyring_path: str) -> ApkoBuilder:
        """Add a keyring file."""
        self.keyring_paths.append(keyring_path)
        return self

    def with_wolfi_keyring(self) -> ApkoBuilder:
        """Mark the Wolfi keyring as wanted."""
        self.wolfi_keyring = True
        return self

    def with_alpine_keyring(self) -> ApkoBuilder:
        """Mark the Alpine keyring as wanted."""
        self.alpine_keyring = True
        return self

    def with_architecture(self, arch: str) -> ApkoBuilder:
        """Set the target architecture from a plain name."""
        self.build_arch = arch
        return self

    def with_cache_dir(self, cache_dir: str) -> ApkoBuilder:
        """Set the cache directory."""
        self.cache_dir = cache_dir
        return self

    def with_extra_arg(self, arg: str) -> ApkoBuilder:
        """Add an argument placed at the end of the command."""
        self.extra_args.append(arg)
        return self

    def with_build_context(self, directory: str) -> ApkoBuilder:
        """Set the build context directory."""
        self.build_context = directory
        return self

    def with_debug(self) -> ApkoBuilder:
        """Enable debug output."""
        self.debug = True
        return self

    def with_keyring_append_plaintext(self, keyring: str) -> ApkoBuilder:
        """Add a plaintext keyring."""
        self.keyring_append_plaintext.append(keyring)
        return self

    def with_no_network(self) -> ApkoBuilder:
        """Disable network access during the build."""
        self.no_network = True
        return self

    def with_repository_append(self, repo: str) -> ApkoBuilder:
        """Add a package repository."""
        self.repository_append.append(repo)
        return self

    def with_timestamp(self, timestamp: str) -> ApkoBuilder:
        """Set the timestamp used for reproducible builds."""
        self.timestamp = timestamp
        return self

    def with_tag(self, tag: str) -> ApkoBuilder:
        """Set the image tag; an empty tag becomes ``latest`` at build time."""
        self.tag = tag
        return self

    def with_annotations(self, annotations: Mapping[str, str]) -> ApkoBuilder:
        """Set the OCI annotations."""
        self.annotations = dict(annotations)
        return self

    def with_build_date(self, date: str) -> ApkoBuilder:
        """Set the build date."""
        self.build_date = date
        return self

    def with_lockfile(self, path: str) -> ApkoBuilder:
        """Set the lockfile path."""
        self.lockfile = path
        return self

    def with_offline(self) -> ApkoBuilder:
        """Enable offline mode."""
        self.offline = True
        return self

    def with_package_append(self, *args: str) -> ApkoBuilder:
        """Add extra packages."""
        self.package_append.extend(args)
        return self

    def with_sbom(self, enable: bool) -> ApkoBuilder:
        """Enable or disable SBOM generation."""
        self.sbom = enable
        return self

    def with_sbom_formats(self, *args: str) -> ApkoBuilder:
        """Replace the SBOM formats."""
        self.sbom_formats = list(args)
        return self

    def with_sbom_path(self, path: str) -> ApkoBuilder:
        """Set the SBOM output path."""
        self.sbom_path = path
        return self

    def with_vcs(self, enable: bool) -> ApkoBuilder:
        """Enable or disable VCS detection."""
        self.vcs = enable
        return self

    def with_log_level(self, level: str) -> ApkoBuilder:
        """Set the log level."""
        self.log_level = level
        return self

    def with_log_policy(self, *args: str) -> ApkoBuilder:
        """Replace the log policies."""
        self.log_policy = list(args)
        return self

    def with_workdir(self, directory: str) -> ApkoBuilder:
        """Set the working directory."""
        self.workdir = directory
        return self

    def with_key_ring_wolfi(self) -> ApkoBuilder:
        """Add the Wolfi signing key to the keyrings."""
        self.keyring_paths.append(get_keyring_info_for_preset("wolfi").key_path)
        return self

    def with_key_ring_alpine(self) -> ApkoBuilder:
        """Add the Alpine signing key to the keyrings."""
        self.keyring_paths.append(get_keyring_info_for_preset("alpine").key_path)
        return self

    def build_command(self) -> list[str]:
        """Return the ``apko build`` command line.

        Raises ``ValueError`` when the config file, output image or output
        tarball is missing. An empty tag is set to ``latest``.
        """
        if not self.config_file:
            raise ValueError("config file is required")
        if not self.output_image:
            raise ValueError("output image name is required")
        if not self.output_tarball:
            raise ValueError("output tarball path is required")

        if not self.tag:
            self.tag = "latest"

        cmd = ["apko", "build"]
        if self.cache_dir:
            cmd += ["--cache-dir", self.cache_dir]
        for keyring in self.keyring_paths:
            cmd += ["--keyring-append", keyring]
        if self.build_arch:
            cmd += ["--arch", self.build_arch]
        if self.build_context:
            cmd += ["--build-repository-append", self.build_context]
        if not self.sbom:
            cmd.append("--sbom=false")
        if not self.vcs:
            cmd.append("--vcs=false")

        cmd += [self.config_file, f"{self.output_image}:{self.tag}", self.output_tarball]
        cmd += self.extra_args
        return cmd


def get_keyring_info_for_preset(preset: str) -> KeyringInfo:
    """Return the signing key for the ``alpine`` or ``wolfi`` preset."""
    try:
        return _PRESETS[preset]
    except KeyError:
        raise ValueError(f"unsupported preset: {preset}") from None


def get_cache_dir(mnt_prefix: str = "") -> str:
    """Return the apko cache directory under the mount prefix."""
    return _join(mnt_prefix or MNT_PREFIX, "var", "cache", "apko")


def get_apko_config_or_preset(mnt_prefix: str, cfg_file: str) -> str:
    """Return ``cfg_file`` if it names a ``.yaml`` or ``.yml`` file."""
    if not cfg_file:
        raise ValueError("config file is required")
    ext = _extension(cfg_file)
    if not ext:
        raise ValueError("config file must have an extension")
    if ext not in (".yaml", ".yml"):
        raise ValueError("config file must have a .yaml or .yml extension")
    return cfg_file


def get_output_tar_path(mnt_prefix: str) -> str:
    """Return the path of the output tarball under the mount prefix."""
    return _join(mnt_prefix, "image.tar")