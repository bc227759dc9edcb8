"""Shell command generators for installing command-line tools in containers."""

from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass

DEFAULT_INSTALL_DIR = "/usr/local/bin"

_PLACEHOLDER_RE = re.compile(r"\{version\}|\{os\}|\{arch\}")


def _join(directory: str, name: str) -> str:
    return posixpath.normpath(posixpath.join(directory, name))


@dataclass
class GitHubAssetParams:
    """Where to find a GitHub release asset and how to install its binary.

    ``asset_pattern`` may hold the placeholders ``{version}``, ``{os}`` and
    ``{arch}``; when it is empty, ``asset_name`` is used as it is.
    """

    owner: str = ""
    repo: str = ""
    version: str = ""
    asset_pattern: str = ""
    asset_name: str = ""
    install_dir: str = ""
    binary_name: str = ""
    os: str = ""
    arch: str = ""
    extract_path: str = ""


@dataclass
class OpenTofuInstallParams:
    """Version of OpenTofu to install and the directory to install it in."""

    version: str = ""
    install_dir: str = ""


@dataclass
class TerraformInstallParams:
    """Version of Terraform to install and the directory to install it in."""

    version: str = ""
    install_dir: str = ""


@dataclass
class TerragruntInstallParams:
    """Version of Terragrunt to install and the directory to install it in."""

    version: str = ""
    install_dir: str = ""


def get_aws_cli_install_command(architecture: str = "") -> str:
    """Return a shell script that installs the AWS CLI.

    The architecture defaults to ``x86_64``; ``aarch64`` is mapped to ``arm64``.
    """
    if not architecture:
        architecture = "x86_64"
    if architecture == "aarch64":
        architecture = "arm64"

    url = f"https://awscli.amazonaws.com/awscli-exe-linux-{architecture}.zip"
    command = (
        "set -ex\n"
        f"curl -L {url} -o awscliv2.zip\n"
        "unzip awscliv2.zip\n"
        "sudo ./aws/install\n"
        "rm -rf awscliv2.zip aws\n"
    )
    return command.strip()


def get_github_asset_install_command(params: GitHubAssetParams) -> str:
    """Return a shell script that downloads a GitHub release asset and installs it.

    Tarballs (``.tar.gz``, ``.tgz``) and zip files are unpacked in ``/tmp`` and
    the binary at ``extract_path`` is moved into place; any other asset is
    downloaded straight to the install path. Raises ``ValueError`` when a
    required parameter is missing.
    """
    if not params.owner:
        raise ValueError("owner is required")
    if not params.repo:
        raise ValueError("repo is required")
    if not params.version:
        raise ValueError("version is required")
    if not params.asset_pattern and not params.asset_name:
        raise ValueError("either asset pattern or asset name is required")
    if not params.binary_name:
        raise ValueError("binary name is required")

    install_dir = params.install_dir or DEFAULT_INSTALL_DIR
    target_os = params.os or "linux"
    target_arch = params.arch or "amd64"
    extract_path = params.extract_path or params.binary_name

    version = params.version if params.version.startswith("v") else "v" + params.version

    if params.asset_pattern:
        replacements = {
            "{version}": version[1:],
            "{os}": target_os,
            "{arch}": target_arch,
        }
        asset = _PLACEHOLDER_RE.sub(lambda m: replacements[m.group(0)], params.asset_pattern)
    else:
        asset = params.asset_name

    install_path = _join(install_dir, params.binary_name)
    lowered = asset.lower()
    download_url = (
        f"https://github.com/{params.owner}/{params.repo}/releases/download/{version}/{asset}"
    )

    if lowered.endswith((".tar.gz", ".tgz")):
        unpack = f"cd /tmp && tar -xzf {asset}"
    elif lowered.endswith(".zip"):
        unpack = f"cd /tmp && unzip -o {asset}"
    else:
        return (
            "set -ex\n"
            f"curl -fL {download_url} -o {install_path}\n"
            f"chmod +x {install_path}"
        ).strip()

    return (
        "set -ex\n"
        f"curl -fL {download_url} -o /tmp/{asset}\n"
        f"{unpack}\n"
        f"mv /tmp/{extract_path} {install_path}\n"
        f"chmod +x {install_path}\n"
        f"rm -f /tmp/{asset}"
    ).strip()


def get_opentofu_install_command(params: OpenTofuInstallParams) -> str:
    """Return a shell script that installs the given OpenTofu version."""
    install_path = _join(params.install_dir or DEFAULT_INSTALL_DIR, "opentofu")
    version = params.version
    command = (
        "set -ex\n"
        'echo "Downloading OpenTofu..."\n'
        f'curl -L "https://github.com/opentofu/opentofu/releases/download/v{version}/'
        f'tofu_{version}_linux_amd64.zip" -o /tmp/opentofu.zip\n'
        "unzip /tmp/opentofu.zip -d /tmp\n"
        f"mv /tmp/tofu {install_path}\n"
        f"chmod +x {install_path}\n"
        "rm /tmp/opentofu.zip\n"
        'echo "OpenTofu installation completed successfully"\n'
        f"{install_path} version"
    )
    return command.strip()


def get_terraform_install_command(params: TerraformInstallParams) -> str:
    """Return a shell script that installs the given Terraform version."""
    install_path = _join(params.install_dir or DEFAULT_INSTALL_DIR, "terraform")
    version = params.version
    command = (
        "set -ex\n"
        f"curl -L https://releases.hashicorp.com/terraform/{version}/"
        f"terraform_{version}_linux_amd64.zip -o /tmp/terraform.zip\n"
        "unzip /tmp/terraform.zip -d /tmp\n"
        f"mv /tmp/terraform {install_path}\n"
        f"chmod +x {install_path}\n"
        "rm /tmp/terraform.zip"
    )
    return command.strip()


def get_terragrunt_install_command(params: TerragruntInstallParams) -> str:
    """Return a shell script that installs the given Terragrunt version."""
    install_path = _join(params.install_dir or "/usr/local/bin", "terragrunt")
    command = (
        "set -ex\n"
        f"curl -L https://github.com/gruntwork-io/terragrunt/releases/download/"
        f"v{params.version}/terragrunt_linux_amd64 -o {install_path}\n"
        f"chmod +x {install_path}"
    )
    return command.strip()